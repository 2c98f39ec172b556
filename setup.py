# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="sanefilenames",
    version="0.1.0",
    description="Rename files and directory trees to safe, lowercase, shell-friendly names",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["sanefilenames*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "tests": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'sanefilenames=sanefilenames.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
