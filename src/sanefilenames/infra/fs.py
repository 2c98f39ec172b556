from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the filesystem capability used by the renamer (entry typing,
directory listing and atomic rename) together with cross-platform path
helpers. Acts as an abstraction over the 'os' module so the traversal can
be exercised against a substitute implementation in tests.
"""

import os
import stat
import sys
from typing import List, Optional, Tuple

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "SaneFilenames"
UNIX_APP_DIR_NAME = ".sanefilenames"

# Leaf names that never take part in renaming
UNRENAMEABLE_LEAVES = ("", os.curdir, os.pardir)

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Standards:
    - Windows: %LOCALAPPDATA%/SaneFilenames
    - Linux/Mac: ~/.sanefilenames

    The directory is only resolved, never created: the tool reads its
    configuration from there and writes nothing.

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    # Windows specific resolution
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles user home shortcuts (~/) and environment variables ($VAR/%VAR%).
    Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def split_leaf(path: str) -> Tuple[str, str]:
    """
    Decompose a path into its directory part and its leaf name.

    Trailing separators are ignored so that 'a/b/' yields ('a', 'b').
    """
    trimmed = path.rstrip(os.sep)
    if os.altsep:
        trimmed = trimmed.rstrip(os.altsep)
    if not trimmed:
        # Filesystem root ('/')
        return path, ""
    return os.path.split(trimmed)


def is_renameable_leaf(name: str) -> bool:
    """Return True unless the leaf is empty or a '.'/'..' reference."""
    return name not in UNRENAMEABLE_LEAVES


def display_path(path: str) -> str:
    """
    Render a path for terminal and log output.

    Names whose bytes are not valid in the filesystem encoding come back
    from os.listdir with surrogate escapes, which no strict text stream can
    write. Those bytes are shown as '\\xNN' instead.
    """
    return os.fsencode(path).decode(sys.getfilesystemencoding(), "backslashreplace")

# -----------------------------------------------------------------------------
# FILESYSTEM CAPABILITY
# -----------------------------------------------------------------------------

class FileSystem:
    """
    Raw filesystem primitives consumed by the tree renamer.

    Every method raises OSError on failure; callers decide whether the
    failure is fatal.
    """

    def is_dir(self, path: str) -> bool:
        """
        Report whether the entry is a real directory.

        Uses lstat so symbolic links are never followed: a link to a
        directory is handled as a plain entry.
        """
        st = os.lstat(path)
        return stat.S_ISDIR(st.st_mode)

    def list_dir(self, path: str) -> List[str]:
        """Return child names in the order the filesystem reports them."""
        return os.listdir(path)

    def rename(self, src: str, dst: str) -> None:
        """Atomically rename 'src' to 'dst' within the same filesystem."""
        os.rename(src, dst)
