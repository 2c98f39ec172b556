from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Isolation of the user data directory and the logging subsystem.
3. Shared fixtures building messy directory trees.
"""

import logging
import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from sanefilenames.infra.logging import (  # noqa: E402
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
)


# -----------------------------------------------------------------------------
# Isolation Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_home(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the user data directory at a throwaway home."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.setenv("LOCALAPPDATA", str(home / "AppData" / "Local"))
    return home


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach our handlers and stop the queue listener around each test."""
    _reset_root_logger()
    yield
    _reset_root_logger()


def _reset_root_logger() -> None:
    root = logging.getLogger()

    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener is not None:
        if getattr(listener, "_thread", None) is not None:
            listener.stop()
        for h in listener.handlers:
            h.close()
    setattr(root, _QUEUE_LISTENER_ATTR, None)

    for h in list(root.handlers):
        if getattr(h, _HANDLER_TAG_ATTR, False):
            root.removeHandler(h)
            h.close()

    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)
    root.setLevel(logging.WARNING)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def messy_tree(tmp_path: Path) -> Path:
    """
    Create a directory tree full of unsafe names.

    Structure:
    /root
      /My Documents
        Annual Report.PDF
        /Tax & Receipts
          Receipt #1.jpg
      /photos
        Beach-Day.JPG
        ok.png
      Read Me.txt
    """
    root = tmp_path / "root"
    docs = root / "My Documents"
    tax = docs / "Tax & Receipts"
    photos = root / "photos"
    tax.mkdir(parents=True)
    photos.mkdir()

    (docs / "Annual Report.PDF").write_text("report", encoding="utf-8")
    (tax / "Receipt #1.jpg").write_text("receipt", encoding="utf-8")
    (photos / "Beach-Day.JPG").write_text("beach", encoding="utf-8")
    (photos / "ok.png").write_text("ok", encoding="utf-8")
    (root / "Read Me.txt").write_text("readme", encoding="utf-8")

    return root
