from __future__ import annotations

"""
Logging Core Orchestrator.

Maintains the idempotent lifecycle of the logging subsystem. Log records are
routed through a QueueHandler/QueueListener pair so that handler I/O runs off
the traversal thread. The listener can be drained on demand, which lets the
CLI print prompts and its end-of-run report only after every pending
diagnostic line.
"""

import atexit
import logging
import os
import queue
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from typing import List, Optional

from sanefilenames.infra.logging.config import (
    CONSOLE_FORMAT,
    DATE_FORMAT,
    FILE_FORMAT,
    LEVELS,
    LOG_FILE_MAX_BYTES,
    LOG_FILE_BACKUPS,
    LoggingConfig,
)

# Attributes set on the root logger and on the handlers we install
_CONFIGURED_FLAG_ATTR: str = "_sanefilenames_configured"
_QUEUE_LISTENER_ATTR: str = "_sanefilenames_queue_listener"
_HANDLER_TAG_ATTR: str = "_sanefilenames_handler"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Install the stderr handler (and the optional file handler) behind a queue.

    A second call is a no-op unless 'force' is set, in which case the
    previous listener is stopped and its handlers replaced.

    Args:
        cfg: Verbosity and optional log file.
        force: Re-initialize even if logging is already configured.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()

    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    level = LEVELS.get(str(cfg.level or "").strip().upper(), logging.INFO)
    root.setLevel(level)

    _detach(root)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    handlers: List[logging.Handler] = [console]

    if cfg.log_file:
        fh = _open_log_file(cfg.log_file)
        if fh:
            handlers.append(fh)

    for h in handlers:
        h.setLevel(level)

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    queue_handler = QueueHandler(log_queue)
    setattr(queue_handler, _HANDLER_TAG_ATTR, True)

    listener = QueueListener(log_queue, *handlers, respect_handler_level=True)
    listener.start()
    root.addHandler(queue_handler)

    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)

    atexit.register(_stop_listener, listener)
    return root


def flush_logging() -> None:
    """
    Drain every queued record to its handlers, then resume listening.

    Called before output that must not interleave with diagnostics
    (interactive prompts, the final failure report).
    """
    listener = getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR, None)
    if listener is None:
        return

    _stop_listener(listener)
    listener.start()
    for h in listener.handlers:
        h.flush()


def get_logger(name: str) -> logging.Logger:
    """Return the named logger; records propagate to the queue on the root."""
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _open_log_file(path: str) -> Optional[RotatingFileHandler]:
    """
    Open the rotating diagnostic log, creating its directory if needed.

    A log file that cannot be opened must not stop a rename run: the problem
    is reported on stderr and None is returned.
    """
    try:
        parent = os.path.dirname(os.path.abspath(path))
        os.makedirs(parent, exist_ok=True)
        fh = RotatingFileHandler(
            path,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: cannot open log file '{path}': {e}\n")
        return None

    fh.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    return fh


def _detach(root: logging.Logger) -> None:
    """Stop our listener and remove the queue handler from the root logger."""
    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener is not None:
        _stop_listener(listener)
        for h in listener.handlers:
            h.close()
        setattr(root, _QUEUE_LISTENER_ATTR, None)

    for h in list(root.handlers):
        if getattr(h, _HANDLER_TAG_ATTR, False):
            root.removeHandler(h)
            h.close()


def _stop_listener(listener: QueueListener) -> None:
    """
    Stop a QueueListener, tolerating listeners that were already stopped.

    QueueListener.stop() on a stopped listener fails, which happens in
    atexit after a test reset or after flush_logging().
    """
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
