from __future__ import annotations

"""
Logging Settings.

The CLI only chooses a verbosity and, optionally, a diagnostic log file.
Formats and rotation limits are fixed.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

LEVELS: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# stderr carries the same lines the operator sees during a run
CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_FILE_MAX_BYTES = 1024 * 1024
LOG_FILE_BACKUPS = 3


@dataclass(frozen=True)
class LoggingConfig:
    """
    Verbosity and destination of the diagnostic stream.

    Attributes:
        level: Level name ('DEBUG' when -d is given). Unknown names mean INFO.
        log_file: Rotating log file receiving a copy of every record, or None.
    """
    level: str = "INFO"
    log_file: Optional[str] = None
