from __future__ import annotations

"""
Configuration Domain Management.

Provides the default runtime configuration, reads optional user defaults
from a JSON file in the user data directory, and freezes the validated
result into the immutable RenamerConfig handed to the traversal.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from sanefilenames.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"


def get_config_file() -> str:
    """Return the location of the optional user configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Modes
        "debug": False,
        "confirm": False,
        "rename_directories": False,
        "string_mode": False,
        "dry_run": False,

        # Policies
        "stop_on_decline": False,
        "strict_exit": False,

        # Diagnostics
        "log_file": "",
    }


# -----------------------------------------------------------------------------
# Immutable Runtime Model
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class RenamerConfig:
    """
    Validated, immutable configuration threaded through a run.

    Attributes:
        debug: Verbose diagnostics on stderr; never alters renaming.
        confirm: Ask the operator before each rename.
        rename_directories: Rename directory entries, not only their contents.
        string_mode: Normalize names read from a stream instead of a tree.
        dry_run: Compute renames without applying them.
        stop_on_decline: A declined confirmation ends the whole run.
        strict_exit: Failed renames make the process exit non-zero.
        log_file: Optional rotating log file path ('' disables it).
    """
    debug: bool = False
    confirm: bool = False
    rename_directories: bool = False
    string_mode: bool = False
    dry_run: bool = False
    stop_on_decline: bool = False
    strict_exit: bool = False
    log_file: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RenamerConfig":
        """Build from a validated configuration dict, ignoring unknown keys."""
        known = set(cls.__dataclass_fields__)
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load user defaults from disk, merged over the built-in defaults.

    A missing file is the normal case. A corrupted file is reported and
    ignored rather than aborting the run.

    Args:
        path: Explicit config file location (defaults to the user data dir).

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    config = get_default_config()
    config_file = path or get_config_file()

    if not os.path.exists(config_file):
        logger.debug(f"Config file not found at {config_file}. Using defaults.")
        return config

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config from {config_file}: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Using defaults.")
        return config

    unknown = sorted(k for k in data if k not in config)
    if unknown:
        logger.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")

    config.update({k: v for k, v in data.items() if k in config})
    logger.debug(f"Configuration loaded from {config_file}")
    return config
