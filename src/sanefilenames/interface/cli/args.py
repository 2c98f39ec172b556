from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema, including help messages,
argument types, and defaults. Provides logic to translate raw argparse
namespaces into domain-compatible configuration overrides.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the sanefilenames CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="sanefilenames",
        description=(
            "Rename files (and optionally directories) to lowercase ASCII "
            "letters, digits, dots and single underscores."
        ),
    )

    p.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help="Files or directory trees to rename (required unless -s is given).",
    )

    # --- Modes ---
    p.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Print debug diagnostics on stderr.",
    )
    p.add_argument(
        "-c", "--confirm",
        action="store_true",
        help="Ask for confirmation before each rename.",
    )
    p.add_argument(
        "-D", "--directories",
        dest="rename_directories",
        action="store_true",
        help="Rename directories too, not only the files inside them.",
    )
    p.add_argument(
        "-s", "--strings",
        dest="string_mode",
        action="store_true",
        help="Read names from stdin and write their normalized form to stdout.",
    )
    p.add_argument(
        "-n", "--dry-run",
        action="store_true",
        help="Show the renames that would be made without applying them.",
    )

    # --- Policies ---
    p.add_argument(
        "--stop-on-decline",
        action="store_true",
        help="End the whole run at the first declined confirmation.",
    )
    p.add_argument(
        "--strict",
        dest="strict_exit",
        action="store_true",
        help="Exit with status 1 when any rename or directory listing failed.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--log-file",
        default=None,
        metavar="FILE",
        help="Also write diagnostics to the rotating log FILE.",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the user configuration file.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Flags only switch features on, so an absent flag maps to None and
    leaves the value from the configuration file in place.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    for key in (
        "debug", "confirm", "rename_directories", "string_mode", "dry_run",
        "stop_on_decline", "strict_exit",
    ):
        overrides[key] = True if getattr(args, key) else None

    overrides["log_file"] = args.log_file

    return overrides
