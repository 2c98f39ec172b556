from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, resolution of the
configuration hierarchy (defaults, user config file, CLI overrides), run
dispatch (string-stream mode or tree renaming), and rendering of the
end-of-run report.
"""

import io
import json
import sys
from typing import Any, Dict, List, Optional

from sanefilenames.core.services.renamer import run_renamer, run_string_mode
from sanefilenames.core.services.validator import validate_config
from sanefilenames.domain.config import RenamerConfig, get_default_config, load_config
from sanefilenames.domain.models import RenameReport
from sanefilenames.infra.fs import normalize_path
from sanefilenames.infra.logging import (
    LoggingConfig,
    configure_logging,
    flush_logging,
    get_logger,
)
from sanefilenames.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console only until the config is resolved)
    configure_logging(LoggingConfig(level="DEBUG" if args.debug else "INFO"))

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 3. Resolve base configuration (defaults vs user config file)
    base_conf = get_default_config() if args.use_defaults else load_config()

    # 4. Merge command-line overrides and validate
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(base_conf, overrides)
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    config = RenamerConfig.from_dict(clean_conf)

    # Re-bootstrap when the config file asks for more than the flags did
    if config.debug != args.debug or config.log_file:
        log_file = normalize_path(config.log_file, "") if config.log_file else None
        configure_logging(
            LoggingConfig(level="DEBUG" if config.debug else "INFO", log_file=log_file),
            force=True,
        )

    if args.dump_config:
        print(json.dumps(config.to_dict(), ensure_ascii=False, indent=2))
        return 0

    # 5. String-stream mode bypasses the filesystem entirely
    if config.string_mode:
        if args.paths:
            logger.warning(f"String mode: ignoring {len(args.paths)} path argument(s).")
        _tolerate_undecodable_input(sys.stdin)
        run_string_mode(sys.stdin, sys.stdout)
        return 0

    if not args.paths:
        parser.error("at least one PATH is required unless -s is given")

    # 6. Tree renaming phase
    try:
        report = run_renamer(args.paths, config)
    except KeyboardInterrupt:
        flush_logging()
        print("Interrupted.", file=sys.stderr)
        return 130
    except (EOFError, OSError) as e:
        logger.critical(f"Confirmation aborted: {e}")
        flush_logging()
        print(f"ERROR: cannot read confirmation: {e}", file=sys.stderr)
        return 1

    # 7. Report rendering phase
    flush_logging()
    _print_human_summary(report, config)
    _print_failures(report)

    if config.strict_exit and not report.ok:
        return 1
    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    None values mean 'not given on the command line' and never replace
    a base value.
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out


def _tolerate_undecodable_input(stream: Any) -> None:
    """
    Let bytes that do not decode pass through as surrogate escapes.

    A name in a foreign or broken encoding is still a name to normalize:
    its undecodable bytes end up as underscores like any unsafe character.
    """
    if isinstance(stream, io.TextIOWrapper):
        stream.reconfigure(errors="surrogateescape")

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(report: RenameReport, config: RenamerConfig) -> None:
    """Print dry-run plans and the execution statistics to stdout."""
    if config.dry_run:
        print("DRY RUN - nothing was renamed.")
        for pending in report.planned:
            print(f"  {pending}")

    if report.aborted:
        print("Stopped at a declined rename; remaining entries were not processed.")

    stats = report.summary()
    labels = {
        "renamed": "Renamed",
        "planned": "Planned",
        "declined": "Declined",
        "unchanged": "Unchanged",
        "skipped_dirs": "Directories skipped",
        "failed": "Failed",
        "unreadable": "Unreadable",
    }
    parts = [f"{label}: {stats[key]}" for key, label in labels.items() if stats[key] or key == "renamed"]
    print(" | ".join(parts))
    sys.stdout.flush()


def _print_failures(report: RenameReport) -> None:
    """
    Print the error log as one delimited block on stderr.

    Every failed rename and unreadable path gets its own line.
    """
    lines = report.errors + report.traversal_errors
    if not lines:
        return

    print("=" * 80, file=sys.stderr)
    print(f"FAILURES ({len(lines)}):", file=sys.stderr)
    print("=" * 80, file=sys.stderr)
    for line in lines:
        print(line, file=sys.stderr)
    sys.stderr.flush()

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
