from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Short and long flags map to configuration keys.
2. Absent flags map to None so config file values survive the merge.
3. Positional paths and the --log-file value.
"""

import pytest

from sanefilenames.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_cli_short_flags_mapping():
    """Verify the single-letter flags are mapped to config overrides."""
    args = parse_args(["-d", "-c", "-D", "-s", "-n"])

    overrides = args_to_overrides(args)

    assert overrides["debug"] is True
    assert overrides["confirm"] is True
    assert overrides["rename_directories"] is True
    assert overrides["string_mode"] is True
    assert overrides["dry_run"] is True


def test_cli_long_flags_mapping():
    args = parse_args(["--confirm", "--directories", "--stop-on-decline", "--strict"])

    overrides = args_to_overrides(args)

    assert overrides["confirm"] is True
    assert overrides["rename_directories"] is True
    assert overrides["stop_on_decline"] is True
    assert overrides["strict_exit"] is True


def test_cli_absent_flags_do_not_override():
    overrides = args_to_overrides(parse_args([]))

    assert all(value is None for value in overrides.values())


def test_cli_positional_paths():
    args = parse_args(["-D", "one", "two dir", "three"])

    assert args.paths == ["one", "two dir", "three"]


def test_cli_paths_are_optional_at_parse_time():
    """Missing paths are reported by the app, after the -s check."""
    assert parse_args(["-s"]).paths == []


def test_cli_log_file_value():
    assert parse_args(["--log-file", "/tmp/x.log"]).log_file == "/tmp/x.log"
    assert parse_args([]).log_file is None


def test_cli_log_file_does_not_swallow_paths():
    """The value after --log-file is always the log file; paths stay positional."""
    args = parse_args(["--log-file", "run.log", "Music", "Photos"])

    assert args.log_file == "run.log"
    assert args.paths == ["Music", "Photos"]


def test_cli_log_file_requires_a_value():
    with pytest.raises(SystemExit) as exc:
        parse_args(["--log-file"])
    assert exc.value.code == 2
