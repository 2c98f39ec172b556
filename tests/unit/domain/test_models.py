from __future__ import annotations

"""
Unit tests for the Renaming Domain Models.

Verifies:
1. Error log formatting of RenameFailure.
2. RenameReport aggregation helpers (errors, ok, summary).
3. Immutability of value objects.
"""

import dataclasses

import pytest

from sanefilenames.domain.models import (
    NormalizationResult,
    PendingRename,
    RenameFailure,
    RenameReport,
)


def test_rename_failure_message_format() -> None:
    failure = RenameFailure("a/My File", "a/my_file", "File exists")
    assert str(failure) == "failed to rename a/My File to a/my_file: File exists"


def test_pending_rename_str() -> None:
    assert str(PendingRename("x/A B", "x/a_b")) == "x/A B -> x/a_b"


def test_value_objects_are_frozen() -> None:
    result = NormalizationResult(name="a", changed=False)
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.name = "b"  # type: ignore[misc]


def test_report_errors_keep_order() -> None:
    report = RenameReport()
    report.failures.append(RenameFailure("1", "one", "boom"))
    report.failures.append(RenameFailure("2", "two", "bang"))

    assert report.errors == [
        "failed to rename 1 to one: boom",
        "failed to rename 2 to two: bang",
    ]


def test_report_ok_reflects_failures_and_traversal_errors() -> None:
    assert RenameReport().ok is True
    assert RenameReport(traversal_errors=["cannot read x"]).ok is False
    assert RenameReport(failures=[RenameFailure("a", "b", "c")]).ok is False


def test_report_summary_counts() -> None:
    report = RenameReport(
        renamed=[PendingRename("A", "a")],
        declined=[PendingRename("B", "b"), PendingRename("C", "c")],
        unchanged=5,
    )

    assert report.summary() == {
        "renamed": 1,
        "planned": 0,
        "declined": 2,
        "unchanged": 5,
        "skipped_dirs": 0,
        "failed": 0,
        "unreadable": 0,
    }


def test_reports_do_not_share_state() -> None:
    first = RenameReport()
    first.renamed.append(PendingRename("A", "a"))
    assert RenameReport().renamed == []


def test_undecodable_names_render_as_byte_escapes() -> None:
    """Surrogate-escaped names must survive a strict UTF-8 terminal."""
    pending = PendingRename("d/Bad\udcff Name", "d/bad_name")
    failure = RenameFailure("d/Bad\udcff Name", "d/bad_name", "File exists")

    assert str(pending).startswith("d/Bad\\x")
    assert str(pending).endswith(" Name -> d/bad_name")
    str(pending).encode("utf-8")
    str(failure).encode("utf-8")
