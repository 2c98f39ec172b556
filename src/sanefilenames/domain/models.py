from __future__ import annotations

"""
Renaming Domain Data Models.

Defines the data structures exchanged between the normalizer, the tree
renamer and the interface layer. Every object lives for a single run:
created while an entry is visited and discarded once the run is reported.
"""

from dataclasses import dataclass, field
from typing import List

from sanefilenames.infra.fs import display_path

# -----------------------------------------------------------------------------
# NORMALIZATION MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class NormalizationResult:
    """
    Outcome of normalizing a single leaf name.

    Attributes:
        name: The normalized name.
        changed: True iff 'name' differs from the input name.
    """
    name: str
    changed: bool

# -----------------------------------------------------------------------------
# RENAME MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PendingRename:
    """
    An entry whose normalized name differs from its current one.

    Attributes:
        original_path: Path of the entry as currently present on disk.
        target_path: Same directory, normalized leaf name.
        is_dir: Whether the entry is a directory.
    """
    original_path: str
    target_path: str
    is_dir: bool = False

    def __str__(self) -> str:
        return f"{display_path(self.original_path)} -> {display_path(self.target_path)}"


@dataclass(frozen=True)
class RenameFailure:
    """
    Encapsulates a rename that the filesystem refused.

    Attributes:
        original_path: Source path of the attempted rename.
        target_path: Destination path of the attempted rename.
        error: Description of the underlying OS error.
    """
    original_path: str
    target_path: str
    error: str

    def __str__(self) -> str:
        return (
            f"failed to rename {display_path(self.original_path)} "
            f"to {display_path(self.target_path)}: {self.error}"
        )


@dataclass
class RenameReport:
    """
    Accumulator filled in by a single tree-renaming run.

    Passed explicitly through the recursive traversal; nothing outside the
    run holds a reference to it.

    Attributes:
        renamed: Renames that were applied.
        declined: Renames rejected at the confirmation prompt.
        planned: Renames computed during a dry run (never applied).
        failures: Renames that the filesystem refused.
        traversal_errors: Paths that could not be inspected or listed.
        unchanged: Number of entries whose name was already safe.
        skipped_dirs: Directories left alone because directory renaming is off.
        aborted: True when the run stopped at a declined confirmation.
    """
    renamed: List[PendingRename] = field(default_factory=list)
    declined: List[PendingRename] = field(default_factory=list)
    planned: List[PendingRename] = field(default_factory=list)
    failures: List[RenameFailure] = field(default_factory=list)
    traversal_errors: List[str] = field(default_factory=list)
    unchanged: int = 0
    skipped_dirs: int = 0
    aborted: bool = False

    @property
    def errors(self) -> List[str]:
        """The error log: one formatted message per failed rename, in order."""
        return [str(f) for f in self.failures]

    @property
    def ok(self) -> bool:
        """True when no rename failed and every path could be traversed."""
        return not self.failures and not self.traversal_errors

    def summary(self) -> dict:
        """Execution statistics keyed by label."""
        return {
            "renamed": len(self.renamed),
            "planned": len(self.planned),
            "declined": len(self.declined),
            "unchanged": self.unchanged,
            "skipped_dirs": self.skipped_dirs,
            "failed": len(self.failures),
            "unreadable": len(self.traversal_errors),
        }
