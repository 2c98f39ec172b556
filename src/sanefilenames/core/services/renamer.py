from __future__ import annotations

"""
Tree Renaming Service.

Walks one or more root paths depth-first and renames every entry whose
leaf name is not already normalized. Traversal is bottom-up: a directory's
children are visited (and renamed) before the directory itself, so no path
used by an in-progress listing is ever invalidated.

Failures are recovered locally. A rename the filesystem refuses is
recorded in the run report and the walk moves on; a directory that cannot
be inspected or listed is recorded and its subtree skipped. Only a failed
confirmation read escapes to the caller.
"""

import logging
import os
from typing import Iterable, Optional, TextIO

from sanefilenames.core.processing.normalizer import normalize, normalize_stream
from sanefilenames.core.services.confirm import Confirmer
from sanefilenames.domain.config import RenamerConfig
from sanefilenames.domain.models import PendingRename, RenameFailure, RenameReport
from sanefilenames.infra.fs import FileSystem, display_path, is_renameable_leaf, split_leaf

logger = logging.getLogger(__name__)


# ==============================================================================
# TREE RENAMER
# ==============================================================================

class TreeRenamer:
    """
    Bottom-up renamer over filesystem trees.

    The renamer itself is stateless between runs: every run creates a fresh
    RenameReport and threads it through the recursive visit.
    """

    def __init__(
            self,
            config: RenamerConfig,
            fs: Optional[FileSystem] = None,
            confirmer: Optional[Confirmer] = None,
    ) -> None:
        self._config = config
        self._fs = fs or FileSystem()
        self._confirmer = confirmer or Confirmer()

    def run(self, roots: Iterable[str]) -> RenameReport:
        """
        Process every root path in order.

        Args:
            roots: Files or directories to normalize.

        Returns:
            RenameReport: Everything that was renamed, declined or failed.

        Raises:
            EOFError, OSError: The confirmation prompt could not be read.
        """
        report = RenameReport()
        for root in roots:
            if report.aborted:
                break
            logger.debug(f"Processing root: {display_path(root)}")
            self.visit(root, report)
        return report

    def visit(self, path: str, report: RenameReport) -> None:
        """Process one entry, children first when it is a directory."""
        try:
            is_dir = self._fs.is_dir(path)
        except OSError as e:
            self._record_traversal_error(path, e, report)
            return

        if is_dir:
            try:
                children = self._fs.list_dir(path)
            except OSError as e:
                self._record_traversal_error(path, e, report)
                return

            for child in children:
                self.visit(os.path.join(path, child), report)
                if report.aborted:
                    return

        self._process_entry(path, is_dir, report)

    # --------------------------------------------------------------------------
    # PRIVATE HELPERS
    # --------------------------------------------------------------------------

    def _process_entry(self, path: str, is_dir: bool, report: RenameReport) -> None:
        """Decide on, and apply, the rename of a single entry."""
        directory, leaf = split_leaf(path)
        if not is_renameable_leaf(leaf):
            return

        result = normalize(leaf)
        if not result.changed:
            report.unchanged += 1
            return

        if not is_renameable_leaf(result.name):
            logger.debug(f"Left as is, would become '{result.name}': {display_path(path)}")
            report.unchanged += 1
            return

        if is_dir and not self._config.rename_directories:
            logger.debug(f"Directory left as is: {display_path(path)}")
            report.skipped_dirs += 1
            return

        pending = PendingRename(
            original_path=path,
            target_path=os.path.join(directory, result.name),
            is_dir=is_dir,
        )
        self._apply(pending, report)

    def _apply(self, pending: PendingRename, report: RenameReport) -> None:
        if self._config.dry_run:
            logger.info(f"Would rename {pending}")
            report.planned.append(pending)
            return

        if self._config.confirm and not self._confirmer.ask(pending):
            logger.debug(f"Declined: {pending}")
            report.declined.append(pending)
            if self._config.stop_on_decline:
                logger.warning("Rename declined; stopping the run.")
                report.aborted = True
            return

        try:
            self._fs.rename(pending.original_path, pending.target_path)
        except OSError as e:
            failure = RenameFailure(
                original_path=pending.original_path,
                target_path=pending.target_path,
                error=e.strerror or str(e),
            )
            logger.debug(str(failure))
            report.failures.append(failure)
            return

        logger.info(f"Renamed {pending}")
        report.renamed.append(pending)

    @staticmethod
    def _record_traversal_error(path: str, error: OSError, report: RenameReport) -> None:
        msg = f"cannot read {display_path(path)}: {error.strerror or error}"
        logger.error(msg)
        report.traversal_errors.append(msg)


# ==============================================================================
# FACADE API
# ==============================================================================

def run_renamer(
        roots: Iterable[str],
        config: RenamerConfig,
        *,
        fs: Optional[FileSystem] = None,
        confirmer: Optional[Confirmer] = None,
) -> RenameReport:
    """Rename every entry under 'roots' according to 'config'."""
    return TreeRenamer(config, fs=fs, confirmer=confirmer).run(roots)


def run_string_mode(input_stream: TextIO, output_stream: TextIO) -> int:
    """
    Normalize bare names read line by line, writing one result per line.

    Stops cleanly at end of input.

    Returns:
        int: Number of lines processed.
    """
    count = 0
    for name in normalize_stream(input_stream):
        output_stream.write(name + "\n")
        count += 1
    output_stream.flush()
    logger.debug(f"String mode processed {count} line(s)")
    return count
