from __future__ import annotations

"""
Interactive Confirmation Service.

Asks the operator to approve each proposed rename. The traversal blocks on
every prompt; there is no batching and no look-ahead.
"""

import sys
from typing import Optional, TextIO

from sanefilenames.domain.models import PendingRename
from sanefilenames.infra.logging import flush_logging


class Confirmer:
    """
    Blocking y/N prompt bound to a pair of text streams.

    Streams default to the process stdin/stdout, resolved at prompt time so
    that redirected streams (pytest capture, pipes) are honoured.
    """

    def __init__(
            self,
            input_stream: Optional[TextIO] = None,
            output_stream: Optional[TextIO] = None,
    ) -> None:
        self._input = input_stream
        self._output = output_stream

    def ask(self, pending: PendingRename) -> bool:
        """
        Present 'original -> target' and wait for a single line of input.

        Only an answer starting with 'y' or 'Y' approves the rename; an empty
        line or anything else declines it.

        Raises:
            EOFError: The input stream ended before an answer was read.
            OSError: The input stream could not be read.
        """
        stdin = self._input or sys.stdin
        stdout = self._output or sys.stdout

        # Pending diagnostics must not land after the prompt
        flush_logging()

        stdout.write(f"rename {pending}? [y/N]: ")
        stdout.flush()

        answer = stdin.readline()
        if not answer:
            raise EOFError("input closed while waiting for confirmation")

        return answer.startswith(("y", "Y"))
