from __future__ import annotations

"""
Filename Normalization Service.

Implements the deterministic transform that maps an arbitrary leaf name to
the safe character set: lowercase ASCII letters, digits, dots and single
underscores. The steps run in a fixed order because later steps clean up
what earlier ones produce (the ampersand expansion must happen before
unsafe characters are replaced, the underscore collapse after every
substitution).
"""

import re
import string
from typing import Final, Iterable, Iterator

from sanefilenames.domain.models import NormalizationResult

# -----------------------------------------------------------------------------
# TRANSFORM TABLES
# -----------------------------------------------------------------------------

# ASCII only: str.lower() would also fold non-ASCII letters ('K' -> 'k')
_ASCII_LOWER: Final = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

_SPACE_RUN_RX: Final[re.Pattern] = re.compile(r" +")
_UNSAFE_CHAR_RX: Final[re.Pattern] = re.compile(r"[^_a-z0-9.]")
_UNDERSCORE_RUN_RX: Final[re.Pattern] = re.compile(r"_{2,}")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def normalize(name: str) -> NormalizationResult:
    """
    Map a leaf name to the safe character set.

    Pipeline:
    1. Lowercase ASCII letters.
    2. Runs of spaces -> '_'.
    3. '-' -> '_'.
    4. '&' -> 'and'.
    5. Any character outside [_a-z0-9.] -> '_' (one per character).
    6. Runs of '_' -> '_'.
    7. Drop one leading and one trailing '_', keeping at least one character.

    Args:
        name: A single path segment (never a full path).

    Returns:
        NormalizationResult: The new name and whether it differs from 'name'.
    """
    result = name.translate(_ASCII_LOWER)
    result = _SPACE_RUN_RX.sub("_", result)
    result = result.replace("-", "_")
    result = result.replace("&", "and")
    result = _UNSAFE_CHAR_RX.sub("_", result)
    result = _UNDERSCORE_RUN_RX.sub("_", result)
    result = _strip_edge_underscores(result)

    return NormalizationResult(name=result, changed=result != name)


def normalize_stream(lines: Iterable[str]) -> Iterator[str]:
    """
    Normalize a stream of bare names, one per line.

    Line terminators are removed before normalizing and are not part of
    the yielded names.

    Args:
        lines: Iterable yielding raw lines (e.g. a text stream).

    Yields:
        str: The normalized name for each input line.
    """
    for line in lines:
        yield normalize(line.rstrip("\r\n")).name

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _strip_edge_underscores(name: str) -> str:
    """Remove a single leading and trailing underscore, never emptying the name."""
    if len(name) > 1 and name.startswith("_"):
        name = name[1:]
    if len(name) > 1 and name.endswith("_"):
        name = name[:-1]
    return name
