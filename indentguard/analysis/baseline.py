"""
Indentation unit inference.

Assumes the first indented block of a file uses exactly one indentation unit.
A file whose first block is atypical produces a wrong unit and therefore
spurious violations; callers that know the unit should pass it explicitly.
"""

import logging
from typing import Sequence

from .models import SourceLine

logger = logging.getLogger(__name__)

DISABLED_UNIT = 0


def has_block(lines: Sequence[SourceLine]) -> bool:
    """True when any line opens a braced block."""
    return any("{" in line.stripped_text for line in lines)


def detect_indent_unit(lines: Sequence[SourceLine]) -> int:
    """
    Infer the indentation unit from the first line following the first `{`.

    Returns 0 when no unit can be inferred, which disables checking.
    """
    i = 0
    while i < len(lines):
        line = lines[i]
        i += 1
        if "{" not in line.stripped_text:
            continue

        while i < len(lines) and lines[i].is_blank:
            i += 1
        if i >= len(lines):
            break

        unit = lines[i].indent_width
        logger.debug(f"Inferred indent unit {unit} from line {i + 1}")
        return unit

    logger.debug("No indented block found, indentation checking disabled")
    return DISABLED_UNIT
