"""
Line preprocessing for the indentation analyzer.

Neutralizes everything that could corrupt structural inference: string and
character literal contents, line comments and block comments. The output keeps
the visual width of every column so indentation and highlight positions stay
valid; only the content is replaced.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, List, Tuple

from .models import SourceLine

if TYPE_CHECKING:
    from .tracker import AnalyzerState

logger = logging.getLogger(__name__)

DEFAULT_TAB_WIDTH = 4

QUOTE_CHARS = ('"', "'")
LINE_COMMENT = "//"
BLOCK_COMMENT_OPEN = "/*"
BLOCK_COMMENT_CLOSE = "*/"
FILLER = " "


class LinePreprocessor:
    """Produces the stripped form of each raw line, carrying block-comment state."""

    def __init__(self, tab_width: int = DEFAULT_TAB_WIDTH):
        if tab_width <= 0:
            raise ValueError(f"tab_width must be positive, got {tab_width}")
        self.tab_width = tab_width

    def _width(self, ch: str) -> int:
        return self.tab_width if ch == "\t" else 1

    def strip_line(self, raw_text: str, in_block_comment: bool) -> Tuple[str, bool]:
        """
        Strip one line.

        Returns the stripped text and whether a block comment is still open at
        the end of the line.
        """
        out: List[str] = []
        quote = None
        i = 0
        n = len(raw_text)

        while i < n:
            ch = raw_text[i]

            if in_block_comment:
                if raw_text.startswith(BLOCK_COMMENT_CLOSE, i):
                    out.append(FILLER * 2)
                    in_block_comment = False
                    i += 2
                else:
                    out.append(FILLER * self._width(ch))
                    i += 1
                continue

            if quote is not None:
                if ch == "\\" and i + 1 < n:
                    out.append(FILLER * (1 + self._width(raw_text[i + 1])))
                    i += 2
                    continue
                if ch == quote:
                    out.append(ch)
                    quote = None
                else:
                    out.append(FILLER * self._width(ch))
                i += 1
                continue

            if ch in QUOTE_CHARS:
                quote = ch
                out.append(ch)
                i += 1
                continue

            if raw_text.startswith(LINE_COMMENT, i):
                break

            if raw_text.startswith(BLOCK_COMMENT_OPEN, i):
                out.append(FILLER * 2)
                in_block_comment = True
                i += 2
                continue

            out.append(FILLER * self.tab_width if ch == "\t" else ch)
            i += 1

        return "".join(out).rstrip(), in_block_comment

    def process_line(self, raw_text: str, index: int, state: "AnalyzerState") -> SourceLine:
        raw_text = raw_text.rstrip("\r\n")
        stripped, state.is_in_block_comment = self.strip_line(
            raw_text, state.is_in_block_comment
        )
        return SourceLine(
            index=index,
            raw_text=raw_text,
            stripped_text=stripped,
            tab_width=self.tab_width,
        )

    def preprocess(self, raw_lines: Iterable[str], state: "AnalyzerState") -> List[SourceLine]:
        lines = [self.process_line(raw, i, state) for i, raw in enumerate(raw_lines)]
        if state.is_in_block_comment:
            logger.debug("Block comment left open at end of input")
        return lines
