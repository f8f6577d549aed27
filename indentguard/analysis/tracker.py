"""
Structural tracking for the indentation analyzer.

The tracker follows nesting through braced blocks, un-braced control bodies
(if/for/while/do/else followed by a single statement) and statements wrapped
over several lines. It never looks back: each line updates the state that
determines the expected indentation of the next one.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Tuple

from .models import Direction, SourceLine

CONTROL_KEYWORD = re.compile(r"\b(?:if|for|while|do|else)(?=\W|$)")
ACCESS_MODIFIER = re.compile(r"^(?:private|public|protected)\b")
STATEMENT_TERMINATORS = (";", "{", "}")


@dataclass
class AnalyzerState:
    """Mutable state owned by a single analysis run."""

    brace_depth_stack: List[int] = field(default_factory=list)
    pending_continuation_count: int = 0
    is_awaiting_continuation: bool = False
    is_in_block_comment: bool = False
    expected_indent_width: int = 0
    continuation_indent_width: int = 0
    indent_unit: int = 0
    last_reported_direction: Direction = Direction.NONE
    _unit_locked: bool = field(default=False, repr=False)

    def lock_indent_unit(self, unit: int) -> None:
        if self._unit_locked:
            raise RuntimeError("indent unit already fixed for this analysis run")
        self.indent_unit = unit
        self._unit_locked = True

    def push_frame(self) -> None:
        self.brace_depth_stack.append(self.pending_continuation_count)
        self.pending_continuation_count = 0

    def pop_frame(self) -> None:
        # An unmatched closer restores nothing rather than failing.
        if self.brace_depth_stack:
            self.pending_continuation_count = self.brace_depth_stack.pop()
        else:
            self.pending_continuation_count = 0


def _parens_balanced(text: str) -> bool:
    return text.count("(") == text.count(")")


class StructuralTracker:
    """
    Nesting and continuation state machine.

    `begin_line` runs before a line is evaluated and returns the target width
    plus whether the line is a continuation (checked as "at least" the target).
    `end_line` folds the line's braces and statement termination into the state.
    """

    def __init__(self, state: AnalyzerState):
        self.state = state

    def _shift(self, units: int) -> None:
        state = self.state
        state.expected_indent_width = max(
            0, state.expected_indent_width + units * state.indent_unit
        )

    def _open_continuation(self) -> None:
        state = self.state
        state.is_awaiting_continuation = True
        state.push_frame()
        state.continuation_indent_width = state.expected_indent_width

    def _release_pending(self) -> None:
        state = self.state
        if state.pending_continuation_count > 0:
            self._shift(-state.pending_continuation_count)
            state.pending_continuation_count = 0

    def begin_line(self, line: SourceLine) -> Tuple[int, bool]:
        state = self.state
        trimmed = line.trimmed

        # A closing brace lines up with its opener.
        if trimmed.startswith("}"):
            self._shift(-1)

        if state.is_awaiting_continuation and trimmed.startswith("{"):
            # Allman brace for the previous header.
            state.is_awaiting_continuation = False
            if state.pending_continuation_count > 0:
                state.pending_continuation_count -= 1
            else:
                state.pop_frame()
        elif state.pending_continuation_count > 0:
            # Body line of an un-braced control statement.
            self._shift(1)
            state.is_awaiting_continuation = False

        if state.is_awaiting_continuation:
            return state.continuation_indent_width, True
        return state.expected_indent_width, False

    def end_line(self, line: SourceLine) -> None:
        state = self.state
        text = line.stripped_text
        trimmed = line.trimmed

        if state.is_awaiting_continuation:
            state.continuation_indent_width = max(
                state.continuation_indent_width, state.expected_indent_width
            )

        opens = text.count("{")
        closes = text.count("}")
        # The leading closer of `} else {` was already applied in begin_line.
        leading_close = 1 if trimmed.startswith("}") else 0
        self._shift(opens - closes + leading_close)

        for ch in text:
            if ch == "{":
                state.push_frame()
            elif ch == "}":
                state.pop_frame()

        self._classify_termination(text, trimmed, opens, closes)

    def _classify_termination(self, text: str, trimmed: str, opens: int, closes: int) -> None:
        state = self.state
        last = trimmed[-1:]
        terminated = last in STATEMENT_TERMINATORS

        if (
            not state.is_awaiting_continuation
            and CONTROL_KEYWORD.search(text)
            and last not in ("{", ";")
        ):
            if _parens_balanced(text):
                inline_block = opens > 0 and opens == closes
                if not inline_block:
                    state.is_awaiting_continuation = True
                    state.pending_continuation_count += 1
            else:
                # Condition wrapped onto the next line.
                self._open_continuation()
        elif not state.is_awaiting_continuation and not terminated:
            # Multi-line field and parameter lists end in `)` without a body.
            if not (ACCESS_MODIFIER.match(trimmed) and last == ")"):
                self._open_continuation()
        elif state.is_awaiting_continuation and terminated:
            if state.pending_continuation_count == 0:
                state.is_awaiting_continuation = False
            state.pop_frame()
            self._release_pending()
        else:
            self._release_pending()
