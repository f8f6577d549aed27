"""
Data models for the indentation analyzer.

These records are the contract between the analysis core and everything that
presents its results (CLI formatters, JSON reports, tests). Only the four
problem fields (direction, line index, detected width, expected width) are
stable; labels and messages are presentation text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class Direction(Enum):
    """Deviation direction of an indentation violation."""

    NONE = "none"
    OVER = "over"
    UNDER = "under"

    @property
    def label(self) -> str:
        if self is Direction.OVER:
            return "Over-indent"
        if self is Direction.UNDER:
            return "Under-indent"
        return ""


@dataclass(frozen=True)
class SourceLine:
    """
    Immutable view over one line of code.

    `stripped_text` is derived once by the preprocessor: tabs expanded, literal
    contents and comments replaced by spaces, trailing line comments removed.
    """

    index: int
    raw_text: str
    stripped_text: str
    tab_width: int = 4

    @property
    def trimmed(self) -> str:
        return self.stripped_text.strip()

    @property
    def indent_width(self) -> int:
        """Leading-space count of the stripped text."""
        return len(self.stripped_text) - len(self.stripped_text.lstrip(" "))

    @property
    def is_blank(self) -> bool:
        return not self.trimmed

    @property
    def is_annotation(self) -> bool:
        return self.trimmed.startswith("@")

    @property
    def is_checkable(self) -> bool:
        """Blank, comment-only and annotation lines are neither checked nor tracked."""
        return not (self.is_blank or self.is_annotation)

    def offset_for_column(self, column: int) -> int:
        """Map a visual column back to a character offset into `raw_text`."""
        total = 0
        offset = 0
        while total < column and offset < len(self.raw_text):
            total += self.tab_width if self.raw_text[offset] == "\t" else 1
            offset += 1
        return offset


@dataclass(frozen=True)
class Problem:
    """One reported run of same-direction violations, anchored at its first line."""

    direction: Direction
    line_index: int
    detected_width: int
    expected_width: int

    @property
    def label(self) -> str:
        return self.direction.label

    @property
    def message(self) -> str:
        return f"Detected indent: {self.detected_width}, Expected indent: {self.expected_width}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "direction": self.direction.value,
            "line_index": self.line_index,
            "line_number": self.line_index + 1,
            "detected_width": self.detected_width,
            "expected_width": self.expected_width,
            "label": self.label,
            "message": self.message,
        }


@dataclass(frozen=True)
class LineAssessment:
    """Per-line verdict exposed to presentation layers."""

    line_index: int
    status: Direction
    detected_width: int
    expected_width: int
    highlight: Optional[Tuple[int, int]] = None
    label: Optional[str] = None
    message: Optional[str] = None

    @property
    def is_violation(self) -> bool:
        return self.status is not Direction.NONE

    @property
    def starts_run(self) -> bool:
        return self.label is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "line_index": self.line_index,
            "status": self.status.value,
            "detected_width": self.detected_width,
            "expected_width": self.expected_width,
            "highlight": list(self.highlight) if self.highlight else None,
            "label": self.label,
            "message": self.message,
        }


@dataclass
class IndentationReport:
    """Result of analyzing one line sequence."""

    problems: List[Problem] = field(default_factory=list)
    assessments: List[LineAssessment] = field(default_factory=list)
    indent_unit: int = 0
    unit_inferred: bool = True
    enabled: bool = True
    line_count: int = 0

    @property
    def has_problems(self) -> bool:
        return bool(self.problems)

    @property
    def violating_lines(self) -> List[LineAssessment]:
        return [a for a in self.assessments if a.is_violation]

    def get_problems_by_direction(self, direction: Direction) -> List[Problem]:
        return [p for p in self.problems if p.direction == direction]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "indent_unit": self.indent_unit,
            "unit_inferred": self.unit_inferred,
            "enabled": self.enabled,
            "line_count": self.line_count,
            "problems": [p.to_dict() for p in self.problems],
            "violating_lines": [a.to_dict() for a in self.violating_lines],
        }
