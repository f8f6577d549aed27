"""
Violation reporting for the indentation analyzer.

Consecutive lines that deviate in the same direction form one run and are
reported once, at the first line of the run. A compliant line ends the run.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from .models import Direction, LineAssessment, Problem, SourceLine
from .tracker import AnalyzerState


class ViolationReporter:
    """Compares actual against expected indentation and coalesces problems."""

    def __init__(self, state: AnalyzerState):
        self.state = state
        self.problems: List[Problem] = []

    @staticmethod
    def _highlight(line: SourceLine, direction: Direction, target: int) -> Tuple[int, int]:
        # Over-indent marks the surplus; under-indent marks the whole prefix.
        start_column = target if direction is Direction.OVER else 0
        start = line.offset_for_column(start_column)
        end = line.offset_for_column(line.indent_width)
        return start, max(start, end)

    def evaluate(self, line: SourceLine, target: int, continuation: bool) -> LineAssessment:
        state = self.state
        detected = line.indent_width

        compliant = detected >= target if continuation else detected == target
        if compliant:
            state.last_reported_direction = Direction.NONE
            # Empty range at the end of the indentation.
            end = line.offset_for_column(detected)
            return LineAssessment(
                line_index=line.index,
                status=Direction.NONE,
                detected_width=detected,
                expected_width=target,
                highlight=(end, end),
            )

        direction = Direction.OVER if detected > target else Direction.UNDER
        label: Optional[str] = None
        message: Optional[str] = None

        if direction != state.last_reported_direction:
            problem = Problem(
                direction=direction,
                line_index=line.index,
                detected_width=detected,
                expected_width=target,
            )
            self.problems.append(problem)
            state.last_reported_direction = direction
            label = problem.label
            message = problem.message

        return LineAssessment(
            line_index=line.index,
            status=direction,
            detected_width=detected,
            expected_width=target,
            highlight=self._highlight(line, direction, target),
            label=label,
            message=message,
        )
