"""
Indentation conformance analysis for brace-delimited source code.

Single forward pass over a sequence of lines:

1. every line is preprocessed (literals, comments and tabs neutralized);
2. the indentation unit is inferred once, unless supplied by the caller;
3. each checkable line is tracked structurally and evaluated against the
   expected width, with violations coalesced into runs.

The analyzer is a best-effort lexical heuristic. It never raises on unusual
input: an unknown unit or a file without braces disables checking, and
unbalanced braces only reduce the accuracy of later results.
"""

import logging
from typing import Iterable, Optional

from .baseline import DISABLED_UNIT, detect_indent_unit, has_block
from .models import IndentationReport
from .preprocessor import DEFAULT_TAB_WIDTH, LinePreprocessor
from .reporter import ViolationReporter
from .tracker import AnalyzerState, StructuralTracker

logger = logging.getLogger(__name__)


class IndentationAnalyzer:
    """
    Checks the indentation of one source file given as a sequence of lines.

    Args:
        indent_unit: Columns per nesting level. Inferred from the first block
            when None.
        tab_width: Columns a tab character expands to.
        enabled: When False, `analyze` returns an empty report.
    """

    def __init__(
        self,
        indent_unit: Optional[int] = None,
        tab_width: int = DEFAULT_TAB_WIDTH,
        enabled: bool = True,
    ):
        if indent_unit is not None and indent_unit <= 0:
            raise ValueError(f"indent_unit must be positive, got {indent_unit}")
        self.indent_unit = indent_unit
        self.enabled = enabled
        self.preprocessor = LinePreprocessor(tab_width=tab_width)

    def analyze(self, raw_lines: Iterable[str]) -> IndentationReport:
        raw_lines = list(raw_lines)
        if not self.enabled:
            return IndentationReport(enabled=False, line_count=len(raw_lines))

        state = AnalyzerState()
        lines = self.preprocessor.preprocess(raw_lines, state)

        if self.indent_unit is not None:
            state.lock_indent_unit(self.indent_unit)
        else:
            state.lock_indent_unit(detect_indent_unit(lines))

        report = IndentationReport(
            indent_unit=state.indent_unit,
            unit_inferred=self.indent_unit is None,
            line_count=len(lines),
        )
        if state.indent_unit == DISABLED_UNIT:
            return report
        if not has_block(lines):
            # Nothing nests without braces, whatever the configured unit.
            logger.debug("No braced block found, indentation not checked")
            return report

        tracker = StructuralTracker(state)
        reporter = ViolationReporter(state)

        for line in lines:
            if not line.is_checkable:
                continue
            target, continuation = tracker.begin_line(line)
            report.assessments.append(reporter.evaluate(line, target, continuation))
            tracker.end_line(line)

        report.problems = list(reporter.problems)
        logger.debug(
            f"Checked {len(report.assessments)} lines with unit {state.indent_unit}: "
            f"{len(report.problems)} problems"
        )
        return report
