"""
Analysis components for IndentGuard.

The indentation core is split into four stages (preprocessor, baseline unit
detector, structural tracker, violation reporter) wired together by
IndentationAnalyzer.
"""

from .baseline import detect_indent_unit
from .indentation_analyzer import IndentationAnalyzer
from .models import Direction, IndentationReport, LineAssessment, Problem, SourceLine
from .preprocessor import LinePreprocessor
from .reporter import ViolationReporter
from .tracker import AnalyzerState, StructuralTracker

__all__ = [
    "IndentationAnalyzer",
    "IndentationReport",
    "LineAssessment",
    "Problem",
    "Direction",
    "SourceLine",
    "LinePreprocessor",
    "AnalyzerState",
    "StructuralTracker",
    "ViolationReporter",
    "detect_indent_unit",
]
