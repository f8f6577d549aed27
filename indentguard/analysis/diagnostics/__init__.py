"""
Diagnostics subsystem: error categorization and formatting.
"""

from .error_handler import (
    AnalysisError,
    AnalysisErrorHandler,
    ErrorCategory,
    ErrorReporter,
    FileTooLargeError,
    Severity,
)

__all__ = [
    "AnalysisError",
    "AnalysisErrorHandler",
    "ErrorCategory",
    "ErrorReporter",
    "FileTooLargeError",
    "Severity",
]
