"""
Diagnostic error handling for file-level failures.

The indentation core never raises on line content; what can fail is getting
the lines in the first place. This module turns such failures into
AnalysisError records with a category, a severity and suggested fixes, so a
directory run can report them next to the results instead of aborting.
"""

from __future__ import annotations

import json
import logging
import traceback
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from pathlib import Path
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

__all__ = [
    "ErrorCategory",
    "Severity",
    "AnalysisError",
    "AnalysisErrorHandler",
    "ErrorReporter",
    "FileTooLargeError",
]


class ErrorCategory(Enum):
    """Categories of analysis errors."""

    CONFIGURATION = auto()
    FILE_ACCESS = auto()
    PERMISSION_ERROR = auto()
    ENCODING_ERROR = auto()
    FILE_TOO_LARGE = auto()
    UNKNOWN = auto()


class Severity(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class FileTooLargeError(Exception):
    """Raised when a file exceeds the configured size limit."""

    def __init__(self, file_path: str, size: int, limit: int):
        super().__init__(f"File too large ({size} bytes, limit {limit}): {file_path}")
        self.file_path = file_path
        self.size = size
        self.limit = limit


@dataclass
class AnalysisError:
    """Represents an analysis error with comprehensive information."""

    category: ErrorCategory
    severity: Severity
    message: str
    context: str
    file_path: Optional[str] = None
    stack_trace: Optional[str] = None
    suggested_fixes: List[str] = field(default_factory=list)
    diagnostic_info: Dict[str, Any] = field(default_factory=dict)
    timestamp: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary format."""
        return {
            "category": self.category.name,
            "severity": self.severity.value,
            "message": self.message,
            "context": self.context,
            "file_path": self.file_path,
            "stack_trace": self.stack_trace,
            "suggested_fixes": self.suggested_fixes,
            "diagnostic_info": self.diagnostic_info,
            "timestamp": self.timestamp,
        }


class AnalysisErrorHandler:
    """
    Error handler for file checking operations.

    Categorizes the exception, picks a severity, and attaches fix suggestions
    and file diagnostics.
    """

    def __init__(self):
        self.fix_suggestions = self._initialize_fix_suggestions()

    def handle_file_error(
        self,
        exception: Exception,
        context: str,
        file_path: Optional[str] = None,
        additional_info: Optional[Dict[str, Any]] = None,
    ) -> AnalysisError:
        category = self._categorize_error(exception, context)
        severity = self._determine_severity(category)

        diagnostic_info: Dict[str, Any] = {"exception_type": type(exception).__name__}
        if file_path:
            diagnostic_info.update(self._collect_file_diagnostics(file_path))
        if additional_info:
            diagnostic_info.update(additional_info)

        error = AnalysisError(
            category=category,
            severity=severity,
            message=str(exception) or type(exception).__name__,
            context=context,
            file_path=file_path,
            stack_trace=self._extract_stack_trace(exception),
            suggested_fixes=list(self.fix_suggestions.get(category, [])),
            diagnostic_info=diagnostic_info,
            timestamp=datetime.now().isoformat(),
        )

        logger.warning(f"Analysis error handled: {category.name} - {error.message}")
        return error

    def _categorize_error(self, exception: Exception, context: str) -> ErrorCategory:
        if isinstance(exception, FileTooLargeError):
            return ErrorCategory.FILE_TOO_LARGE
        elif isinstance(exception, PermissionError):
            return ErrorCategory.PERMISSION_ERROR
        elif isinstance(exception, (FileNotFoundError, IsADirectoryError, NotADirectoryError)):
            return ErrorCategory.FILE_ACCESS
        elif isinstance(exception, (UnicodeError, LookupError)):
            # LookupError: unknown codec name
            return ErrorCategory.ENCODING_ERROR
        elif isinstance(exception, OSError):
            return ErrorCategory.FILE_ACCESS

        if "config" in context.lower():
            return ErrorCategory.CONFIGURATION

        return ErrorCategory.UNKNOWN

    def _determine_severity(self, category: ErrorCategory) -> Severity:
        if category in (ErrorCategory.CONFIGURATION, ErrorCategory.PERMISSION_ERROR):
            return Severity.HIGH
        if category == ErrorCategory.FILE_TOO_LARGE:
            return Severity.LOW
        return Severity.MEDIUM

    def _extract_stack_trace(self, exception: Exception) -> Optional[str]:
        if exception.__traceback__ is None:
            return None
        return "".join(
            traceback.format_exception(type(exception), exception, exception.__traceback__)
        )

    def _collect_file_diagnostics(self, file_path: str) -> Dict[str, Any]:
        diagnostics: Dict[str, Any] = {}
        path = Path(file_path)
        diagnostics["file_exists"] = path.exists()
        if path.exists():
            diagnostics["is_file"] = path.is_file()
            try:
                diagnostics["file_size"] = path.stat().st_size
            except OSError as e:
                diagnostics["stat_error"] = str(e)
        diagnostics["parent_exists"] = path.parent.exists()
        return diagnostics

    def _initialize_fix_suggestions(self) -> Dict[ErrorCategory, List[str]]:
        return {
            ErrorCategory.FILE_ACCESS: [
                "Check that the path exists and points to a regular file",
                "Use an absolute path if the working directory is unclear",
            ],
            ErrorCategory.PERMISSION_ERROR: [
                "Check read permissions on the file and its parent directories",
            ],
            ErrorCategory.ENCODING_ERROR: [
                "Set discovery.encoding in the configuration to the file's encoding",
                "Convert the file to UTF-8",
            ],
            ErrorCategory.FILE_TOO_LARGE: [
                "Raise discovery.max_file_size in the configuration",
                "Exclude generated files with discovery.exclude_globs",
            ],
            ErrorCategory.CONFIGURATION: [
                "Run 'indentguard config validate <file>' to locate the invalid value",
            ],
        }


class ErrorReporter:
    """Reports and formats analysis errors for different output formats."""

    def format_error(self, error: AnalysisError, format_type: str = "text") -> str:
        if format_type == "json":
            return json.dumps(error.to_dict(), indent=2, ensure_ascii=False)
        elif format_type == "markdown":
            return self._format_markdown(error)
        else:
            return self._format_text(error)

    def _format_text(self, error: AnalysisError) -> str:
        lines = [
            f"ERROR: {error.message}",
            f"Category: {error.category.name}",
            f"Severity: {error.severity.value.upper()}",
            f"Context: {error.context}",
        ]
        if error.file_path:
            lines.append(f"Location: {error.file_path}")

        if error.suggested_fixes:
            lines.append("\nSuggested fixes:")
            for i, fix in enumerate(error.suggested_fixes, 1):
                lines.append(f"  {i}. {fix}")

        return "\n".join(lines)

    def _format_markdown(self, error: AnalysisError) -> str:
        lines = [
            f"## Error: {error.message}",
            f"**Category:** {error.category.name}",
            f"**Severity:** {error.severity.value.upper()}",
            f"**Context:** {error.context}",
        ]

        if error.file_path:
            lines.append(f"**Location:** `{error.file_path}`")

        if error.suggested_fixes:
            lines.append("\n### Suggested Fixes")
            for i, fix in enumerate(error.suggested_fixes, 1):
                lines.append(f"{i}. {fix}")

        if error.diagnostic_info:
            lines.append("\n### Diagnostic Information")
            lines.append("```json")
            lines.append(json.dumps(error.diagnostic_info, indent=2, ensure_ascii=False))
            lines.append("```")

        return "\n".join(lines)

    def generate_error_summary(self, errors: List[AnalysisError]) -> Dict[str, Any]:
        if not errors:
            return {"total_errors": 0}

        summary: Dict[str, Any] = {
            "total_errors": len(errors),
            "by_category": {},
            "by_severity": {},
            "files_with_errors": [],
        }

        for error in errors:
            category = error.category.name
            severity = error.severity.value
            summary["by_category"][category] = summary["by_category"].get(category, 0) + 1
            summary["by_severity"][severity] = summary["by_severity"].get(severity, 0) + 1
            if error.file_path and error.file_path not in summary["files_with_errors"]:
                summary["files_with_errors"].append(error.file_path)

        return summary
