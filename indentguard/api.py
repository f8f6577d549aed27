"""
Main API interface for IndentGuard

Provides a unified facade over the indentation analyzer: checking in-memory
lines, a single file, or every source file below a directory. File-level
failures are returned as error records next to the results; they never abort
a run over many files.
"""

import concurrent.futures
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from .analysis import IndentationAnalyzer, IndentationReport
from .analysis.diagnostics import (
    AnalysisError,
    AnalysisErrorHandler,
    ErrorReporter,
    FileTooLargeError,
)
from .analysis.utils.file_discovery import discover_source_files
from .config import IndentGuardConfig

logger = logging.getLogger(__name__)


@dataclass
class FileCheckResult:
    """Indentation report for one file."""

    file_path: str
    report: IndentationReport

    @property
    def problem_count(self) -> int:
        return len(self.report.problems)

    def to_dict(self) -> Dict[str, Any]:
        return {"file_path": self.file_path, **self.report.to_dict()}


@dataclass
class CheckResult:
    """Standardized result of a check run."""

    success: bool
    files: List[FileCheckResult] = field(default_factory=list)
    errors: List[AnalysisError] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def total_problems(self) -> int:
        return sum(f.problem_count for f in self.files)

    @property
    def files_with_problems(self) -> List[FileCheckResult]:
        return [f for f in self.files if f.report.has_problems]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "summary": {
                "files_checked": len(self.files),
                "files_with_problems": len(self.files_with_problems),
                "total_problems": self.total_problems,
                "errors": len(self.errors),
            },
            "files": [f.to_dict() for f in self.files],
            "errors": [e.to_dict() for e in self.errors],
            "warnings": self.warnings,
            "metadata": self.metadata,
        }


class IndentGuard:
    """
    Main API class for IndentGuard.

    Each checked file gets its own IndentationAnalyzer run, so files can be
    processed concurrently without sharing state.
    """

    def __init__(self, config: Optional[IndentGuardConfig] = None):
        """
        Initialize IndentGuard with optional configuration.

        Args:
            config: Optional configuration object. If None, uses default configuration.
        """
        self.config = config or IndentGuardConfig.default()
        self.error_handler = AnalysisErrorHandler()
        self.error_reporter = ErrorReporter()

    def create_analyzer(self) -> IndentationAnalyzer:
        settings = self.config.analysis_settings
        return IndentationAnalyzer(
            indent_unit=settings.indent_unit,
            tab_width=settings.tab_width,
            enabled=settings.enabled,
        )

    # Checking Methods

    def check_lines(self, lines: Iterable[str], file_path: str = "<lines>") -> FileCheckResult:
        """Check an in-memory sequence of source lines."""
        return FileCheckResult(file_path=file_path, report=self.create_analyzer().analyze(lines))

    def check_text(self, text: str, file_path: str = "<text>") -> FileCheckResult:
        """Check source code given as a single string."""
        return self.check_lines(_split_lines(text), file_path=file_path)

    def check_file(self, file_path: Union[str, Path]) -> CheckResult:
        """Check a single file."""
        return self.check_path(file_path)

    def check_path(self, path: Union[str, Path]) -> CheckResult:
        """
        Check a file, or every matching source file below a directory.

        Args:
            path: File or directory to check

        Returns:
            CheckResult with one FileCheckResult per readable file and one
            AnalysisError per file that could not be read.
        """
        path = Path(path)
        started = datetime.now()

        if not path.exists():
            error = self.error_handler.handle_file_error(
                FileNotFoundError(f"Path does not exist: {path}"),
                "check_path_validation",
                str(path),
            )
            return CheckResult(success=False, errors=[error], metadata=self._metadata(path, started))

        if path.is_dir():
            discovery = self.config.discovery_settings
            targets = discover_source_files(
                path,
                include=discovery.include_patterns,
                exclude_dirs=discovery.exclude_dirs,
                exclude_globs=discovery.exclude_globs,
            )
            logger.info(f"Discovered {len(targets)} source files under {path}")
        else:
            targets = [path]

        result = CheckResult(success=True, metadata=self._metadata(path, started))
        if not targets:
            result.warnings.append(f"No source files found under {path}")

        for outcome in self._run(targets):
            if isinstance(outcome, AnalysisError):
                result.errors.append(outcome)
            else:
                result.files.append(outcome)

        result.success = not result.errors
        result.metadata["duration_seconds"] = (datetime.now() - started).total_seconds()
        return result

    def get_error_summary(self, result: CheckResult) -> Dict[str, Any]:
        return self.error_reporter.generate_error_summary(result.errors)

    def _run(self, targets: List[Path]) -> List[Union[FileCheckResult, AnalysisError]]:
        max_workers = self.config.discovery_settings.max_workers
        if max_workers <= 1 or len(targets) <= 1:
            return [self._check_one(target) for target in targets]

        # map() keeps the discovery order
        with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(self._check_one, targets))

    def _check_one(self, file_path: Path) -> Union[FileCheckResult, AnalysisError]:
        try:
            lines = self._read_lines(file_path)
        except (OSError, UnicodeError, LookupError, FileTooLargeError) as e:
            return self.error_handler.handle_file_error(e, "file_read", str(file_path))

        result = self.check_lines(lines, file_path=str(file_path))
        logger.info(f"Checked {file_path}: {result.problem_count} problems")
        return result

    def _read_lines(self, file_path: Path) -> List[str]:
        discovery = self.config.discovery_settings
        size = file_path.stat().st_size
        if size > discovery.max_file_size:
            raise FileTooLargeError(str(file_path), size, discovery.max_file_size)

        with open(file_path, "r", encoding=discovery.encoding) as f:
            return _split_lines(f.read())

    def _metadata(self, path: Path, started: datetime) -> Dict[str, Any]:
        settings = self.config.analysis_settings
        return {
            "path": str(path),
            "timestamp": started.isoformat(),
            "indent_unit": settings.indent_unit,
            "tab_width": settings.tab_width,
            "enabled": settings.enabled,
        }


def _split_lines(text: str) -> List[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines
