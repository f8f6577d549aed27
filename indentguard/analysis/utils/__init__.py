"""Shared helpers for the analysis package."""

from .file_discovery import (
    DEFAULT_EXCLUDE_DIRS,
    DEFAULT_EXCLUDE_GLOBS,
    DEFAULT_INCLUDE_PATTERNS,
    discover_source_files,
    is_excluded_file,
)

__all__ = [
    "DEFAULT_EXCLUDE_DIRS",
    "DEFAULT_EXCLUDE_GLOBS",
    "DEFAULT_INCLUDE_PATTERNS",
    "discover_source_files",
    "is_excluded_file",
]
