"""
Unified file discovery utility for deterministic file scanning.

Finds brace-language source files in a directory tree, with exclusion of
tooling and dependency directories and a deterministic ordering, so repeated
runs report files in the same sequence.
"""

from __future__ import annotations

import fnmatch
from pathlib import Path
from typing import Iterable, List, Optional, Set


# Default exclusion patterns (directories and file patterns to ignore)
DEFAULT_EXCLUDE_DIRS = {
    ".git",
    ".hg",
    ".svn",
    ".idea",
    ".vscode",
    ".gradle",
    "__pycache__",
    "build",
    "dist",
    "out",
    "target",
    "bin",
    "obj",
    "node_modules",
    "vendor",
}

DEFAULT_EXCLUDE_GLOBS = [
    "*.min.js",
    "*.class",
    "*.o",
    ".*",  # Hidden files
]

DEFAULT_INCLUDE_PATTERNS = [
    "**/*.java",
    "**/*.c",
    "**/*.h",
    "**/*.cc",
    "**/*.cpp",
    "**/*.hpp",
    "**/*.cs",
    "**/*.js",
    "**/*.ts",
    "**/*.go",
    "**/*.kt",
    "**/*.swift",
    "**/*.rs",
    "**/*.scala",
    "**/*.php",
]


def discover_source_files(
    project_root: Path,
    include: Optional[List[str]] = None,
    exclude_dirs: Optional[Iterable[str]] = None,
    exclude_globs: Optional[List[str]] = None,
) -> List[Path]:
    """
    Discover source files in a project with deterministic ordering.

    Args:
        project_root: Root directory to scan
        include: Glob patterns to include (default: DEFAULT_INCLUDE_PATTERNS)
        exclude_dirs: Directory names to exclude
        exclude_globs: File patterns to exclude

    Returns:
        Sorted list of source file paths
    """
    project_root = project_root.resolve()

    if include is None:
        include = DEFAULT_INCLUDE_PATTERNS

    excluded: Set[str] = set(DEFAULT_EXCLUDE_DIRS if exclude_dirs is None else exclude_dirs)

    if exclude_globs is None:
        exclude_globs = DEFAULT_EXCLUDE_GLOBS

    found_files: Set[Path] = set()

    for pattern in include:
        for file_path in project_root.glob(pattern):
            if file_path.is_file():
                found_files.add(file_path.resolve())

    filtered_files = []
    for file_path in found_files:
        relative_path = file_path.relative_to(project_root)

        # Only directory components count against the excluded names
        if set(relative_path.parts[:-1]) & excluded:
            continue

        if is_excluded_file(file_path, exclude_globs):
            continue

        filtered_files.append(file_path)

    return sorted(filtered_files)


def is_excluded_file(file_path: Path, exclude_globs: Optional[List[str]] = None) -> bool:
    """Check if a file should be excluded based on glob patterns."""
    if exclude_globs is None:
        exclude_globs = DEFAULT_EXCLUDE_GLOBS

    for pattern in exclude_globs:
        if fnmatch.fnmatch(file_path.name, pattern):
            return True
    return False
