"""
IndentGuard - Heuristic Indentation Checker

A lexical checker for brace-delimited languages (Java, C, JavaScript, ...)
that infers the indentation unit a file uses and reports lines deviating from
it as coalesced over-indent and under-indent problems, without parsing the
language.
"""

__version__ = "0.1.0"
__author__ = "IndentGuard Team"

# Only expose version by default - everything else is lazy loaded
__all__ = [
    "__version__",
    "__author__",
    # Main API
    "IndentGuard",
    "CheckResult",
    "FileCheckResult",
    "IndentGuardConfig",
    # Core components (for advanced usage)
    "IndentationAnalyzer",
    "IndentationReport",
    "Problem",
    "Direction",
]


def __getattr__(name):
    """Lazy loading of main API classes to prevent heavy imports at module level."""
    if name in {"IndentGuard", "CheckResult", "FileCheckResult"}:
        from .api import IndentGuard, CheckResult, FileCheckResult
        return {
            "IndentGuard": IndentGuard,
            "CheckResult": CheckResult,
            "FileCheckResult": FileCheckResult,
        }[name]

    if name == "IndentGuardConfig":
        from .config import IndentGuardConfig
        return IndentGuardConfig

    if name in {"IndentationAnalyzer", "IndentationReport", "Problem", "Direction"}:
        from . import analysis
        return getattr(analysis, name)

    raise AttributeError(f"module 'indentguard' has no attribute '{name}'")
