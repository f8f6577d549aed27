"""
Shared fixtures for IndentGuard tests.
"""

import os
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]

if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from indentguard.analysis import IndentationAnalyzer  # noqa: E402
from indentguard.cli import rich_output  # noqa: E402
from indentguard.config import ConfigurationManager  # noqa: E402


@pytest.fixture
def analyze():
    """Run a fresh analyzer over a list of lines."""

    def _analyze(lines, **kwargs):
        return IndentationAnalyzer(**kwargs).analyze(lines)

    return _analyze


@pytest.fixture(autouse=True)
def plain_output():
    """Keep the global output manager in plain mode for every test."""
    rich_output.set_rich_enabled(False)
    yield
    rich_output.set_rich_enabled(False)


@pytest.fixture
def isolated_env(monkeypatch, tmp_path):
    """Run in an empty directory with no INDENTGUARD_* variables and no home config."""
    for name in list(os.environ):
        if name.startswith("INDENTGUARD_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(
        ConfigurationManager,
        "DEFAULT_CONFIG_PATHS",
        [p for p in ConfigurationManager.DEFAULT_CONFIG_PATHS if not os.path.isabs(p)],
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path
