"""
CLI command handlers.

Organized by functional domain:
- check.py: Indentation checking of files and directories
- config.py: Configuration show, init and validate commands
"""

from .check import (
    cmd_check,
    render_check_result,
)

from .config import (
    cmd_config,
)

__all__ = [
    'cmd_check',
    'render_check_result',
    'cmd_config',
]
