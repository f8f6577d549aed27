"""
Command-line interface for IndentGuard

Provides CLI access to the indentation checker and its configuration, with
rich terminal output or plain text, JSON and HTML reports.
"""

import argparse
import logging
import sys
from typing import List, Optional

from indentguard import __version__
from indentguard.api import IndentGuard
from indentguard.cli.commands import cmd_check, cmd_config
from indentguard.cli.rich_output import set_rich_enabled
from indentguard.config import ConfigurationError, IndentGuardConfig

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="indentguard",
        description="IndentGuard - heuristic indentation checker for brace-delimited code",
        epilog='Use "indentguard <command> --help" for detailed command help.',
    )

    # Global options
    parser.add_argument("--config", "-c", type=str, help="Path to configuration file")

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output and debug logging",
    )

    parser.add_argument(
        "--no-rich",
        action="store_true",
        help="Disable rich terminal output (use plain text)",
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Check command
    check_parser = subparsers.add_parser(
        "check", help="Check indentation of a source file or directory"
    )
    check_parser.add_argument("path", help="Source file or directory to check")
    check_parser.add_argument(
        "--indent-unit",
        type=_positive_int,
        help="Columns per nesting level (inferred from the first block if not specified)",
    )
    check_parser.add_argument(
        "--tab-width",
        type=_positive_int,
        help="Columns a tab character expands to (default: 4)",
    )
    check_parser.add_argument(
        "--format",
        choices=["text", "json", "html"],
        help="Output format (default: from configuration, text)",
    )
    check_parser.add_argument("--output", "-o", help="Output file for check results")
    check_parser.add_argument(
        "--show-lines",
        action="store_true",
        help="List every violating line, not only the first line of each run",
    )
    check_parser.add_argument(
        "--fail-on-problems",
        action="store_true",
        help="Exit with status 2 when any problem is found",
    )

    # Config command
    config_parser = subparsers.add_parser("config", help="Configuration management")
    config_subparsers = config_parser.add_subparsers(dest="config_action")

    show_parser = config_subparsers.add_parser("show", help="Show current configuration")
    show_parser.add_argument(
        "--format", choices=["text", "json"], default="text", help="Output format"
    )

    init_parser = config_subparsers.add_parser("init", help="Initialize configuration file")
    init_parser.add_argument(
        "--path",
        default="indentguard.json",
        help="Path for configuration file (default: indentguard.json)",
    )
    init_parser.add_argument(
        "--format",
        choices=["json", "yaml"],
        default="json",
        help="Configuration file format (default: json)",
    )

    validate_parser = config_subparsers.add_parser("validate", help="Validate configuration file")
    validate_parser.add_argument("config_file", help="Configuration file to validate")

    return parser


def _load_config(args: argparse.Namespace) -> IndentGuardConfig:
    config = IndentGuardConfig.load(config_path=args.config)

    if getattr(args, "indent_unit", None) is not None:
        config.analysis_settings.indent_unit = args.indent_unit
    if getattr(args, "tab_width", None) is not None:
        config.analysis_settings.tab_width = args.tab_width
    if args.no_rich:
        config.report_settings.use_rich = False

    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(getattr(args, "verbose", False))

    if not args.command:
        parser.print_help()
        return 1

    # init and validate must work even when the discovered config is broken
    if args.command == "config" and args.config_action in ("init", "validate"):
        return cmd_config(args, IndentGuardConfig.default())

    try:
        config = _load_config(args)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    set_rich_enabled(config.report_settings.use_rich)

    try:
        if args.command == "check":
            return cmd_check(args, IndentGuard(config))
        elif args.command == "config":
            return cmd_config(args, config)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            logger.exception("Command failed")
        return 1

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
