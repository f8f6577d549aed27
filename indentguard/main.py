"""
Main entry point for IndentGuard CLI.

This module provides the main() function that serves as the entry point
for the command-line interface.
"""


def main():
    """Main CLI entry point."""
    from indentguard.cli_entry import main as cli_main

    try:
        rv = cli_main()
        return int(rv) if rv is not None else 0
    except SystemExit as e:
        # argparse exits for --help, --version and usage errors
        code = e.code
        return code if isinstance(code, int) else (0 if code is None else 1)


if __name__ == "__main__":
    raise SystemExit(main())
