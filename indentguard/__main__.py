"""Entry point for running indentguard as a module."""

from indentguard.main import main

if __name__ == "__main__":
    raise SystemExit(main())
