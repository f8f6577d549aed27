"""
Configuration management commands for IndentGuard CLI.

This module contains command handlers for:
- Showing the effective configuration
- Writing a default configuration file
- Validating a configuration file
"""

import sys

from indentguard.cli.rich_output import get_rich_output
from indentguard.config import ConfigurationError, IndentGuardConfig


def cmd_config(args, config: IndentGuardConfig) -> int:
    """Handle config command."""
    if args.config_action == "show":
        if args.format == "json":
            get_rich_output().print_json(config.to_dict())
        else:
            print("Current IndentGuard Configuration:")
            print(config.get_config_summary())
        return 0

    elif args.config_action == "init":
        try:
            IndentGuardConfig.default().to_file(args.path, args.format)
        except ConfigurationError as e:
            print(f"Error: Failed to create configuration: {e}", file=sys.stderr)
            return 1
        print(f"Default configuration file created at {args.path}")
        print("Edit the file to customize your IndentGuard settings.")
        return 0

    elif args.config_action == "validate":
        try:
            IndentGuardConfig.load(args.config_file, use_env=False, validate=True)
        except ConfigurationError as e:
            print(f"Error: Configuration file is invalid: {e}", file=sys.stderr)
            return 1
        print(f"Configuration file {args.config_file} is valid")
        return 0

    print("Error: Missing config action (show, init, validate)", file=sys.stderr)
    return 1
