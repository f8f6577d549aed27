"""Command-line interface package for IndentGuard."""
