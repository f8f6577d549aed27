"""
Rich terminal output utilities for IndentGuard CLI.

Provides terminal output with panels, tables and syntax-highlighted JSON, and
a plain mode (no colors, no markup) for logs and pipes.
"""

from typing import Any, Dict, List, Optional, Union
import json

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table


class RichOutputManager:
    """Manages rich terminal output with a plain-text mode."""

    def __init__(self, use_rich: bool = True):
        """Initialize the output manager."""
        self.use_rich = use_rich
        if use_rich:
            self.console = Console()
        else:
            self.console = Console(color_system=None, highlight=False, markup=False, emoji=False)

    def print_header(self, title: str, subtitle: Optional[str] = None) -> None:
        """Print a formatted header."""
        if self.use_rich:
            if subtitle:
                header_text = f"[bold blue]{title}[/bold blue]\n[dim]{subtitle}[/dim]"
            else:
                header_text = f"[bold blue]{title}[/bold blue]"

            self.console.print(Panel(header_text, border_style="blue", padding=(1, 2)))
        else:
            self.console.print(f"\n=== {title} ===")
            if subtitle:
                self.console.print(f"{subtitle}")
            self.console.print()

    def print_section(self, title: str) -> None:
        """Print a section separator."""
        if self.use_rich:
            self.console.rule(f"[bold]{title}[/bold]", style="blue")
        else:
            self.console.print(f"\n--- {title} ---")

    def print_success(self, message: str) -> None:
        if self.use_rich:
            self.console.print(f"[green]✓[/green] {message}")
        else:
            self.console.print(f"✓ {message}")

    def print_warning(self, message: str) -> None:
        if self.use_rich:
            self.console.print(f"[yellow]⚠[/yellow] {message}")
        else:
            self.console.print(f"⚠ {message}")

    def print_error(self, message: str) -> None:
        if self.use_rich:
            self.console.print(f"[red]✗[/red] {message}")
        else:
            self.console.print(f"✗ {message}")

    def print_info(self, message: str) -> None:
        if self.use_rich:
            self.console.print(f"[blue]ℹ[/blue] {message}")
        else:
            self.console.print(f"ℹ {message}")

    def create_table(self, title: str, columns: List[str]) -> Union[Table, Dict]:
        """Create a table (a plain dict in plain mode)."""
        if self.use_rich:
            table = Table(title=title, show_header=True, header_style="bold blue")
            for column in columns:
                table.add_column(column)
            return table
        else:
            return {"title": title, "columns": columns, "rows": []}

    def add_table_row(self, table: Union[Table, Dict], *values) -> None:
        """Add a row to the table."""
        if isinstance(table, Table):
            table.add_row(*[str(v) for v in values])
        else:
            table["rows"].append(values)

    def print_table(self, table: Union[Table, Dict]) -> None:
        """Print the table."""
        if isinstance(table, Table):
            self.console.print(table)
            return

        self.console.print(f"\n{table['title']}")
        self.console.print("-" * len(table["title"]))

        header = " | ".join(table["columns"])
        self.console.print(header)
        self.console.print("-" * len(header))

        for row in table["rows"]:
            self.console.print(" | ".join(str(v) for v in row))
        self.console.print()

    def print_json(self, data: Any, title: Optional[str] = None) -> None:
        """Print JSON data with syntax highlighting."""
        if title:
            self.print_section(title)

        json_str = json.dumps(data, indent=2, default=str)
        if self.use_rich:
            self.console.print(Syntax(json_str, "json", theme="monokai", line_numbers=True))
        else:
            self.console.print(json_str)


_rich_output = RichOutputManager()


def set_rich_enabled(enabled: bool) -> None:
    """Enable or disable rich output globally."""
    global _rich_output
    _rich_output = RichOutputManager(use_rich=enabled)


def get_rich_output() -> RichOutputManager:
    """Get the global rich output manager."""
    return _rich_output
