"""CLI display implementation using Rich library."""

import json
import sys
from datetime import datetime
from typing import Any

import yaml
from rich.console import Console
from rich.syntax import Syntax


def _timestamp() -> str:
    return datetime.now().strftime("%H:%M:%S")


class CLIDisplay:
    """Status lines on stderr, command output on stdout."""

    def __init__(self):
        self.console = Console(file=sys.stdout)
        self.stderr_console = Console(file=sys.stderr)

    def status(self, message: str) -> None:
        self.stderr_console.print(f"[dim]{_timestamp()}[/dim] [blue]i[/blue] {message}")

    def success(self, message: str) -> None:
        self.stderr_console.print(f"[dim]{_timestamp()}[/dim] [green]✓[/green] {message}")

    def error(self, message: str, details: str = "") -> None:
        self.stderr_console.print(f"[dim]{_timestamp()}[/dim] [red]✗[/red] {message}")
        if details:
            self.stderr_console.print(f"  [dim]{details}[/dim]")

    def warning(self, message: str) -> None:
        self.stderr_console.print(f"[yellow]⚠[/yellow] {message}")

    def info(self, message: str) -> None:
        self.stderr_console.print(message)

    def json_output(self, data: Any, format: str = "yaml", indent: int = 2) -> None:
        """Print ``data`` as YAML (default) or JSON; highlighted on a terminal."""
        if format == "yaml":
            text = yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
            lexer = "yaml"
        else:
            text = json.dumps(data, indent=indent, ensure_ascii=False) + "\n"
            lexer = "json"

        if sys.stdout.isatty():
            self.console.print(Syntax(text.rstrip("\n"), lexer, theme="monokai", background_color="default"))
        else:
            sys.stdout.write(text)
            sys.stdout.flush()
