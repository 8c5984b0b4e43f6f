"""CLI display implementation using Rich library."""

import json
import sys
from datetime import datetime
from typing import Any

from rich.console import Console


class CLIDisplay:
    """Status messages go to stderr; command output goes to stdout."""

    def __init__(self):
        self.stderr_console = Console(file=sys.stderr)

    def status(self, message: str) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.stderr_console.print(f"[dim]{timestamp}[/dim] [blue]i[/blue] {message}", highlight=False)

    def success(self, message: str) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.stderr_console.print(f"[dim]{timestamp}[/dim] [green]✓[/green] {message}", highlight=False)

    def error(self, message: str, details: str = "") -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.stderr_console.print(f"[dim]{timestamp}[/dim] [red]✗[/red] {message}", highlight=False)
        if details:
            self.stderr_console.print(f"  [dim]{details}[/dim]", highlight=False)

    def warning(self, message: str) -> None:
        self.stderr_console.print(f"[yellow]⚠[/yellow] {message}", highlight=False)

    def info(self, message: str) -> None:
        self.stderr_console.print(message, highlight=False)

    def lines_output(self, lines: list[str]) -> None:
        # Plain print: report lines must not be wrapped or styled
        for line in lines:
            print(line, file=sys.stdout)

    def json_output(self, data: Any, format: str = "json", indent: int = 2) -> None:
        if format == "yaml":
            import yaml

            print(yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True), end="")
        else:
            print(json.dumps(data, indent=indent, ensure_ascii=False), file=sys.stdout)
