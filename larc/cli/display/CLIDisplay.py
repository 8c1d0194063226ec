"""Terminal renderer built on rich."""

import json
import sys
from datetime import datetime
from typing import Any

import yaml
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax

from .Display import Display


class CLIDisplay(Display):
    """Messages go to stderr with a timestamp; structured output goes to stdout.

    Output is syntax highlighted only when stdout is a terminal.
    """

    def __init__(self):
        self.stdout = Console(file=sys.stdout)
        self.stderr = Console(file=sys.stderr, highlight=False)

    def _line(self, marker: str, message: str) -> None:
        self.stderr.print(f"[dim]{datetime.now():%H:%M:%S}[/dim] {marker} {message}")

    def status(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self._line("[blue]>[/blue]", escape(message))

    def success(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self._line("[green]✓[/green]", escape(message))

    def error(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self._line("[red]✗[/red]", escape(message))

    def warning(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self._line("[yellow]![/yellow]", escape(message))

    def info(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr.print(message)

    def json_output(self, data: Any, **kwargs) -> None:
        if kwargs.get("format", "yaml") == "json":
            text, lexer = json.dumps(data, indent=2, ensure_ascii=False, default=str) + "\n", "json"
        else:
            text, lexer = yaml.safe_dump(data, sort_keys=False, allow_unicode=True), "yaml"
        if self.stdout.is_terminal:
            self.stdout.print(Syntax(text, lexer, background_color="default"))
        else:
            sys.stdout.write(text)
