"""Operator-facing output.

Colored messages go through rich consoles: progress and the final summary on
stdout, warnings and errors on stderr.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape


class Reporter:
    def __init__(self, console: Console | None = None, err_console: Console | None = None) -> None:
        self.console = console or Console(highlight=False, soft_wrap=True)
        self.err_console = err_console or Console(stderr=True, highlight=False, soft_wrap=True)

    def step(self, message: str) -> None:
        self.console.print(f"[cyan]{escape(message)}[/cyan]")

    def warning(self, message: str) -> None:
        self.err_console.print(f"[yellow]{escape(message)}[/yellow]")

    def error(self, message: str) -> None:
        self.err_console.print(f"[red]{escape(message)}[/red]")

    def success(self, project_name: str, *, git_initialized: bool) -> None:
        """Print the closing summary for a completed run."""

        self.console.print(
            f"[green]\n✔️ The project {escape(project_name)} has been bootstrapped!\n[/green]"
        )
        if git_initialized:
            self.console.print("[green]Add a git remote and push your changes.[/green]")
