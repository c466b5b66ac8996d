"""Display and formatting service for worktree information"""
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shep.models.worktree import Worktree

# Status output goes to stderr; stdout is reserved for machine-readable results
console = Console(stderr=True)


class DisplayService:
    def __init__(self, output: Optional[Console] = None):
        self.console = output or console

    def display_worktree_table(self, worktrees: List[Worktree]) -> None:
        """Display a Branch / Path / HEAD table of worktrees."""
        if not worktrees:
            self.console.print("[cyan]No worktrees found.[/cyan]")
            return

        table = Table()
        table.add_column("Branch")
        table.add_column("Path")
        table.add_column("HEAD")

        for wt in worktrees:
            style = "dim" if wt.is_bare or wt.is_prunable else None
            table.add_row(escape(wt.ref_label), escape(wt.path), wt.short_head, style=style)

        self.console.print(table)

    def info(self, message: str) -> None:
        self.console.print(f"[cyan]{escape(message)}[/cyan]")

    def success(self, message: str) -> None:
        self.console.print(f"[green]{escape(message)}[/green]")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]{escape(message)}[/yellow]")

    def error(self, message: str) -> None:
        self.console.print(f"[red]Error: {escape(message)}[/red]")
