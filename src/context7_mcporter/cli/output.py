"""Console output helpers for the CLI."""

from __future__ import annotations

from rich.console import Console

__all__ = ["console", "err_console", "print_cli_error", "print_kv"]

console = Console()
err_console = Console(stderr=True)


def print_cli_error(message: str, *, hint: str | None = None) -> None:
    """Print an error (and optional hint) to stderr."""
    err_console.print(f"[bold red]✗[/bold red] {message}", highlight=False)
    if hint:
        err_console.print(f"  [dim]Hint: {hint}[/dim]", highlight=False)


def print_kv(label: str, value: str) -> None:
    console.print(f"[bold #6366f1]{label}:[/bold #6366f1] {value}", highlight=False)
