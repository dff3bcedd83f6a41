"""Shared console helpers for apiscaffold.

All user-facing output goes through the module-level Rich ``console``.  The
scaffolding engine never prints; the CLI wires ``print_artifact`` in as an
artifact listener.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from apiscaffold.scaffolder.materializer import ArtifactEvent

console = Console()


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(0.0421) -> "42ms"
        format_duration(3.7)    -> "3.7s"
        format_duration(65.2)   -> "1m 5s"
    """
    if seconds < 0:
        return "0ms"
    if seconds < 1:
        return f"{int(seconds * 1000)}ms"

    minutes = int(seconds // 60)
    secs = seconds % 60
    if minutes > 0:
        return f"{minutes}m {int(secs)}s"
    return f"{secs:.1f}s"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_banner(project_name: str) -> None:
    """Print the start-of-run banner."""
    console.print()
    console.print(f"[bold blue]Generating project structure for: {escape(project_name)}[/bold blue]")
    console.print()


def print_artifact(event: ArtifactEvent) -> None:
    """Print one line for a created (or failed) directory or file."""
    if event.success:
        console.print(f"[green]✔  Created: {escape(str(event.path))}[/green]")
    else:
        console.print(f"[red]✘  Failed:  {escape(str(event.path))} ({event.error_kind})[/red]")


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_failures(failed: list[ArtifactEvent]) -> None:
    """Print a table listing every artifact that could not be created."""
    table = Table(title="Failed artifacts", show_header=True, header_style="bold red")
    table.add_column("Kind", no_wrap=True)
    table.add_column("Path")
    table.add_column("Error")

    for event in failed:
        table.add_row(
            event.kind.value,
            escape(event.relative_path),
            escape(event.error or event.error_kind or ""),
        )

    console.print(table)


def print_next_steps(project_name: str) -> None:
    """Print the commands to run inside the generated project."""
    steps = (
        f"  cd {escape(project_name)}\n"
        "  npm install\n"
        "  npm run dev"
    )
    console.print(Panel(steps, title="Next steps", style="cyan"))


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
