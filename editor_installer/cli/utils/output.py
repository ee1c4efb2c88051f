# editor_installer/cli/utils/output.py
"""Output formatting utilities"""

from pathlib import Path
from typing import Iterable, List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ...constants import (
    EMOJI_ERROR,
    EMOJI_SUCCESS,
    TAG_INVALID_DEPENDENCY,
    TAG_INVALID_PATH,
    TAG_NOT_FOUND,
)
from ...core.dependency_resolver import DependencyErrorType, ResolutionResult
from ...models import Config, Group, Outcome, Package, RunSummary

console = Console()

OUTCOME_STYLES = {
    Outcome.INSTALLED: "green",
    Outcome.LINKED: "cyan",
    Outcome.REMOVED: "magenta",
    Outcome.IGNORED: "dim",
    Outcome.CANCELED: "yellow",
}


def _tag(text: str) -> str:
    style = "red" if text == TAG_NOT_FOUND else "yellow"
    return f"[{style}]{text}[/{style}]"


def _exists(path: Path) -> str:
    if path.exists():
        return f"[green]{EMOJI_SUCCESS}[/green]"
    return f"[red]{EMOJI_ERROR}[/red]"


def _add_package_rows(table: Table, package: Package,
                      resolution: Optional[ResolutionResult]) -> None:
    """Artifact and dependency rows of one package"""
    first = True
    for kind, path in package.artifacts().items():
        tag = resolution.path_error(package.key, kind) if resolution else None
        table.add_row(
            package.key if first else "",
            kind,
            str(path),
            _exists(path),
            _tag(tag) if tag else "",
        )
        first = False

    for dep in package.requires:
        reason = resolution.dependency_error(package.key, dep) if resolution else None
        table.add_row("", "requires", dep, "", _tag(reason.tag) if reason else "")


def format_tool_list(config: Config,
                     resolution: Optional[ResolutionResult],
                     include_editor: bool = True) -> None:
    """Format and display declared artifacts, their state and diagnostics"""
    table = Table(title="Packages", box=box.SIMPLE)
    table.add_column("Package", style="cyan")
    table.add_column("Artifact")
    table.add_column("Path")
    table.add_column("Exists", justify="center")
    table.add_column("Status")

    if include_editor and config.editor is not None:
        _add_package_rows(table, config.editor, None)
        table.add_section()

    if resolution is not None:
        for key in resolution.visited:
            tool = config.catalog.get_tool(key)
            if tool is not None:
                _add_package_rows(table, tool, resolution)

    if table.row_count == 0:
        console.print("[yellow]No packages configured[/yellow]")
        return

    console.print(table)


def format_group_list(groups: Iterable[Group], resolution: ResolutionResult,
                      config: Config) -> None:
    """Format and display group members and their resolution state"""
    groups = list(groups)
    if not groups:
        return

    table = Table(title="Groups", box=box.SIMPLE)
    table.add_column("Group", style="cyan")
    table.add_column("Member")
    table.add_column("Status")

    for group in groups:
        first = True
        for member in group.dependencies:
            table.add_row(group.key if first else "", member,
                          _member_status(member, resolution, config))
            first = False
        if first:
            table.add_row(group.key, "", "[dim]empty[/dim]")

    console.print(table)


def _member_status(member: str, resolution: ResolutionResult, config: Config) -> str:
    if member in resolution.satisfied_tools:
        return f"[green]{EMOJI_SUCCESS}[/green]"
    if member not in config.catalog:
        return _tag(TAG_NOT_FOUND)
    unsatisfied = resolution.unsatisfied_tools.get(member)
    if unsatisfied is not None:
        if unsatisfied.paths:
            return _tag(TAG_INVALID_PATH)
        return _tag(TAG_INVALID_DEPENDENCY)
    return "[dim]not selected[/dim]"


def format_resolution_errors(resolution: ResolutionResult, config: Config) -> None:
    """Display every unsatisfied tool and group in one batch"""
    console.print("\n[bold red]The following tools and groups are not valid:[/bold red]\n")

    for unsatisfied in resolution.unsatisfied_tools.values():
        console.print(f"[bold]{unsatisfied.key}[/bold]")
        for dep in (unsatisfied.required or {}).values():
            style = "red" if dep.reason is DependencyErrorType.NOT_FOUND else "yellow"
            console.print(f"  • depends on [{style}]{dep.key}[/{style}] ({dep.reason.value})")
        for kind, path in (unsatisfied.paths or {}).items():
            console.print(f"  • {kind} path does not exist: [red]{path}[/red]")

    for unsatisfied in resolution.unsatisfied_groups.values():
        console.print(f"[bold]group {unsatisfied.key}[/bold]")
        for member in unsatisfied.unsatisfied_tools:
            console.print(f"  • {member} {_member_status(member, resolution, config)}")

    console.print()


def format_action_plan(label: str, keys: Iterable[str]) -> None:
    """Show which packages a run is about to act on"""
    items: List[str] = list(keys)
    if items:
        console.print(f"{label} [bold]{', '.join(items)}[/bold]")


def format_summary(summary: RunSummary) -> None:
    """Format and display the outcome of a run"""
    if not summary.packages:
        console.print("[yellow]Nothing to do[/yellow]")
        return

    table = Table(title=f"{summary.action.capitalize()} summary", box=box.SIMPLE)
    table.add_column("Package", style="cyan")
    table.add_column("Artifact")
    table.add_column("Outcome")
    table.add_column("Destination", style="dim")

    for package in summary.packages:
        first = True
        for artifact in package.artifacts:
            style = OUTCOME_STYLES[artifact.outcome]
            table.add_row(
                package.package_key if first else "",
                artifact.artifact,
                f"[{style}]{artifact.outcome.value}[/{style}]",
                str(artifact.destination) if artifact.destination else "",
            )
            first = False
        if package.error:
            table.add_row(package.package_key if first else "", "",
                          f"[red]{EMOJI_ERROR} failed[/red]", package.error)

    console.print(table)

    counts = ", ".join(
        f"{n} {outcome.value}" for outcome, n in summary.counts.items() if n
    )
    if summary.success:
        console.print(Panel(f"[green]{EMOJI_SUCCESS}[/green] {counts or 'no changes'}",
                            border_style="green"))
    else:
        console.print(Panel(
            f"[red]{EMOJI_ERROR}[/red] {len(summary.failures)} package(s) failed; {counts}",
            border_style="red",
        ))


def print_error(message: str, error: Optional[Exception] = None) -> None:
    """Print error message"""
    if error:
        console.print(f"[red]Error:[/red] {message}: {str(error)}")
    else:
        console.print(f"[red]Error:[/red] {message}")


def print_warning(message: str) -> None:
    """Print warning message"""
    console.print(f"[yellow]Warning:[/yellow] {message}")
