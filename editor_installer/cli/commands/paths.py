"""Path management command"""

import sys
from pathlib import Path

import click
from rich import box
from rich.console import Console
from rich.table import Table

from ..utils.output import print_error
from ...api.exceptions import ConfigError
from ...constants import ENV_BIN_DIR, ENV_CONFIG_DIR, ENV_DATA_DIR

console = Console()


@click.command()
@click.pass_context
def paths(ctx):
    """Show where artifacts are installed

    Lists the executable, configuration and data directories (after
    configuration overrides and environment variables) and warns when
    the executable directory is not on PATH. PATH itself is never changed.

    Example:
        editor-installer paths
    """
    try:
        resolver = ctx.obj.optional_path_resolver()
    except ConfigError as e:
        print_error(str(e))
        sys.exit(1)

    table = Table(title="Install Paths", box=box.ROUNDED)
    table.add_column("Directory", style="cyan")
    table.add_column("Path", style="green")
    table.add_column("Exists")
    table.add_column("Override", style="dim")

    paths_info = [
        ("Executables", resolver.bin_dir, ENV_BIN_DIR),
        ("Configuration", resolver.config_dir, ENV_CONFIG_DIR),
        ("Data", resolver.data_dir, ENV_DATA_DIR),
    ]

    for name, path, env_var in paths_info:
        table.add_row(name, str(path), "Yes" if Path(path).exists() else "No", env_var)

    console.print(table)

    console.print("\n[bold]Environment:[/bold]")
    console.print(f"  Current Directory: {Path.cwd()}")
    console.print(f"  Configuration: {ctx.obj.config_service.config_path}")

    if not resolver.bin_dir_on_path():
        console.print(
            f"\n[yellow]Warning:[/yellow] {resolver.bin_dir} is not in PATH; "
            f"add it to your shell profile to run installed tools"
        )
    else:
        console.print(f"\n[green]✓[/green] {resolver.bin_dir} is in PATH")
