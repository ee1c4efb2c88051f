# editor_installer/cli/main.py
"""Main CLI entry point for editor-installer"""

import sys
import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from ..__version__ import __version__
from ..constants import APP_NAME, LOG_FORMAT
from ..core import PathResolver
from ..models import Config
from ..services import ConfigService

# Import all commands
from .commands import (
    install,
    remove,
    update,
    listing,
    paths,
)

console = Console()


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Configure rich handler
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ],
        force=True,
    )


class Context:
    """CLI context object with lazy configuration loading

    The configuration file is only read when a command first asks for it,
    so `--help` and `paths` work without one.
    """

    def __init__(self, config_path: Optional[str] = None):
        """Initialize CLI context"""
        self.config_path = config_path
        self.verbose: bool = False
        self.debug: bool = False
        self._config_service: Optional[ConfigService] = None

    @property
    def config_service(self) -> ConfigService:
        """Get configuration service (lazy loading)"""
        if self._config_service is None:
            self._config_service = ConfigService(self.config_path)
        return self._config_service

    @property
    def config(self) -> Config:
        """Get loaded configuration

        Raises:
            ConfigError: the file is missing or malformed
        """
        return self.config_service.config

    @property
    def path_resolver(self) -> PathResolver:
        """Get path resolver honoring configured directory overrides"""
        return self.config_service.path_resolver()

    def optional_path_resolver(self) -> PathResolver:
        """Path resolver that works without a configuration file"""
        if Path(self.config_service.config_path).is_file():
            return self.path_resolver
        return PathResolver()


@click.group(name=APP_NAME)
@click.version_option(__version__, prog_name=APP_NAME)
@click.option('-c', '--config', 'config_path', type=click.Path(dir_okay=False),
              help='Configuration file (default: ./editor-installer.yaml)')
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all output except errors')
@click.pass_context
def cli(ctx, config_path, verbose, debug, quiet):
    """Editor Installer - provision an editor and its command-line tools

    Tools are declared with a binary, an optional configuration and an
    optional library, and may depend on other tools or be bundled into
    groups. Only tools whose whole dependency chain is valid are acted on.
    """
    # Setup logging
    if quiet:
        logging.disable(logging.CRITICAL)
    else:
        setup_logging(verbose=verbose, debug=debug)

    ctx.obj = Context(config_path)
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug


# Register commands
cli.add_command(install.install)
cli.add_command(remove.remove)
cli.add_command(update.update)
cli.add_command(listing.list_packages)
cli.add_command(paths.paths)


def main():
    """Main entry point for the CLI application

    This function handles:
    - Keyboard interrupts
    - Unexpected exceptions with proper error display
    """
    try:
        # Abort and usage errors are handled below
        cli(prog_name=APP_NAME, standalone_mode=False)

    except (KeyboardInterrupt, click.exceptions.Abort):
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)

    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    main()
