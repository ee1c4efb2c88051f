"""Command line interface for editor-installer"""

from .main import cli, main

__all__ = ["cli", "main"]
