# editor_installer/cli/commands/__init__.py
"""CLI commands"""

from . import install
from . import remove
from . import update
from . import listing
from . import paths

__all__ = [
    "install",
    "remove",
    "update",
    "listing",
    "paths",
]
