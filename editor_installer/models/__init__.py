# editor_installer/models/__init__.py
"""Data models for editor-installer"""

from .package import Package, Tool, Editor, Group
from .config import Catalog, Config, PathsConfig
from .request import Action, Request
from .result import Outcome, ArtifactResult, PackageResult, RunSummary

__all__ = [
    # Package models
    "Package",
    "Tool",
    "Editor",
    "Group",

    # Config models
    "Catalog",
    "Config",
    "PathsConfig",

    # Request models
    "Action",
    "Request",

    # Result models
    "Outcome",
    "ArtifactResult",
    "PackageResult",
    "RunSummary",
]
