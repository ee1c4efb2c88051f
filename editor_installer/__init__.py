"""Editor Installer - provision an editor and its command-line tools.

Tools, their configuration and library artifacts, and the dependencies
between them are declared in one configuration file; the installer
resolves which of them can be installed and places them in the user's
executable, configuration and data directories.
"""

from .__version__ import __version__, __version_info__, __author__, __license__

# Data models
from .models import (
    Package,
    Tool,
    Editor,
    Group,
    Catalog,
    Config,
    Action,
    Request,
    Outcome,
    PackageResult,
    RunSummary,
)

# Core
from .core import (
    PathResolver,
    FileActions,
    Confirmer,
    DependencyResolver,
    DependencyErrorType,
    ResolutionResult,
)

# Services
from .services import ConfigService, PackageService, InstallService

# Exceptions
from .api.exceptions import (
    InstallerError,
    ConfigError,
    RequestError,
    ToolNotFoundError,
    NoToolsConfiguredError,
    DependencyError,
    PackageValidationError,
    FileOperationError,
    ArtifactError,
)

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__license__",

    # Data models
    "Package",
    "Tool",
    "Editor",
    "Group",
    "Catalog",
    "Config",
    "Action",
    "Request",
    "Outcome",
    "PackageResult",
    "RunSummary",

    # Core
    "PathResolver",
    "FileActions",
    "Confirmer",
    "DependencyResolver",
    "DependencyErrorType",
    "ResolutionResult",

    # Services
    "ConfigService",
    "PackageService",
    "InstallService",

    # Exceptions
    "InstallerError",
    "ConfigError",
    "RequestError",
    "ToolNotFoundError",
    "NoToolsConfiguredError",
    "DependencyError",
    "PackageValidationError",
    "FileOperationError",
    "ArtifactError",
]
