"""Public API for editor-installer"""

from .exceptions import (
    InstallerError,
    ConfigError,
    ConfigNotFoundError,
    RequestError,
    ToolNotFoundError,
    NoToolsConfiguredError,
    DependencyError,
    PackageValidationError,
    FileOperationError,
    ArtifactError,
)

__all__ = [
    "InstallerError",
    "ConfigError",
    "ConfigNotFoundError",
    "RequestError",
    "ToolNotFoundError",
    "NoToolsConfiguredError",
    "DependencyError",
    "PackageValidationError",
    "FileOperationError",
    "ArtifactError",
]
