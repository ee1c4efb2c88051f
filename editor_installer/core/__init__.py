"""Core functionality for editor-installer"""

from .path_resolver import PathResolver
from .file_actions import FileActions, Confirmer
from .dependency_resolver import (
    DependencyResolver,
    DependencyErrorType,
    MissingDependency,
    ResolutionResult,
    UnsatisfiedTool,
    UnsatisfiedGroup,
)

__all__ = [
    "PathResolver",
    "FileActions",
    "Confirmer",
    "DependencyResolver",
    "DependencyErrorType",
    "MissingDependency",
    "ResolutionResult",
    "UnsatisfiedTool",
    "UnsatisfiedGroup",
]
