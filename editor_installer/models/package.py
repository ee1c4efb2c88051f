"""Installable package data models"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Any

from ..constants import ARTIFACT_BIN, ARTIFACT_LIB, ARTIFACT_CONFIG


@dataclass
class Package:
    """Something that can be installed: a binary plus optional config and library

    Both the editor and the tools share this shape, so the filesystem logic
    is written once against it.
    """

    name: str
    bin: Path
    config: Optional[Path] = None
    lib: Optional[Path] = None
    dependencies: Optional[List[str]] = None
    identifier: Optional[str] = None

    def __post_init__(self):
        """Post-initialization processing"""
        if isinstance(self.bin, str):
            self.bin = Path(self.bin)
        if isinstance(self.config, str):
            self.config = Path(self.config)
        if isinstance(self.lib, str):
            self.lib = Path(self.lib)
        if self.dependencies is not None:
            self.dependencies = list(self.dependencies)

    @property
    def key(self) -> str:
        """Catalog identifier (falls back to the display name)"""
        return self.identifier or self.name

    @property
    def requires(self) -> List[str]:
        """Declared dependency identifiers, empty when none"""
        return self.dependencies or []

    def artifacts(self) -> Dict[str, Path]:
        """Declared artifact paths keyed by artifact kind"""
        declared = {ARTIFACT_BIN: self.bin}
        if self.lib is not None:
            declared[ARTIFACT_LIB] = self.lib
        if self.config is not None:
            declared[ARTIFACT_CONFIG] = self.config
        return declared

    def missing_artifacts(self) -> Dict[str, Path]:
        """Declared artifact paths that do not exist on disk"""
        return {kind: path for kind, path in self.artifacts().items() if not path.exists()}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {"name": self.name, "bin": str(self.bin)}
        if self.config is not None:
            data["config"] = str(self.config)
        if self.lib is not None:
            data["lib"] = str(self.lib)
        if self.dependencies is not None:
            data["dependencies"] = list(self.dependencies)
        return data


@dataclass
class Tool(Package):
    """An auxiliary command-line tool declared in the catalog"""

    @classmethod
    def from_dict(cls, key: str, data: Dict[str, Any],
                  resolve: Callable[[str], Path] = Path) -> 'Tool':
        """Create from dictionary

        Args:
            key: Catalog identifier
            data: Raw tool table
            resolve: Turns a configured path string into a Path
        """
        return cls(
            name=data.get("name", key),
            bin=resolve(data["bin"]),
            config=resolve(data["config"]) if data.get("config") else None,
            lib=resolve(data["lib"]) if data.get("lib") else None,
            dependencies=_identifiers(data.get("dependencies"), f"tools.{key}.dependencies"),
            identifier=key,
        )


@dataclass
class Editor(Package):
    """The editor itself; always carries a configuration and never depends on tools"""

    def __post_init__(self):
        super().__post_init__()
        if self.config is None:
            raise ValueError(f"Editor '{self.name}' requires a 'config' path")
        if self.dependencies:
            raise ValueError("Editor cannot declare dependencies")

    @classmethod
    def from_dict(cls, data: Dict[str, Any],
                  resolve: Callable[[str], Path] = Path) -> 'Editor':
        """Create from dictionary"""
        return cls(
            name=data["name"],
            bin=resolve(data["bin"]),
            config=resolve(data["config"]),
            lib=resolve(data["lib"]) if data.get("lib") else None,
            dependencies=data.get("dependencies"),
        )


@dataclass
class Group:
    """A named, ordered set of tool identifiers"""

    key: str
    dependencies: List[str] = field(default_factory=list)
    name: Optional[str] = None

    def __post_init__(self):
        if self.name is None:
            self.name = self.key

    @classmethod
    def from_dict(cls, key: str, data: Dict[str, Any]) -> 'Group':
        """Create from dictionary"""
        return cls(
            key=key,
            dependencies=_identifiers(data.get("dependencies"), f"groups.{key}.dependencies") or [],
            name=data.get("name"),
        )


def _identifiers(value: Any, where: str) -> Optional[List[str]]:
    """Validate a configured list of identifiers"""
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"'{where}' must be a list of identifiers")
    return list(value)
