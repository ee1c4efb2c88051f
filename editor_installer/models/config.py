"""Configuration data models"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Any

from .package import Editor, Tool, Group


@dataclass
class Catalog:
    """Every configured tool and group

    A missing mapping (None) means nothing of that kind is configured,
    which is different from an explicitly empty table.
    """

    tools: Optional[Dict[str, Tool]] = None
    groups: Optional[Dict[str, Group]] = None

    @property
    def has_tools(self) -> bool:
        """Check if at least one tool is configured"""
        return bool(self.tools)

    def get_tool(self, key: str) -> Optional[Tool]:
        """Get tool by identifier"""
        if not self.tools:
            return None
        return self.tools.get(key)

    def get_group(self, key: str) -> Optional[Group]:
        """Get group by identifier"""
        if not self.groups:
            return None
        return self.groups.get(key)

    def __contains__(self, key: str) -> bool:
        return self.get_tool(key) is not None


@dataclass
class PathsConfig:
    """Destination directory overrides"""

    bin: Optional[Path] = None
    config: Optional[Path] = None
    data: Optional[Path] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            key: str(value)
            for key, value in (("bin", self.bin), ("config", self.config), ("data", self.data))
            if value is not None
        }


@dataclass
class Config:
    """Top level configuration loaded from the configuration file"""

    editor: Optional[Editor] = None
    catalog: Catalog = field(default_factory=Catalog)
    paths: PathsConfig = field(default_factory=PathsConfig)
    source: Optional[Path] = None

    @property
    def tools(self) -> Optional[Dict[str, Tool]]:
        """Configured tools"""
        return self.catalog.tools

    @property
    def groups(self) -> Optional[Dict[str, Group]]:
        """Configured groups"""
        return self.catalog.groups

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data: Dict[str, Any] = {}
        if self.editor is not None:
            data["editor"] = self.editor.to_dict()
        if self.catalog.tools is not None:
            data["tools"] = {key: tool.to_dict() for key, tool in self.catalog.tools.items()}
        if self.catalog.groups is not None:
            data["groups"] = {
                key: {"name": group.name, "dependencies": list(group.dependencies)}
                for key, group in self.catalog.groups.items()
            }
        paths = self.paths.to_dict()
        if paths:
            data["paths"] = paths
        return data
