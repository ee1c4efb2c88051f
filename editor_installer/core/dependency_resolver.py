"""Dependency resolution between configured tools and groups

The resolver works on identifiers: every cross reference kept in a
ResolutionResult is a catalog key, never a nested object graph.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, Iterable, Iterator, List, Optional

from ..api.exceptions import DependencyError, NoToolsConfiguredError, ToolNotFoundError
from ..constants import TAG_INVALID_DEPENDENCY, TAG_INVALID_PATH, TAG_NOT_FOUND
from ..models.config import Catalog
from ..models.package import Group, Package, Tool

logger = logging.getLogger(__name__)

PathChecker = Callable[[Package], Dict[str, Path]]


class DependencyErrorType(Enum):
    """Why a dependency is unsatisfied"""
    NOT_FOUND = "not found"
    UNSATISFIED_DEPENDENCIES = "invalid dependency chain"

    @property
    def tag(self) -> str:
        """Short uppercase tag used in listings"""
        if self is DependencyErrorType.NOT_FOUND:
            return TAG_NOT_FOUND
        return TAG_INVALID_DEPENDENCY


@dataclass
class MissingDependency:
    """One offending dependency of a tool"""

    key: str
    reason: DependencyErrorType

    def describe(self, owner: str) -> str:
        """Human readable explanation"""
        return f"{owner} depends on {self.key} ({self.reason.value})"


@dataclass
class UnsatisfiedTool:
    """A tool that cannot be acted on, with every reason found"""

    tool: Tool
    required: Optional[Dict[str, MissingDependency]] = None
    paths: Optional[Dict[str, Path]] = None

    @property
    def key(self) -> str:
        return self.tool.key

    @property
    def has_errors(self) -> bool:
        return bool(self.required) or bool(self.paths)

    def messages(self) -> List[str]:
        """Every diagnostic for this tool, dependency errors first"""
        lines = [dep.describe(self.key) for dep in (self.required or {}).values()]
        for kind, path in (self.paths or {}).items():
            lines.append(f"{self.key} {kind} path does not exist: {path}")
        return lines


@dataclass
class UnsatisfiedGroup:
    """A group with at least one member outside the satisfied set"""

    group: Group
    unsatisfied_tools: List[str] = field(default_factory=list)

    @property
    def key(self) -> str:
        return self.group.key

    def messages(self) -> List[str]:
        return [f"group {self.key} requires {member} which is not valid"
                for member in self.unsatisfied_tools]


@dataclass
class ResolutionResult:
    """Outcome of one resolution pass

    satisfied_tools keeps the order in which tools finished resolving, so a
    tool always comes after its dependencies.
    """

    visited: List[str] = field(default_factory=list)
    satisfied_tools: Dict[str, Tool] = field(default_factory=dict)
    satisfied_groups: Dict[str, Group] = field(default_factory=dict)
    unsatisfied_tools: Dict[str, UnsatisfiedTool] = field(default_factory=dict)
    unsatisfied_groups: Dict[str, UnsatisfiedGroup] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        """Check if nothing requested is broken"""
        return not self.unsatisfied_tools and not self.unsatisfied_groups

    def validate(self) -> None:
        """Raise DependencyError carrying every problem at once"""
        if not self.is_valid:
            raise DependencyError(self)

    def dependency_error(self, tool_key: str, dep_key: str) -> Optional[DependencyErrorType]:
        """Reason a tool's dependency is unsatisfied, if it is"""
        unsatisfied = self.unsatisfied_tools.get(tool_key)
        if unsatisfied is None or not unsatisfied.required:
            return None
        missing = unsatisfied.required.get(dep_key)
        return missing.reason if missing else None

    def path_error(self, tool_key: str, field_key: str) -> Optional[str]:
        """Tag for a missing artifact path, if it is missing"""
        unsatisfied = self.unsatisfied_tools.get(tool_key)
        if unsatisfied is not None and unsatisfied.paths and field_key in unsatisfied.paths:
            return TAG_INVALID_PATH
        return None

    def has_errors(self, tool_key: str) -> bool:
        """Check if a tool carries dependency or path errors"""
        unsatisfied = self.unsatisfied_tools.get(tool_key)
        return unsatisfied is not None and unsatisfied.has_errors

    def messages(self) -> List[str]:
        """Every diagnostic, tools first then groups"""
        lines = []
        for unsatisfied in self.unsatisfied_tools.values():
            lines.extend(unsatisfied.messages())
        for unsatisfied in self.unsatisfied_groups.values():
            lines.extend(unsatisfied.messages())
        return lines


class _Frame:
    """One tool being expanded on the explicit resolution stack"""

    __slots__ = ("key", "tool", "deps", "required", "waiting")

    def __init__(self, tool: Tool):
        self.key = tool.key
        self.tool = tool
        self.deps: Iterator[str] = iter(tool.requires)
        self.required: Dict[str, MissingDependency] = {}
        self.waiting: Optional[str] = None


class DependencyResolver:
    """Compute which requested tools and groups can be acted on"""

    def __init__(self, catalog: Catalog,
                 check_paths: bool = True,
                 path_checker: Optional[PathChecker] = None):
        """Initialize resolver

        Args:
            catalog: Configured tools and groups (read only)
            check_paths: Treat tools with missing artifact paths as unsatisfied
            path_checker: Returns the missing artifact paths of a package
        """
        self.catalog = catalog
        self.check_paths = check_paths
        self.path_checker = path_checker or (lambda package: package.missing_artifacts())

    def resolve(self,
                tools: Optional[Iterable[str]] = None,
                groups: Optional[Iterable[str]] = None) -> ResolutionResult:
        """
        Resolve a request

        Args:
            tools: Explicit tool identifiers
            groups: Explicit group identifiers (used only without tools)

        Returns:
            ResolutionResult

        Raises:
            ToolNotFoundError: an explicit tool identifier is not configured
            NoToolsConfiguredError: a selection was requested but no tool exists
        """
        tools = list(tools) if tools else None
        groups = list(groups) if groups else None

        if (tools or groups) and not self.catalog.has_tools:
            raise NoToolsConfiguredError()

        requested, requested_groups = self._select(tools, groups)
        result = ResolutionResult()
        visited = set()

        for key in requested:
            if key in visited:
                continue
            tool = self.catalog.get_tool(key)
            if tool is None:
                # Group member that does not exist; reported by the group check
                logger.debug(f"Skipping unknown group member {key}")
                continue
            self._expand(tool, visited, result)

        self._propagate(result)

        for group in requested_groups:
            self._check_group(group, result)

        logger.debug(
            f"Resolved {len(result.satisfied_tools)} tools, "
            f"{len(result.unsatisfied_tools)} unsatisfied"
        )
        return result

    def _select(self, tools, groups):
        """Apply the selection rules; returns (tool keys, groups to check)"""
        if tools:
            for key in tools:
                if key not in self.catalog:
                    raise ToolNotFoundError(key)
            return tools, []

        if groups:
            requested: List[str] = []
            selected: List[Group] = []
            for group_key in groups:
                group = self.catalog.get_group(group_key)
                if group is None:
                    logger.debug(f"Skipping unknown group {group_key}")
                    continue
                selected.append(group)
                requested.extend(group.dependencies)
            return requested, selected

        return list(self.catalog.tools or {}), list((self.catalog.groups or {}).values())

    def _expand(self, root: Tool, visited: set, result: ResolutionResult) -> None:
        """Depth-first expansion of one requested tool"""
        self._visit(root.key, visited, result)
        stack = [_Frame(root)]

        while stack:
            frame = stack[-1]

            if frame.waiting is not None:
                if frame.waiting in result.unsatisfied_tools:
                    frame.required[frame.waiting] = MissingDependency(
                        frame.waiting, DependencyErrorType.UNSATISFIED_DEPENDENCIES)
                frame.waiting = None

            descended = False
            for dep in frame.deps:
                dep_tool = self.catalog.get_tool(dep)
                if dep_tool is None:
                    frame.required[dep] = MissingDependency(dep, DependencyErrorType.NOT_FOUND)
                    continue
                if dep not in visited:
                    self._visit(dep, visited, result)
                    frame.waiting = dep
                    stack.append(_Frame(dep_tool))
                    descended = True
                    break
                if dep in result.unsatisfied_tools:
                    frame.required[dep] = MissingDependency(
                        dep, DependencyErrorType.UNSATISFIED_DEPENDENCIES)

            if descended:
                continue

            stack.pop()
            self._finish(frame, result)

    def _visit(self, key: str, visited: set, result: ResolutionResult) -> None:
        visited.add(key)
        result.visited.append(key)

    def _finish(self, frame: _Frame, result: ResolutionResult) -> None:
        paths = self.path_checker(frame.tool) if self.check_paths else {}

        if frame.required or paths:
            result.unsatisfied_tools[frame.key] = UnsatisfiedTool(
                tool=frame.tool,
                required=frame.required or None,
                paths=paths or None,
            )
            logger.debug(f"Tool {frame.key} is unsatisfied")
        else:
            result.satisfied_tools[frame.key] = frame.tool

    def _propagate(self, result: ResolutionResult) -> None:
        """Move satisfied tools depending on unsatisfied ones

        Needed when a cycle was closed before one of its members failed.
        """
        changed = True
        while changed:
            changed = False
            for key in list(result.satisfied_tools):
                tool = result.satisfied_tools[key]
                broken = {
                    dep: MissingDependency(dep, DependencyErrorType.UNSATISFIED_DEPENDENCIES)
                    for dep in tool.requires
                    if dep in result.unsatisfied_tools
                }
                if broken:
                    del result.satisfied_tools[key]
                    result.unsatisfied_tools[key] = UnsatisfiedTool(tool=tool, required=broken)
                    changed = True

    def _check_group(self, group: Group, result: ResolutionResult) -> None:
        offending = [member for member in group.dependencies
                     if member not in result.satisfied_tools]
        if offending:
            result.unsatisfied_groups[group.key] = UnsatisfiedGroup(group, offending)
        else:
            result.satisfied_groups[group.key] = group
