"""Test helpers shared across test modules."""

from pathlib import Path
from typing import List, Optional

from editor_installer.models import Catalog, Group, Tool


class ScriptedConfirm:
    """Confirmation callback answering from a fixed script"""

    def __init__(self, answers: Optional[List[bool]] = None, default: Optional[bool] = None):
        self.answers = list(answers or [])
        self.default = default
        self.prompts: List[str] = []

    def __call__(self, prompt: str, default: bool) -> bool:
        self.prompts.append(prompt)
        if self.answers:
            return self.answers.pop(0)
        if self.default is not None:
            return self.default
        return default


def make_catalog(graph: dict, groups: Optional[dict] = None) -> Catalog:
    """Catalog from {key: [dependencies]} with placeholder paths"""
    tools = {
        key: Tool(name=key, bin=Path(f"/nonexistent/{key}"), dependencies=deps, identifier=key)
        for key, deps in graph.items()
    }
    group_map = None
    if groups is not None:
        group_map = {key: Group(key=key, dependencies=members) for key, members in groups.items()}
    return Catalog(tools=tools, groups=group_map)
