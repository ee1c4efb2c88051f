"""Request models"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from ..api.exceptions import RequestError


class Action(Enum):
    """What a run does"""
    INSTALL = "install"
    REMOVE = "remove"
    LIST = "list"
    UPDATE = "update"


@dataclass
class Request:
    """A validated command invocation"""

    action: Action
    tools: Optional[List[str]] = None
    groups: Optional[List[str]] = None
    force: bool = False
    symbolic: bool = False
    only_editor: bool = False
    except_editor: bool = False
    verbose: bool = False

    def __post_init__(self):
        if self.only_editor and self.except_editor:
            raise RequestError("--only-editor and --except-editor are mutually exclusive")
        # Empty selections mean "nothing explicit"
        if not self.tools:
            self.tools = None
        if not self.groups:
            self.groups = None

    @property
    def handles_editor(self) -> bool:
        """Check if the editor is part of this run"""
        return not self.except_editor

    @property
    def handles_tools(self) -> bool:
        """Check if tools are part of this run"""
        return not self.only_editor

    @property
    def overwrite(self) -> bool:
        """Whether existing destinations are replaced without asking"""
        return self.force or self.action == Action.UPDATE
