"""Idempotent, confirmable install and remove primitives"""

import logging
from pathlib import Path
from typing import Callable, Optional

from rich.console import Console

from ..api.exceptions import FileOperationError
from ..constants import (
    AFFIRMATIVE_ANSWERS,
    NEGATIVE_ANSWERS,
    PROMPT_CONFIRM_OVERWRITE,
    PROMPT_CONFIRM_REMOVE,
)
from ..models.result import Outcome
from ..utils.file_utils import path_present, remove_path, copy_path, link_path

logger = logging.getLogger(__name__)

ConfirmCallback = Callable[[str, bool], bool]


class Confirmer:
    """Ask a yes/no question on standard input

    Only the answer opposite to the default changes the result: with a
    default of No, only an affirmative token accepts; with a default of
    Yes, only a negative token declines.
    """

    def __init__(self, console: Console = None):
        self.console = console or Console()

    def __call__(self, prompt: str, default: bool) -> bool:
        try:
            answer = self.console.input(prompt, markup=False)
        except EOFError:
            answer = ""

        answer = answer.strip().lower()
        if default:
            return answer not in NEGATIVE_ANSWERS
        return answer in AFFIRMATIVE_ANSWERS


class FileActions:
    """Place and remove a single artifact"""

    def __init__(self, confirm: Optional[ConfirmCallback] = None):
        """Initialize file actions

        Args:
            confirm: Callable(prompt, default) -> bool; reads standard
                input when not given
        """
        self.confirm = confirm or Confirmer()

    def install_artifact(self,
                         source: Path,
                         destination: Path,
                         force: bool = False,
                         symbolic: bool = False) -> Outcome:
        """
        Place source at destination

        Args:
            source: Artifact to install
            destination: Where to place it
            force: Replace an existing destination without asking
            symbolic: Link instead of copying

        Returns:
            LINKED, INSTALLED or CANCELED
        """
        source = Path(source)
        destination = Path(destination)

        if path_present(destination):
            if not force and not self.confirm(
                    PROMPT_CONFIRM_OVERWRITE.format(path=destination), False):
                logger.info(f"Kept existing {destination}")
                return Outcome.CANCELED
            self._remove(destination)

        return self._place(source, destination, symbolic)

    def remove_artifact(self, path: Path, force: bool = False) -> Outcome:
        """
        Remove whatever occupies path

        Args:
            path: Installed artifact
            force: Remove without asking

        Returns:
            IGNORED, REMOVED or CANCELED
        """
        path = Path(path)

        if not path_present(path):
            logger.debug(f"Nothing to remove at {path}")
            return Outcome.IGNORED

        if not force and not self.confirm(PROMPT_CONFIRM_REMOVE.format(path=path), True):
            logger.info(f"Kept {path}")
            return Outcome.CANCELED

        self._remove(path)
        logger.info(f"Removed {path}")
        return Outcome.REMOVED

    def _place(self, source: Path, destination: Path, symbolic: bool) -> Outcome:
        if symbolic:
            try:
                target = link_path(source, destination)
            except OSError as e:
                raise FileOperationError(destination, "link", e) from e
            logger.info(f"Linked {destination} -> {target}")
            return Outcome.LINKED

        try:
            copy_path(source, destination)
        except OSError as e:
            raise FileOperationError(destination, "copy", e) from e
        logger.info(f"Installed {source} -> {destination}")
        return Outcome.INSTALLED

    def _remove(self, path: Path) -> None:
        try:
            remove_path(path)
        except OSError as e:
            raise FileOperationError(path, "remove", e) from e
