# editor_installer/services/install_service.py
"""Run orchestration: editor handling, dependency resolution and per-tool actions"""

import logging
from typing import Optional

from ..api.exceptions import ArtifactError
from ..core.dependency_resolver import DependencyResolver, ResolutionResult
from ..models.config import Config
from ..models.package import Package
from ..models.request import Action, Request
from ..models.result import PackageResult, RunSummary
from .package_service import PackageService

logger = logging.getLogger(__name__)


class InstallService:
    """Drive one full resolve-then-act pass"""

    def __init__(self, config: Config, package_service: Optional[PackageService] = None):
        """Initialize install service

        Args:
            config: Loaded configuration
            package_service: Lifecycle service used for every package
        """
        self.config = config
        self.package_service = package_service or PackageService()

    def resolve(self, request: Request) -> ResolutionResult:
        """Resolve the tools selected by a request

        Source paths are only checked when artifacts are going to be read,
        so a tool whose sources vanished can still be removed.
        """
        resolver = DependencyResolver(
            self.config.catalog,
            check_paths=request.action != Action.REMOVE,
        )
        return resolver.resolve(tools=request.tools, groups=request.groups)

    def run(self, request: Request) -> RunSummary:
        """
        Execute a request

        Args:
            request: Validated request

        Returns:
            RunSummary with every package outcome

        Raises:
            RequestError: the selection itself is invalid
            DependencyError: some selected tools or groups are unsatisfied
            PackageValidationError: the editor sources are missing
        """
        summary = RunSummary(action=request.action.value)

        resolution = None
        if request.handles_tools:
            resolution = self.resolve(request)
            summary.resolution = resolution

        if request.action == Action.LIST:
            return summary

        # Nothing is touched unless the whole selection is valid
        if resolution is not None:
            for line in resolution.messages():
                logger.debug(line)
            resolution.validate()

        editor = self.config.editor if request.handles_editor else None
        if editor is not None and request.action != Action.REMOVE:
            self.package_service.validate(editor)

        if editor is not None:
            self._apply(editor, request, summary)

        if resolution is not None:
            for tool in resolution.satisfied_tools.values():
                self._apply(tool, request, summary)

        logger.debug(f"Run finished: {summary.to_dict()['counts']}")
        return summary

    def _apply(self, package: Package, request: Request, summary: RunSummary) -> None:
        try:
            if request.action == Action.REMOVE:
                result = self.package_service.remove(package, force=request.force)
            else:
                result = self.package_service.install(
                    package, force=request.overwrite, symbolic=request.symbolic)
        except ArtifactError as e:
            logger.error(str(e))
            result = e.result or PackageResult(package.key, error=str(e))

        summary.add(result)
