# editor_installer/services/package_service.py
"""Package lifecycle: install and remove the artifacts of one package"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Dict, Optional

from ..api.exceptions import ArtifactError, FileOperationError, PackageValidationError
from ..constants import ARTIFACT_BIN, ARTIFACT_LIB, ARTIFACT_CONFIG
from ..core.file_actions import FileActions
from ..core.path_resolver import PathResolver
from ..models.package import Package
from ..models.result import Outcome, PackageResult
from ..utils.file_utils import common_root

logger = logging.getLogger(__name__)


class PackageService:
    """Apply file actions to the binary, library and configuration of a package"""

    def __init__(self,
                 path_resolver: Optional[PathResolver] = None,
                 file_actions: Optional[FileActions] = None):
        """Initialize package service

        Args:
            path_resolver: Computes destinations
            file_actions: Performs the filesystem changes
        """
        self.path_resolver = path_resolver or PathResolver()
        self.file_actions = file_actions or FileActions()

    def existence_paths(self, package: Package) -> Dict[str, Path]:
        """Declared artifact paths that do not exist, keyed by 'bin', 'lib', 'config'"""
        return package.missing_artifacts()

    def validate(self, package: Package) -> None:
        """
        Pre-flight check of the declared source paths

        Raises:
            PackageValidationError: bin, or a declared config or lib, is missing
        """
        missing = self.existence_paths(package)
        if missing:
            raise PackageValidationError(package.key, missing)

    def install(self, package: Package,
                force: bool = False,
                symbolic: bool = False) -> PackageResult:
        """
        Install every artifact of a package

        Args:
            package: Tool or editor
            force: Replace existing destinations without asking
            symbolic: Link artifacts instead of copying them

        Returns:
            PackageResult with one outcome per artifact

        Raises:
            ArtifactError: a filesystem action failed; remaining artifacts
                were not touched
        """
        result = PackageResult(package.key)
        logger.info(f"Installing {package.key}")

        with self._recording(result):
            if package.lib is not None and not symbolic:
                self._install_with_library(package, result, force)
            else:
                bin_dest = self.path_resolver.bin_destination(package)
                outcome = self._act(package, ARTIFACT_BIN, lambda: self.file_actions.install_artifact(
                    package.bin, bin_dest, force=force, symbolic=symbolic))
                result.add(ARTIFACT_BIN, outcome, bin_dest)
                if package.lib is not None:
                    # The link already points into the source tree next to the library
                    result.add(ARTIFACT_LIB, Outcome.IGNORED)

            config_dest = self.path_resolver.config_destination(package)
            if config_dest is None:
                result.add(ARTIFACT_CONFIG, Outcome.IGNORED)
            else:
                outcome = self._act(package, ARTIFACT_CONFIG, lambda: self.file_actions.install_artifact(
                    package.config, config_dest, force=force, symbolic=symbolic))
                result.add(ARTIFACT_CONFIG, outcome, config_dest)

        return result

    def remove(self, package: Package, force: bool = False) -> PackageResult:
        """
        Remove every installed artifact of a package

        Args:
            package: Tool or editor
            force: Remove without asking

        Returns:
            PackageResult with one outcome per artifact
        """
        result = PackageResult(package.key)
        logger.info(f"Removing {package.key}")

        with self._recording(result):
            bin_dest = self.path_resolver.bin_destination(package)
            outcome = self._act(package, ARTIFACT_BIN,
                                lambda: self.file_actions.remove_artifact(bin_dest, force=force))
            result.add(ARTIFACT_BIN, outcome, bin_dest)

            if package.lib is not None:
                data_dest = self.path_resolver.data_destination(package)
                outcome = self._act(package, ARTIFACT_LIB,
                                    lambda: self.file_actions.remove_artifact(data_dest, force=force))
                result.add(ARTIFACT_LIB, outcome, data_dest)

            config_dest = self.path_resolver.config_destination(package)
            if config_dest is None:
                result.add(ARTIFACT_CONFIG, Outcome.IGNORED)
            else:
                outcome = self._act(package, ARTIFACT_CONFIG,
                                    lambda: self.file_actions.remove_artifact(config_dest, force=force))
                result.add(ARTIFACT_CONFIG, outcome, config_dest)

        return result

    def _install_with_library(self, package: Package, result: PackageResult, force: bool) -> None:
        """Copy binary and library under the data directory and link the binary

        The relative layout of the two is kept so the binary finds its
        library at the same offset as in the source tree.
        """
        data_root = self.path_resolver.data_destination(package)
        root = common_root(package.bin.parent, package.lib.parent)
        if root is None:
            data_bin = data_root / package.bin.name
            data_lib = data_root / package.lib.name
        else:
            data_bin = data_root / package.bin.relative_to(root)
            data_lib = data_root / package.lib.relative_to(root)

        lib_outcome = self._act(package, ARTIFACT_LIB, lambda: self.file_actions.install_artifact(
            package.lib, data_lib, force=force))
        result.add(ARTIFACT_LIB, lib_outcome, data_lib)

        if package.bin.is_relative_to(package.lib):
            # Copied along with the library directory
            copy_outcome = lib_outcome
        else:
            copy_outcome = self._act(package, ARTIFACT_BIN, lambda: self.file_actions.install_artifact(
                package.bin, data_bin, force=force))

        bin_dest = self.path_resolver.bin_destination(package)
        if copy_outcome == Outcome.CANCELED:
            result.add(ARTIFACT_BIN, Outcome.CANCELED, bin_dest)
            return

        link_outcome = self._act(package, ARTIFACT_BIN, lambda: self.file_actions.install_artifact(
            data_bin, bin_dest, force=force, symbolic=True))
        if link_outcome == Outcome.LINKED:
            link_outcome = Outcome.INSTALLED
        result.add(ARTIFACT_BIN, link_outcome, bin_dest)

    def _act(self, package: Package, artifact: str, action: Callable[[], Outcome]) -> Outcome:
        try:
            return action()
        except FileOperationError as e:
            raise ArtifactError(package.key, artifact, e.path, e.cause) from e

    @contextmanager
    def _recording(self, result: PackageResult):
        """Attach the partial result to an ArtifactError on its way out"""
        try:
            yield result
        except ArtifactError as e:
            result.error = str(e)
            e.result = result
            raise
