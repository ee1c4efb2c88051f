"""Path resolution module for editor-installer"""

import os
from pathlib import Path
from typing import Optional, Union

from ..constants import (
    DEFAULT_BIN_DIR,
    DEFAULT_CONFIG_DIR,
    DEFAULT_DATA_DIR,
    DATA_SUBDIR,
    DATA_EDITOR_SUBDIR,
    DATA_TOOLS_SUBDIR,
    ENV_BIN_DIR,
    ENV_CONFIG_DIR,
    ENV_DATA_DIR,
    ENV_XDG_BIN_HOME,
    ENV_XDG_CONFIG_HOME,
    ENV_XDG_DATA_HOME,
)
from ..models.package import Editor, Package


class PathResolver:
    """Resolves source paths and install destinations"""

    def __init__(self,
                 base_dir: Union[str, Path, None] = None,
                 bin_dir: Union[str, Path, None] = None,
                 config_dir: Union[str, Path, None] = None,
                 data_dir: Union[str, Path, None] = None):
        """Initialize path resolver

        Args:
            base_dir: Directory relative source paths are resolved against
                (usually the configuration file directory)
            bin_dir: Executable directory override
            config_dir: Configuration directory override
            data_dir: Data directory override
        """
        self.base_dir = Path(base_dir).resolve() if base_dir else Path.cwd()
        self._bin_dir = Path(bin_dir).expanduser() if bin_dir else None
        self._config_dir = Path(config_dir).expanduser() if config_dir else None
        self._data_dir = Path(data_dir).expanduser() if data_dir else None

    def resolve(self, path: Union[str, Path]) -> Path:
        """Resolve a path relative to the base directory

        Args:
            path: Path to resolve (can be relative or absolute)

        Returns:
            Absolute path; symbolic links are not followed
        """
        path = Path(path)

        if path.is_absolute():
            return path

        return Path(os.path.normpath(self.base_dir / path))

    def expand_path(self, path: str) -> Path:
        """Expand a path with environment variables and user home

        Args:
            path: Path string to expand

        Returns:
            Expanded path
        """
        path = os.path.expandvars(str(path))
        path = os.path.expanduser(path)
        return self.resolve(path)

    @property
    def bin_dir(self) -> Path:
        """Executable directory"""
        if self._bin_dir is not None:
            return self._bin_dir
        return _from_env(ENV_BIN_DIR) or _from_env(ENV_XDG_BIN_HOME) \
            or Path.home() / DEFAULT_BIN_DIR

    @property
    def config_dir(self) -> Path:
        """Configuration directory"""
        if self._config_dir is not None:
            return self._config_dir
        return _from_env(ENV_CONFIG_DIR) or _from_env(ENV_XDG_CONFIG_HOME) \
            or Path.home() / DEFAULT_CONFIG_DIR

    @property
    def data_dir(self) -> Path:
        """Data directory holding co-located binary and library copies"""
        if self._data_dir is not None:
            return self._data_dir
        explicit = _from_env(ENV_DATA_DIR)
        if explicit:
            return explicit
        xdg_data = _from_env(ENV_XDG_DATA_HOME)
        if xdg_data:
            return xdg_data / DATA_SUBDIR
        return Path.home() / DEFAULT_DATA_DIR / DATA_SUBDIR

    def bin_destination(self, package: Package) -> Path:
        """Where the package binary (or its link) is placed"""
        return self.bin_dir / _artifact_name(package.bin, package.name)

    def config_destination(self, package: Package) -> Optional[Path]:
        """Where the package configuration is placed, keyed by its own file name"""
        if package.config is None:
            return None
        return self.config_dir / _artifact_name(package.config, package.name)

    def data_destination(self, package: Package) -> Path:
        """Data directory copy for a package with a library

        The editor and the tools live in separate subdirectories so an
        editor named like a tool never shares its copy.
        """
        if isinstance(package, Editor):
            return self.data_dir / DATA_EDITOR_SUBDIR / package.key
        return self.data_dir / DATA_TOOLS_SUBDIR / package.key

    def bin_dir_on_path(self) -> bool:
        """Check if the executable directory is listed in PATH"""
        wanted = os.path.normpath(str(self.bin_dir.expanduser()))
        entries = os.environ.get("PATH", "").split(os.pathsep)
        return any(os.path.normpath(os.path.expanduser(e)) == wanted for e in entries if e)


def _from_env(name: str) -> Optional[Path]:
    value = os.environ.get(name)
    if value:
        return Path(value).expanduser()
    return None


def _artifact_name(path: Path, fallback: str) -> str:
    """File name of an artifact, or the fallback when none is derivable"""
    name = Path(os.path.normpath(str(path))).name
    if name in ("", ".", ".."):
        return fallback
    return name
