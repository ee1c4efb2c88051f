"""Configuration loading service"""

import json
import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ..api.exceptions import ConfigError, ConfigNotFoundError
from ..constants import CONFIG_SUFFIXES, DEFAULT_CONFIG_FILE, ENV_CONFIG_PATH
from ..core.path_resolver import PathResolver
from ..models.config import Catalog, Config, PathsConfig
from ..models.package import Editor, Group, Tool

logger = logging.getLogger(__name__)


class ConfigService:
    """Service for loading the installer configuration"""

    def __init__(self, config_path: Union[str, Path, None] = None):
        """Initialize config service

        Args:
            config_path: Configuration file; falls back to the
                EDITOR_INSTALLER_CONFIG variable, then to the default
                file in the working directory
        """
        if config_path is None:
            config_path = os.environ.get(ENV_CONFIG_PATH) or DEFAULT_CONFIG_FILE
        self.config_path = Path(config_path).expanduser()
        self._config: Optional[Config] = None

    @property
    def config(self) -> Config:
        """Get current configuration (lazy load)"""
        if self._config is None:
            self.load_config()
        return self._config

    def load_config(self) -> Config:
        """Load configuration from file

        Returns:
            Loaded configuration
        """
        if not self.config_path.is_file():
            raise ConfigNotFoundError(self.config_path)

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except UnicodeDecodeError as e:
            raise ConfigError(f"Cannot parse {self.config_path}: {e}") from e

        # Simple environment variable expansion
        content = os.path.expandvars(content)

        data = self._parse(content)
        self._config = self.build_config(data, base_dir=self.config_path.resolve().parent)
        self._config.source = self.config_path

        logger.debug(f"Loaded configuration from {self.config_path}")
        return self._config

    def _parse(self, content: str) -> Dict[str, Any]:
        file_format = CONFIG_SUFFIXES.get(self.config_path.suffix.lower(), "yaml")

        try:
            if file_format == "toml":
                data = tomllib.loads(content)
            elif file_format == "json":
                data = json.loads(content)
            else:
                data = yaml.safe_load(content)
        except (yaml.YAMLError, tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
            raise ConfigError(f"Cannot parse {self.config_path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"{self.config_path}: top level must be a mapping")
        return data

    @staticmethod
    def build_config(data: Dict[str, Any], base_dir: Union[str, Path, None] = None) -> Config:
        """Create a Config from already parsed data

        Args:
            data: Parsed configuration mapping
            base_dir: Directory relative paths are resolved against

        Returns:
            Config
        """
        resolver = PathResolver(base_dir)

        try:
            editor = None
            if data.get("editor") is not None:
                editor = Editor.from_dict(_table(data, "editor"), resolve=resolver.expand_path)

            tools = None
            if data.get("tools") is not None:
                tools = {
                    str(key): Tool.from_dict(str(key), _entry(entry, f"tools.{key}"),
                                             resolve=resolver.expand_path)
                    for key, entry in _table(data, "tools").items()
                }

            groups = None
            if data.get("groups") is not None:
                groups = {
                    str(key): Group.from_dict(str(key), _entry(entry, f"groups.{key}"))
                    for key, entry in _table(data, "groups").items()
                }

            paths_data = _table(data, "paths") if data.get("paths") is not None else {}
            paths = PathsConfig(
                bin=resolver.expand_path(paths_data["bin"]) if paths_data.get("bin") else None,
                config=resolver.expand_path(paths_data["config"]) if paths_data.get("config") else None,
                data=resolver.expand_path(paths_data["data"]) if paths_data.get("data") else None,
            )
        except KeyError as e:
            raise ConfigError(f"Missing required field: {e.args[0]}") from e
        except (TypeError, ValueError) as e:
            raise ConfigError(str(e)) from e

        return Config(editor=editor, catalog=Catalog(tools=tools, groups=groups), paths=paths)

    def path_resolver(self) -> PathResolver:
        """PathResolver honoring the configured directory overrides"""
        paths = self.config.paths
        return PathResolver(
            self.config_path.resolve().parent,
            bin_dir=paths.bin,
            config_dir=paths.config,
            data_dir=paths.data,
        )


def _table(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    return _entry(data[key], key)


def _entry(value: Any, where: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ConfigError(f"'{where}' must be a table")
    return value
