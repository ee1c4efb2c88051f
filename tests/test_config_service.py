"""
Tests for configuration loading.
"""

import json
from pathlib import Path

import pytest
import yaml

from editor_installer.api.exceptions import ConfigError, ConfigNotFoundError
from editor_installer.services import ConfigService

CONFIG = {
    "editor": {"name": "vim", "bin": "editor/vim", "config": "editor/vimrc"},
    "tools": {
        "ripgrep": {"name": "rg", "bin": "tools/rg", "config": "tools/ripgreprc"},
        "fzf": {"bin": "/opt/fzf/bin/fzf", "dependencies": ["ripgrep"]},
    },
    "groups": {"search": {"dependencies": ["ripgrep", "fzf"]}},
    "paths": {"bin": "out/bin"},
}


def write_config(directory: Path, name: str, data) -> Path:
    path = directory / name
    if name.endswith(".json"):
        path.write_text(json.dumps(data))
    else:
        path.write_text(yaml.safe_dump(data))
    return path


class TestLoad:
    """Reading configuration files."""

    def test_yaml(self, tmp_path):
        path = write_config(tmp_path, "editor-installer.yaml", CONFIG)
        config = ConfigService(path).load_config()

        assert config.editor.name == "vim"
        assert config.editor.bin == tmp_path / "editor" / "vim"
        assert set(config.tools) == {"ripgrep", "fzf"}
        assert config.source == path

    def test_tool_fields(self, tmp_path):
        config = ConfigService(write_config(tmp_path, "c.yml", CONFIG)).load_config()

        rg = config.catalog.get_tool("ripgrep")
        assert rg.name == "rg"
        assert rg.key == "ripgrep"
        assert rg.config == tmp_path / "tools" / "ripgreprc"

        fzf = config.catalog.get_tool("fzf")
        assert fzf.name == "fzf"
        assert fzf.bin == Path("/opt/fzf/bin/fzf")
        assert fzf.dependencies == ["ripgrep"]

    def test_groups_and_paths(self, tmp_path):
        config = ConfigService(write_config(tmp_path, "c.yaml", CONFIG)).load_config()

        group = config.catalog.get_group("search")
        assert group.name == "search"
        assert group.dependencies == ["ripgrep", "fzf"]
        assert config.paths.bin == tmp_path / "out" / "bin"
        assert config.paths.config is None

    def test_json(self, tmp_path):
        config = ConfigService(write_config(tmp_path, "c.json", CONFIG)).load_config()
        assert config.catalog.get_tool("fzf").dependencies == ["ripgrep"]

    def test_toml(self, tmp_path):
        path = tmp_path / "c.toml"
        path.write_text(
            '[editor]\nname = "vim"\nbin = "vim"\nconfig = "vimrc"\n\n'
            '[tools.rg]\nbin = "rg"\n'
        )
        config = ConfigService(path).load_config()

        assert config.editor.config == tmp_path / "vimrc"
        assert config.catalog.get_tool("rg").bin == tmp_path / "rg"
        assert config.groups is None

    def test_environment_expansion(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TOOLS_ROOT", str(tmp_path / "tools"))
        path = tmp_path / "c.yaml"
        path.write_text("tools:\n  rg:\n    bin: $TOOLS_ROOT/rg\n")

        config = ConfigService(path).load_config()

        assert config.catalog.get_tool("rg").bin == tmp_path / "tools" / "rg"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("")

        config = ConfigService(path).load_config()

        assert config.editor is None
        assert config.tools is None

    def test_path_from_environment(self, tmp_path, monkeypatch):
        path = write_config(tmp_path, "custom.yaml", CONFIG)
        monkeypatch.setenv("EDITOR_INSTALLER_CONFIG", str(path))

        assert ConfigService().config.editor.name == "vim"

    def test_to_dict_keeps_declarations(self, tmp_path):
        config = ConfigService(write_config(tmp_path, "c.yaml", CONFIG)).load_config()
        data = config.to_dict()

        assert data["editor"]["config"] == str(tmp_path / "editor" / "vimrc")
        assert data["tools"]["fzf"]["dependencies"] == ["ripgrep"]
        assert data["groups"]["search"]["dependencies"] == ["ripgrep", "fzf"]
        assert data["paths"] == {"bin": str(tmp_path / "out" / "bin")}

    def test_path_resolver_uses_overrides(self, tmp_path):
        service = ConfigService(write_config(tmp_path, "c.yaml", CONFIG))
        resolver = service.path_resolver()

        assert resolver.bin_dir == tmp_path / "out" / "bin"
        assert resolver.base_dir == tmp_path.resolve()


class TestErrors:
    """Malformed or missing configuration."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigNotFoundError):
            ConfigService(tmp_path / "nope.yaml").load_config()

    def test_unparsable(self, tmp_path):
        path = tmp_path / "c.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError, match="Cannot parse"):
            ConfigService(path).load_config()

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_bytes(b"tools:\n  rg:\n    bin: \xff\xfe\n")
        with pytest.raises(ConfigError, match="Cannot parse"):
            ConfigService(path).load_config()

    def test_scalar_tool_dependencies(self, tmp_path):
        data = {"tools": {"rg": {"bin": "rg"}, "fzf": {"bin": "fzf", "dependencies": "rg"}}}
        path = write_config(tmp_path, "c.yaml", data)
        with pytest.raises(ConfigError, match="tools.fzf.dependencies"):
            ConfigService(path).load_config()

    def test_non_string_group_members(self, tmp_path):
        data = {"tools": {"rg": {"bin": "rg"}}, "groups": {"g": {"dependencies": ["rg", 3]}}}
        path = write_config(tmp_path, "c.yaml", data)
        with pytest.raises(ConfigError, match="groups.g.dependencies"):
            ConfigService(path).load_config()

    def test_top_level_must_be_mapping(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            ConfigService(path).load_config()

    def test_tool_without_bin(self, tmp_path):
        path = write_config(tmp_path, "c.yaml", {"tools": {"rg": {"config": "x"}}})
        with pytest.raises(ConfigError, match="bin"):
            ConfigService(path).load_config()

    def test_editor_without_config(self, tmp_path):
        path = write_config(tmp_path, "c.yaml", {"editor": {"name": "vim", "bin": "vim"}})
        with pytest.raises(ConfigError, match="config"):
            ConfigService(path).load_config()

    def test_editor_with_dependencies(self, tmp_path):
        data = {"editor": {"name": "vim", "bin": "vim", "config": "rc", "dependencies": ["rg"]}}
        path = write_config(tmp_path, "c.yaml", data)
        with pytest.raises(ConfigError, match="dependencies"):
            ConfigService(path).load_config()

    def test_tool_must_be_table(self, tmp_path):
        path = write_config(tmp_path, "c.yaml", {"tools": {"rg": "rg"}})
        with pytest.raises(ConfigError, match="must be a table"):
            ConfigService(path).load_config()
