"""
Tests for source and destination path resolution.
"""

from pathlib import Path

import pytest

from editor_installer.core import PathResolver
from editor_installer.models import Editor, Tool

ENV_VARS = [
    "EDITOR_INSTALLER_BIN_DIR",
    "EDITOR_INSTALLER_CONFIG_DIR",
    "EDITOR_INSTALLER_DATA_DIR",
    "XDG_BIN_HOME",
    "XDG_CONFIG_HOME",
    "XDG_DATA_HOME",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


class TestDirectories:
    """Destination directory precedence."""

    def test_defaults_under_home(self, tmp_path):
        resolver = PathResolver()
        home = tmp_path / "home"

        assert resolver.bin_dir == home / ".local" / "bin"
        assert resolver.config_dir == home / ".config"
        assert resolver.data_dir == home / ".local" / "share" / "editor-installer"

    def test_xdg_variables(self, monkeypatch, tmp_path):
        monkeypatch.setenv("XDG_BIN_HOME", str(tmp_path / "xbin"))
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xconf"))
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdata"))
        resolver = PathResolver()

        assert resolver.bin_dir == tmp_path / "xbin"
        assert resolver.config_dir == tmp_path / "xconf"
        assert resolver.data_dir == tmp_path / "xdata" / "editor-installer"

    def test_installer_variables_win_over_xdg(self, monkeypatch, tmp_path):
        monkeypatch.setenv("XDG_BIN_HOME", str(tmp_path / "xbin"))
        monkeypatch.setenv("EDITOR_INSTALLER_BIN_DIR", str(tmp_path / "bin"))
        monkeypatch.setenv("EDITOR_INSTALLER_DATA_DIR", str(tmp_path / "data"))

        resolver = PathResolver()

        assert resolver.bin_dir == tmp_path / "bin"
        assert resolver.data_dir == tmp_path / "data"

    def test_explicit_overrides_win(self, monkeypatch, tmp_path):
        monkeypatch.setenv("EDITOR_INSTALLER_BIN_DIR", str(tmp_path / "env"))
        resolver = PathResolver(bin_dir=tmp_path / "explicit")
        assert resolver.bin_dir == tmp_path / "explicit"

    def test_bin_dir_on_path(self, monkeypatch, tmp_path):
        resolver = PathResolver(bin_dir=tmp_path / "bin")
        monkeypatch.setenv("PATH", f"/usr/bin:{tmp_path / 'bin'}/")
        assert resolver.bin_dir_on_path()
        monkeypatch.setenv("PATH", "/usr/bin")
        assert not resolver.bin_dir_on_path()


class TestSourcePaths:
    """Resolution of configured source paths."""

    def test_relative_to_base(self, tmp_path):
        resolver = PathResolver(tmp_path)
        assert resolver.resolve("tools/../bin/rg") == tmp_path / "bin" / "rg"

    def test_absolute_unchanged(self, tmp_path):
        assert PathResolver(tmp_path).resolve("/opt/rg") == Path("/opt/rg")

    def test_expand_home_and_variables(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TOOLS", "sub")
        resolver = PathResolver(tmp_path)

        assert resolver.expand_path("~/x") == tmp_path / "home" / "x"
        assert resolver.expand_path("$TOOLS/rg") == tmp_path / "sub" / "rg"


class TestDestinations:
    """Per-package destinations."""

    def test_binary_keeps_file_name(self, tmp_path):
        resolver = PathResolver(bin_dir=tmp_path / "bin")
        tool = Tool(name="ripgrep", bin="/src/rg", identifier="rg")
        assert resolver.bin_destination(tool) == tmp_path / "bin" / "rg"

    def test_config_keyed_by_its_file_name(self, tmp_path):
        resolver = PathResolver(config_dir=tmp_path / "conf")
        editor = Editor(name="vim", bin="/src/vim", config="/src/dotfiles/vim/")
        assert resolver.config_destination(editor) == tmp_path / "conf" / "vim"

    def test_config_name_falls_back_to_package_name(self, tmp_path):
        resolver = PathResolver(config_dir=tmp_path / "conf")
        tool = Tool(name="fd", bin="/src/fd", config="/", identifier="fd")
        assert resolver.config_destination(tool) == tmp_path / "conf" / "fd"

    def test_no_config(self, tmp_path):
        tool = Tool(name="fd", bin="/src/fd", identifier="fd")
        assert PathResolver().config_destination(tool) is None

    def test_data_destination_uses_key(self, tmp_path):
        resolver = PathResolver(data_dir=tmp_path / "data")
        tool = Tool(name="Language Server", bin="/src/lsp", lib="/src/lib", identifier="lsp")
        assert resolver.data_destination(tool) == tmp_path / "data" / "tools" / "lsp"

    def test_editor_data_is_apart_from_tools(self, tmp_path):
        resolver = PathResolver(data_dir=tmp_path / "data")
        editor = Editor(name="vim", bin="/src/vim", config="/src/vimrc", lib="/src/runtime")
        tool = Tool(name="vim", bin="/src/vimtool", lib="/src/lib", identifier="vim")

        assert resolver.data_destination(editor) == tmp_path / "data" / "editor" / "vim"
        assert resolver.data_destination(editor) != resolver.data_destination(tool)
