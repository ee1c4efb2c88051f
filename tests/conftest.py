"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from editor_installer.core import FileActions, PathResolver
from editor_installer.services import PackageService
from tests.helpers import ScriptedConfirm


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """Directory holding artifact sources."""
    src = tmp_path / "src"
    src.mkdir()
    return src


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """Fake home holding the install destinations."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    return home_dir


@pytest.fixture
def path_resolver(source_dir: Path, home: Path) -> PathResolver:
    """Resolver with every destination under the fake home."""
    return PathResolver(
        source_dir,
        bin_dir=home / "bin",
        config_dir=home / "config",
        data_dir=home / "data",
    )


@pytest.fixture
def confirm() -> ScriptedConfirm:
    """Confirmation that always takes the prompt default."""
    return ScriptedConfirm()


@pytest.fixture
def package_service(path_resolver: PathResolver, confirm: ScriptedConfirm) -> PackageService:
    """Package service writing under the fake home."""
    return PackageService(path_resolver, FileActions(confirm))


@pytest.fixture
def make_file(source_dir: Path):
    """Create a file under the source directory."""
    def _make(relative: str, content: str = "content") -> Path:
        path = source_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path
    return _make
