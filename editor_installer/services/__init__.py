"""Service layer for editor-installer"""

from .config_service import ConfigService
from .package_service import PackageService
from .install_service import InstallService

__all__ = [
    "ConfigService",
    "PackageService",
    "InstallService",
]
