"""Standard application directories, with per-application variants.

The locations follow the XDG base directory specification on Linux, Known
Folders on Windows and the Standard Directories on macOS.
"""

from .kinds import DirectoryKind
from .logging import XdirsError
from .paths import (
    AppDirs,
    app_container_dir_for,
    app_container_executable_dir_for,
    application_dir,
    application_shared_dir,
    cache_dir,
    cache_dir_for,
    config_dir,
    config_dir_for,
    data_dir,
    data_dir_for,
    data_local_dir,
    data_local_dir_for,
    favorites_dir_for,
    log_dir_for,
    preference_dir_for,
    template_dir_for,
    user_app_container_dir_for,
    user_app_container_executable_dir_for,
    user_application_dir,
)
from .platforms import Platform, current_platform
from .providers import BaseDirProvider, StaticProvider, SystemProvider

__all__ = [
    "AppDirs",
    "BaseDirProvider",
    "DirectoryKind",
    "Platform",
    "StaticProvider",
    "SystemProvider",
    "XdirsError",
    "app_container_dir_for",
    "app_container_executable_dir_for",
    "application_dir",
    "application_shared_dir",
    "cache_dir",
    "cache_dir_for",
    "config_dir",
    "config_dir_for",
    "current_platform",
    "data_dir",
    "data_dir_for",
    "data_local_dir",
    "data_local_dir_for",
    "favorites_dir_for",
    "log_dir_for",
    "preference_dir_for",
    "template_dir_for",
    "user_app_container_dir_for",
    "user_app_container_executable_dir_for",
    "user_application_dir",
]
