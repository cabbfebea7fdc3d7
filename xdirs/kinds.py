"""Directory kinds understood by xdirs."""

from __future__ import annotations

from enum import Enum


class DirectoryKind(Enum):
    """Category of directory being requested."""

    CACHE = "cache"
    CONFIG = "config"
    DATA = "data"
    DATA_LOCAL = "data_local"
    FAVORITES = "favorites"
    LOG = "log"
    PREFERENCES = "preferences"
    TEMPLATE = "template"
    APPLICATION = "application"
    APPLICATION_SHARED = "application_shared"
    USER_APPLICATION = "user_application"
    APP_CONTAINER = "app_container"
    APP_CONTAINER_EXECUTABLE = "app_container_executable"
    USER_APP_CONTAINER = "user_app_container"
    USER_APP_CONTAINER_EXECUTABLE = "user_app_container_executable"

    @property
    def has_generic_form(self) -> bool:
        """True if the kind has an app-independent form (e.g. ``cache_dir``)."""
        return self in _GENERIC

    @property
    def takes_app_name(self) -> bool:
        """True if the kind is resolved per application."""
        return self not in _INSTALL_LOCATIONS


_GENERIC = frozenset(
    {
        DirectoryKind.CACHE,
        DirectoryKind.CONFIG,
        DirectoryKind.DATA,
        DirectoryKind.DATA_LOCAL,
    }
)

_INSTALL_LOCATIONS = frozenset(
    {
        DirectoryKind.APPLICATION,
        DirectoryKind.APPLICATION_SHARED,
        DirectoryKind.USER_APPLICATION,
    }
)
