"""Base directory providers.

A provider answers one question: where does the platform keep directories
of a given kind, independent of any application? ``SystemProvider`` asks
``platformdirs`` and the platform's standard environment variables;
``StaticProvider`` serves fixed paths and is what tests and embedders use
to drive ``AppDirs`` without touching real OS state.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import PurePath
from typing import Protocol

from platformdirs.api import PlatformDirsABC
from platformdirs.unix import Unix
from platformdirs.windows import Windows

from .kinds import DirectoryKind
from .logging import get_logger
from .platforms import Platform, current_platform

logger = get_logger(__name__)

_PLATFORMDIRS: dict[Platform, type[PlatformDirsABC]] = {
    Platform.LINUX: Unix,
    Platform.WINDOWS: Windows,
}


class BaseDirProvider(Protocol):
    """Source of app-independent base directories."""

    def base_path(self, kind: DirectoryKind) -> PurePath | str | None:
        """Return the base directory for ``kind``, or None if there is none."""
        ...


class StaticProvider:
    """Provider backed by a fixed mapping of kinds to paths."""

    def __init__(self, paths: Mapping[DirectoryKind, PurePath | str]):
        self._paths = dict(paths)

    def base_path(self, kind: DirectoryKind) -> PurePath | str | None:
        return self._paths.get(kind)

    def __repr__(self) -> str:
        return f"StaticProvider({self._paths!r})"


class SystemProvider:
    """Provider that reads the real directories of a platform.

    On Linux and Windows the four generic kinds come from ``platformdirs``.
    macOS always uses the Library folders, whatever ``XDG_*`` says. The
    remaining kinds are fixed system locations, home-relative locations, or
    Windows Known Folders.

    Windows Favorites, Templates and the Program Files folders are located
    through their environment variables (``%USERPROFILE%\\Favorites``,
    ``%APPDATA%\\Microsoft\\Windows\\Templates``, ``%ProgramFiles%``...),
    which are the Known Folder defaults. A folder the user has redirected
    elsewhere is not followed.

    A home directory that cannot be determined makes the home-based kinds
    absent rather than raising.
    """

    def __init__(self, platform: Platform | None = None):
        self.platform = platform or current_platform()
        self._path = self.platform.path_type()
        self._resolvers: dict[DirectoryKind, Callable[[], PurePath | None]] = {
            Platform.LINUX: self._linux,
            Platform.WINDOWS: self._windows,
            Platform.MACOS: self._macos,
        }[self.platform]()

    def base_path(self, kind: DirectoryKind) -> PurePath | None:
        resolver = self._resolvers.get(kind)
        path = resolver() if resolver is not None else None
        if path is None:
            logger.debug(
                "No base directory", kind=kind.value, platform=self.platform.value
            )
        return path

    def __repr__(self) -> str:
        return f"SystemProvider(platform={self.platform.value!r})"

    # -------------------------------------------------------------------------
    # Per-platform tables
    # -------------------------------------------------------------------------

    def _linux(self) -> dict[DirectoryKind, Callable[[], PurePath | None]]:
        return {
            DirectoryKind.CACHE: lambda: self._xdg("user_cache_dir", "XDG_CACHE_HOME", ".cache"),
            DirectoryKind.CONFIG: lambda: self._xdg(
                "user_config_dir", "XDG_CONFIG_HOME", ".config"
            ),
            DirectoryKind.DATA: lambda: self._xdg(
                "user_data_dir", "XDG_DATA_HOME", ".local", "share"
            ),
            # XDG has no machine-local data directory distinct from data
            DirectoryKind.DATA_LOCAL: lambda: self._xdg(
                "user_data_dir", "XDG_DATA_HOME", ".local", "share"
            ),
            DirectoryKind.APPLICATION: lambda: self._path("/usr/bin"),
            DirectoryKind.APPLICATION_SHARED: lambda: self._path("/usr/lib"),
            DirectoryKind.USER_APPLICATION: lambda: self._home(".local", "bin"),
        }

    def _windows(self) -> dict[DirectoryKind, Callable[[], PurePath | None]]:
        def config() -> PurePath | None:
            return self._standard("user_config_dir", roaming=True)

        def data_local() -> PurePath | None:
            return self._standard("user_data_dir")

        def logs() -> PurePath | None:
            base = data_local()
            return base / "Logs" if base is not None else None

        return {
            DirectoryKind.CACHE: lambda: self._standard("user_cache_dir"),
            DirectoryKind.CONFIG: config,
            DirectoryKind.DATA: lambda: self._standard("user_data_dir", roaming=True),
            DirectoryKind.DATA_LOCAL: data_local,
            DirectoryKind.FAVORITES: lambda: self._env("USERPROFILE", "Favorites"),
            DirectoryKind.LOG: logs,
            DirectoryKind.PREFERENCES: config,
            DirectoryKind.TEMPLATE: lambda: self._env(
                "APPDATA", "Microsoft", "Windows", "Templates"
            ),
            DirectoryKind.APPLICATION: lambda: self._env("ProgramFiles"),
            DirectoryKind.APPLICATION_SHARED: lambda: self._env("CommonProgramFiles"),
            DirectoryKind.USER_APPLICATION: lambda: self._env(
                "LOCALAPPDATA", "Programs"
            ),
        }

    def _macos(self) -> dict[DirectoryKind, Callable[[], PurePath | None]]:
        return {
            # Standard Directories only; XDG_* does not apply on macOS
            DirectoryKind.CACHE: lambda: self._home("Library", "Caches"),
            DirectoryKind.CONFIG: lambda: self._home("Library", "Application Support"),
            DirectoryKind.DATA: lambda: self._home("Library", "Application Support"),
            DirectoryKind.DATA_LOCAL: lambda: self._home(
                "Library", "Application Support"
            ),
            DirectoryKind.FAVORITES: lambda: self._home("Library", "Favorites"),
            DirectoryKind.LOG: lambda: self._home("Library", "Logs"),
            DirectoryKind.PREFERENCES: lambda: self._home("Library", "Preferences"),
            DirectoryKind.APPLICATION: lambda: self._path("/Applications"),
            DirectoryKind.APPLICATION_SHARED: lambda: self._path("/Library/Frameworks"),
            DirectoryKind.USER_APPLICATION: lambda: self._home("Applications"),
            DirectoryKind.APP_CONTAINER: lambda: self._home("Library", "Containers"),
            DirectoryKind.USER_APP_CONTAINER: lambda: self._home("Applications"),
        }

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def _standard(self, attr: str, roaming: bool = False) -> PurePath | None:
        """Read a platformdirs property with no application name applied."""
        dirs = _PLATFORMDIRS[self.platform](roaming=roaming)
        try:
            value = getattr(dirs, attr)
        except (ValueError, RuntimeError, KeyError) as e:
            # ValueError: Windows folder with neither Known Folder API nor env var
            # RuntimeError, KeyError: home directory unknown
            logger.debug("platformdirs could not resolve folder", attr=attr, error=str(e))
            return None
        return self._path(value) if value else None

    def _xdg(self, attr: str, name: str, *default: str) -> PurePath | None:
        """Read an XDG base directory, treating a relative value as unset."""
        value = os.environ.get(name, "").strip()
        if value and not self._path(value).is_absolute():
            logger.debug("Ignoring relative XDG value", var=name, value=value)
            return self._home(*default)
        return self._standard(attr)

    def _home(self, *parts: str) -> PurePath | None:
        home = os.path.expanduser("~")
        if home == "~":
            # No HOME and no passwd entry
            logger.debug("Could not determine home directory", parts=parts)
            return None
        return self._path(home, *parts)

    def _env(self, name: str, *parts: str) -> PurePath | None:
        value = os.environ.get(name)
        if not value:
            return None
        return self._path(value, *parts)
