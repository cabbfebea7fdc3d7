"""Application-specific directory paths.

Generic forms such as ``cache_dir`` come with ``_for`` variants that take an
application name. It is not always safe to append the name to the generic
directory, so the ``_for`` functions apply the platform's join rule instead:

| Generic Form     | Application-Specific Form |
| ---------------- | ------------------------- |
| ``cache_dir``      | ``cache_dir_for``         |
| ``config_dir``     | ``config_dir_for``        |
| ``data_dir``       | ``data_dir_for``          |
| ``data_local_dir`` | ``data_local_dir_for``    |
|                  | ``favorites_dir_for``     |
|                  | ``log_dir_for``           |
|                  | ``preference_dir_for``    |
|                  | ``template_dir_for``      |

Installed applications live in ``application_dir``,
``application_shared_dir`` and ``user_application_dir``. The
``app_container*`` functions locate macOS containers and bundles and return
None everywhere else.

Every function returns None when the platform has no such location. Nothing
here creates, checks or caches directories.

Example::

    from xdirs import config_dir_for, log_dir_for

    config = config_dir_for("acme")
    logs = log_dir_for("acme")
"""

from __future__ import annotations

from pathlib import PurePath

from .kinds import DirectoryKind
from .logging import XdirsError, get_logger
from .platforms import Platform, current_platform
from .providers import BaseDirProvider, SystemProvider
from .rules import rule_for

logger = get_logger(__name__)


class AppDirs:
    """Directory lookups for one platform and one base directory provider.

    Both default to the running system. Inject a ``Platform`` and a
    ``StaticProvider`` to compute another platform's layout, e.g. in tests.
    """

    def __init__(
        self,
        provider: BaseDirProvider | None = None,
        platform: Platform | None = None,
    ):
        self.platform = platform or current_platform()
        self.provider = provider if provider is not None else SystemProvider(self.platform)
        self._path = self.platform.path_type()

    def __repr__(self) -> str:
        return f"AppDirs(provider={self.provider!r}, platform={self.platform.value!r})"

    # -------------------------------------------------------------------------
    # Core lookups
    # -------------------------------------------------------------------------

    def generic(self, kind: DirectoryKind) -> PurePath | None:
        """Return the app-independent directory for a kind that has one.

        Raises:
            XdirsError: If ``kind`` has no generic form
        """
        if not kind.has_generic_form:
            raise XdirsError(f"{kind.value} has no generic form, use {kind.value}_dir_for")
        return self._base(kind)

    def resolve(self, kind: DirectoryKind, app: str | None = None) -> PurePath | None:
        """Return the directory of ``kind`` for ``app``.

        ``app`` is required for every kind except the three install
        locations, where it is ignored. The name is used verbatim; an empty
        name resolves to None since it would collapse onto the base path.

        Raises:
            XdirsError: If ``kind`` needs an application name and none was given
        """
        if kind.takes_app_name:
            if app is None:
                raise XdirsError(f"{kind.value} requires an application name")
            if not app:
                logger.debug("Empty application name", kind=kind.value)
                return None
        rule = rule_for(self.platform, kind)
        if rule is None:
            logger.debug(
                "Not available on platform", kind=kind.value, platform=self.platform.value
            )
            return None
        base = self._base(rule.base)
        if base is None:
            return None
        return base.joinpath(*rule.segments(app or ""))

    def describe(self, app: str) -> dict[DirectoryKind, PurePath | None]:
        """Resolve every kind for ``app``."""
        return {kind: self.resolve(kind, app) for kind in DirectoryKind}

    def _base(self, kind: DirectoryKind) -> PurePath | None:
        raw = self.provider.base_path(kind)
        if raw is None:
            return None
        path = self._path(raw)
        if not path.is_absolute():
            logger.debug("Ignoring relative base directory", kind=kind.value, path=str(path))
            return None
        return path

    # -------------------------------------------------------------------------
    # Generic forms
    # -------------------------------------------------------------------------

    def cache_dir(self) -> PurePath | None:
        return self.generic(DirectoryKind.CACHE)

    def config_dir(self) -> PurePath | None:
        return self.generic(DirectoryKind.CONFIG)

    def data_dir(self) -> PurePath | None:
        return self.generic(DirectoryKind.DATA)

    def data_local_dir(self) -> PurePath | None:
        return self.generic(DirectoryKind.DATA_LOCAL)

    # -------------------------------------------------------------------------
    # Application-specific forms
    # -------------------------------------------------------------------------

    def cache_dir_for(self, app: str) -> PurePath | None:
        return self.resolve(DirectoryKind.CACHE, app)

    def config_dir_for(self, app: str) -> PurePath | None:
        return self.resolve(DirectoryKind.CONFIG, app)

    def data_dir_for(self, app: str) -> PurePath | None:
        return self.resolve(DirectoryKind.DATA, app)

    def data_local_dir_for(self, app: str) -> PurePath | None:
        return self.resolve(DirectoryKind.DATA_LOCAL, app)

    def favorites_dir_for(self, app: str) -> PurePath | None:
        return self.resolve(DirectoryKind.FAVORITES, app)

    def log_dir_for(self, app: str) -> PurePath | None:
        return self.resolve(DirectoryKind.LOG, app)

    def preference_dir_for(self, app: str) -> PurePath | None:
        return self.resolve(DirectoryKind.PREFERENCES, app)

    def template_dir_for(self, app: str) -> PurePath | None:
        return self.resolve(DirectoryKind.TEMPLATE, app)

    # -------------------------------------------------------------------------
    # Installed applications
    # -------------------------------------------------------------------------

    def application_dir(self) -> PurePath | None:
        return self.resolve(DirectoryKind.APPLICATION)

    def application_shared_dir(self) -> PurePath | None:
        return self.resolve(DirectoryKind.APPLICATION_SHARED)

    def user_application_dir(self) -> PurePath | None:
        return self.resolve(DirectoryKind.USER_APPLICATION)

    # -------------------------------------------------------------------------
    # Containers (macOS only)
    # -------------------------------------------------------------------------

    def app_container_dir_for(self, app: str) -> PurePath | None:
        return self.resolve(DirectoryKind.APP_CONTAINER, app)

    def app_container_executable_dir_for(self, app: str) -> PurePath | None:
        return self.resolve(DirectoryKind.APP_CONTAINER_EXECUTABLE, app)

    def user_app_container_dir_for(self, app: str) -> PurePath | None:
        return self.resolve(DirectoryKind.USER_APP_CONTAINER, app)

    def user_app_container_executable_dir_for(self, app: str) -> PurePath | None:
        return self.resolve(DirectoryKind.USER_APP_CONTAINER_EXECUTABLE, app)


# =============================================================================
# Module-level functions for the running system
# =============================================================================
#
# Each call builds a fresh AppDirs so environment changes (XDG_*, APPDATA...)
# are picked up immediately.


def cache_dir() -> PurePath | None:
    """User's cache directory, e.g. ``~/.cache`` or ``~/Library/Caches``."""
    return AppDirs().cache_dir()


def config_dir() -> PurePath | None:
    """User's configuration directory."""
    return AppDirs().config_dir()


def data_dir() -> PurePath | None:
    """User's data directory (roaming profile on Windows)."""
    return AppDirs().data_dir()


def data_local_dir() -> PurePath | None:
    """User's machine-local data directory."""
    return AppDirs().data_local_dir()


def cache_dir_for(app: str) -> PurePath | None:
    """Cache directory for ``app``, one level below ``cache_dir()``."""
    return AppDirs().cache_dir_for(app)


def config_dir_for(app: str) -> PurePath | None:
    """Configuration directory for ``app``, one level below ``config_dir()``."""
    return AppDirs().config_dir_for(app)


def data_dir_for(app: str) -> PurePath | None:
    """Data directory for ``app``, one level below ``data_dir()``."""
    return AppDirs().data_dir_for(app)


def data_local_dir_for(app: str) -> PurePath | None:
    """Local data directory for ``app``, one level below ``data_local_dir()``."""
    return AppDirs().data_local_dir_for(app)


def favorites_dir_for(app: str) -> PurePath | None:
    """Favorites directory for ``app``; None on Linux."""
    return AppDirs().favorites_dir_for(app)


def log_dir_for(app: str) -> PurePath | None:
    """Log directory for ``app``.

    ``~/Library/Logs/<app>`` on macOS, ``%LOCALAPPDATA%\\Logs\\<app>`` on
    Windows and ``<data_local_dir>/<app>/logs`` on Linux.
    """
    return AppDirs().log_dir_for(app)


def preference_dir_for(app: str) -> PurePath | None:
    """Preferences directory for ``app``; None on Linux."""
    return AppDirs().preference_dir_for(app)


def template_dir_for(app: str) -> PurePath | None:
    """Templates directory for ``app``; None on Linux."""
    return AppDirs().template_dir_for(app)


def application_dir() -> PurePath | None:
    """Where applications are installed for all users."""
    return AppDirs().application_dir()


def application_shared_dir() -> PurePath | None:
    """Where components shared between applications are installed."""
    return AppDirs().application_shared_dir()


def user_application_dir() -> PurePath | None:
    """Where applications are installed for the current user only."""
    return AppDirs().user_application_dir()


def app_container_dir_for(app: str) -> PurePath | None:
    """Sandbox container data directory for ``app`` (macOS only)."""
    return AppDirs().app_container_dir_for(app)


def app_container_executable_dir_for(app: str) -> PurePath | None:
    """Executable directory inside ``app``'s container (macOS only)."""
    return AppDirs().app_container_executable_dir_for(app)


def user_app_container_dir_for(app: str) -> PurePath | None:
    """``app``'s bundle in the user's Applications folder (macOS only)."""
    return AppDirs().user_app_container_dir_for(app)


def user_app_container_executable_dir_for(app: str) -> PurePath | None:
    """Executable directory inside ``app``'s user bundle (macOS only)."""
    return AppDirs().user_app_container_executable_dir_for(app)
