"""How an application name is joined onto a base directory, per platform.

Appending an application name to a generic directory is not always the
right answer: macOS templates live inside the application's data directory,
Linux has no log directory of its own, and containers only exist on macOS.
Every (platform, kind) pair is listed here explicitly, either as a
``JoinRule`` or as ``None`` when the platform has no such location.
"""

from __future__ import annotations

from dataclasses import dataclass

from .kinds import DirectoryKind as K
from .logging import XdirsError
from .platforms import Platform

APP = "{app}"


@dataclass(frozen=True)
class JoinRule:
    """Take the provider's ``base`` directory and append ``parts``.

    Each part is a ``str.format`` template; ``{app}`` is replaced by the
    application name verbatim.
    """

    base: K
    parts: tuple[str, ...] = ()

    def segments(self, app: str = "") -> list[str]:
        """Render the parts for ``app``."""
        return [part.format(app=app) for part in self.parts]


def _append(base: K) -> JoinRule:
    return JoinRule(base, (APP,))


def _as_is(base: K) -> JoinRule:
    return JoinRule(base)


RULES: dict[Platform, dict[K, JoinRule | None]] = {
    Platform.LINUX: {
        K.CACHE: _append(K.CACHE),
        K.CONFIG: _append(K.CONFIG),
        K.DATA: _append(K.DATA),
        K.DATA_LOCAL: _append(K.DATA_LOCAL),
        K.FAVORITES: None,
        K.LOG: JoinRule(K.DATA_LOCAL, (APP, "logs")),
        K.PREFERENCES: None,
        K.TEMPLATE: None,
        K.APPLICATION: _as_is(K.APPLICATION),
        K.APPLICATION_SHARED: _as_is(K.APPLICATION_SHARED),
        K.USER_APPLICATION: _as_is(K.USER_APPLICATION),
        K.APP_CONTAINER: None,
        K.APP_CONTAINER_EXECUTABLE: None,
        K.USER_APP_CONTAINER: None,
        K.USER_APP_CONTAINER_EXECUTABLE: None,
    },
    Platform.WINDOWS: {
        # One segment only; vendor nesting is left to the caller
        K.CACHE: _append(K.CACHE),
        K.CONFIG: _append(K.CONFIG),
        K.DATA: _append(K.DATA),
        K.DATA_LOCAL: _append(K.DATA_LOCAL),
        K.FAVORITES: _append(K.FAVORITES),
        K.LOG: _append(K.LOG),
        K.PREFERENCES: _append(K.CONFIG),
        K.TEMPLATE: _append(K.TEMPLATE),
        K.APPLICATION: _as_is(K.APPLICATION),
        K.APPLICATION_SHARED: _as_is(K.APPLICATION_SHARED),
        K.USER_APPLICATION: _as_is(K.USER_APPLICATION),
        K.APP_CONTAINER: None,
        K.APP_CONTAINER_EXECUTABLE: None,
        K.USER_APP_CONTAINER: None,
        K.USER_APP_CONTAINER_EXECUTABLE: None,
    },
    Platform.MACOS: {
        K.CACHE: _append(K.CACHE),
        K.CONFIG: _append(K.CONFIG),
        K.DATA: _append(K.DATA),
        K.DATA_LOCAL: _append(K.DATA_LOCAL),
        K.FAVORITES: _append(K.FAVORITES),
        K.LOG: _append(K.LOG),
        K.PREFERENCES: _append(K.PREFERENCES),
        K.TEMPLATE: JoinRule(K.DATA, (APP, "Templates")),
        K.APPLICATION: _as_is(K.APPLICATION),
        K.APPLICATION_SHARED: _as_is(K.APPLICATION_SHARED),
        K.USER_APPLICATION: _as_is(K.USER_APPLICATION),
        # Sandbox container: ~/Library/Containers/<bundle id>/Data
        K.APP_CONTAINER: JoinRule(K.APP_CONTAINER, (APP, "Data")),
        K.APP_CONTAINER_EXECUTABLE: JoinRule(
            K.APP_CONTAINER, (APP, "Data", "Contents", "MacOS")
        ),
        # Bundle installed for the current user: ~/Applications/<name>.app
        K.USER_APP_CONTAINER: JoinRule(K.USER_APP_CONTAINER, (APP + ".app",)),
        K.USER_APP_CONTAINER_EXECUTABLE: JoinRule(
            K.USER_APP_CONTAINER, (APP + ".app", "Contents", "MacOS")
        ),
    },
}


def rule_for(platform: Platform, kind: K) -> JoinRule | None:
    """Return the join rule for ``kind`` on ``platform``.

    None means the platform has no such location. A pair missing from the
    table is a bug and raises ``XdirsError``.
    """
    try:
        return RULES[platform][kind]
    except KeyError:
        raise XdirsError(
            f"No join rule for {kind.value} on {platform.value}"
        ) from None


def missing_rules() -> list[tuple[Platform, K]]:
    """List (platform, kind) pairs that the table does not cover."""
    return [
        (platform, kind)
        for platform in Platform
        for kind in K
        if kind not in RULES.get(platform, {})
    ]
