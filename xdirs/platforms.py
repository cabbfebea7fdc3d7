"""Host platform detection."""

from __future__ import annotations

import sys
from enum import Enum
from pathlib import Path, PurePath, PurePosixPath, PureWindowsPath

from .logging import XdirsError

_ALIASES = {
    "linux": "linux",
    "xdg": "linux",
    "unix": "linux",
    "windows": "windows",
    "win": "windows",
    "win32": "windows",
    "macos": "macos",
    "darwin": "macos",
    "osx": "macos",
}


class Platform(Enum):
    """Operating system family that decides path conventions."""

    LINUX = "linux"
    WINDOWS = "windows"
    MACOS = "macos"

    @classmethod
    def parse(cls, value: str) -> Platform:
        """Parse a platform name such as "linux", "darwin" or "win32"."""
        name = _ALIASES.get(value.strip().lower())
        if name is None:
            choices = ", ".join(p.value for p in cls)
            raise XdirsError(f"Unknown platform: {value!r} (expected one of {choices})")
        return cls(name)

    def path_type(self, host: Platform | None = None) -> type[PurePath]:
        """Return the path class used to build paths for this platform.

        Paths for the host platform are concrete ``Path`` objects; paths for
        any other platform are pure paths with that platform's flavour.
        """
        if self is (host or current_platform()):
            return Path
        if self is Platform.WINDOWS:
            return PureWindowsPath
        return PurePosixPath


def current_platform() -> Platform:
    """Detect the platform of the running interpreter."""
    os_name = sys.platform
    if os_name in ("darwin", "ios"):
        return Platform.MACOS
    if os_name in ("win32", "cygwin"):
        return Platform.WINDOWS
    # Linux, the BSDs and everything else follow XDG conventions
    return Platform.LINUX
