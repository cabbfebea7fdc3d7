"""Pytest configuration and fixtures."""

from __future__ import annotations

import logging

import pytest

from xdirs import AppDirs, DirectoryKind as K, Platform, StaticProvider

# Fabricated base directories for each platform, shaped like the real ones
BASES: dict[Platform, dict[K, str]] = {
    Platform.LINUX: {
        K.CACHE: "/home/u/.cache",
        K.CONFIG: "/home/u/.config",
        K.DATA: "/home/u/.local/share",
        K.DATA_LOCAL: "/home/u/.local/share",
        K.APPLICATION: "/usr/bin",
        K.APPLICATION_SHARED: "/usr/lib",
        K.USER_APPLICATION: "/home/u/.local/bin",
    },
    Platform.WINDOWS: {
        K.CACHE: "C:\\Users\\u\\AppData\\Local",
        K.CONFIG: "C:\\Users\\u\\AppData\\Roaming",
        K.DATA: "C:\\Users\\u\\AppData\\Roaming",
        K.DATA_LOCAL: "C:\\Users\\u\\AppData\\Local",
        K.FAVORITES: "C:\\Users\\u\\Favorites",
        K.LOG: "C:\\Users\\u\\AppData\\Local\\Logs",
        K.PREFERENCES: "C:\\Users\\u\\AppData\\Roaming",
        K.TEMPLATE: "C:\\Users\\u\\AppData\\Roaming\\Microsoft\\Windows\\Templates",
        K.APPLICATION: "C:\\Program Files",
        K.APPLICATION_SHARED: "C:\\Program Files\\Common Files",
        K.USER_APPLICATION: "C:\\Users\\u\\AppData\\Local\\Programs",
    },
    Platform.MACOS: {
        K.CACHE: "/Users/u/Library/Caches",
        K.CONFIG: "/Users/u/Library/Application Support",
        K.DATA: "/Users/u/Library/Application Support",
        K.DATA_LOCAL: "/Users/u/Library/Application Support",
        K.FAVORITES: "/Users/u/Library/Favorites",
        K.LOG: "/Users/u/Library/Logs",
        K.PREFERENCES: "/Users/u/Library/Preferences",
        K.APPLICATION: "/Applications",
        K.APPLICATION_SHARED: "/Library/Frameworks",
        K.USER_APPLICATION: "/Users/u/Applications",
        K.APP_CONTAINER: "/Users/u/Library/Containers",
        K.USER_APP_CONTAINER: "/Users/u/Applications",
    },
}


def fake_dirs(platform: Platform) -> AppDirs:
    """AppDirs for ``platform`` backed by the fabricated BASES."""
    return AppDirs(StaticProvider(BASES[platform]), platform)


@pytest.fixture
def linux_dirs() -> AppDirs:
    return fake_dirs(Platform.LINUX)


@pytest.fixture
def windows_dirs() -> AppDirs:
    return fake_dirs(Platform.WINDOWS)


@pytest.fixture
def macos_dirs() -> AppDirs:
    return fake_dirs(Platform.MACOS)


@pytest.fixture(params=list(Platform), ids=lambda p: p.value)
def any_dirs(request) -> AppDirs:
    """Fabricated AppDirs for each platform in turn."""
    return fake_dirs(request.param)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Point HOME at a temp dir and clear the directory env vars.

    Returns the fake home directory.
    """
    for name in (
        "XDG_CACHE_HOME",
        "XDG_CONFIG_HOME",
        "XDG_DATA_HOME",
        "APPDATA",
        "LOCALAPPDATA",
        "USERPROFILE",
        "ProgramFiles",
        "CommonProgramFiles",
    ):
        monkeypatch.delenv(name, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by configure_logging during a test."""
    yield
    root = logging.getLogger("xdirs")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.NOTSET)
    root.propagate = True
