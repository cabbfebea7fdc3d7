"""Tests for the join rule table."""

from __future__ import annotations

import pytest

from xdirs import DirectoryKind, Platform, SystemProvider, XdirsError
from xdirs.rules import RULES, JoinRule, missing_rules, rule_for

CONTAINER_KINDS = {
    DirectoryKind.APP_CONTAINER,
    DirectoryKind.APP_CONTAINER_EXECUTABLE,
    DirectoryKind.USER_APP_CONTAINER,
    DirectoryKind.USER_APP_CONTAINER_EXECUTABLE,
}


class TestRuleTable:
    """The table must cover every platform and kind."""

    def test_no_missing_rules(self):
        """Every (platform, kind) pair is listed."""
        assert missing_rules() == []

    @pytest.mark.parametrize("platform", list(Platform), ids=lambda p: p.value)
    def test_generic_kinds_append_name(self, platform):
        """Generic kinds append exactly the app name to their own base."""
        for kind in DirectoryKind:
            if kind.has_generic_form:
                assert rule_for(platform, kind) == JoinRule(kind, ("{app}",))

    @pytest.mark.parametrize("platform", [Platform.LINUX, Platform.WINDOWS])
    def test_containers_unsupported_off_macos(self, platform):
        for kind in CONTAINER_KINDS:
            assert rule_for(platform, kind) is None

    def test_linux_unsupported_kinds(self):
        """Linux has no favorites, preferences or templates."""
        for kind in (
            DirectoryKind.FAVORITES,
            DirectoryKind.PREFERENCES,
            DirectoryKind.TEMPLATE,
        ):
            assert rule_for(Platform.LINUX, kind) is None

    @pytest.mark.parametrize("platform", list(Platform), ids=lambda p: p.value)
    def test_install_locations_take_no_name(self, platform):
        for kind in DirectoryKind:
            if not kind.takes_app_name:
                rule = rule_for(platform, kind)
                assert rule is not None
                assert rule.parts == ()

    @pytest.mark.parametrize("platform", list(Platform), ids=lambda p: p.value)
    def test_bases_known_to_system_provider(self, platform):
        """Every base kind a rule uses is one the system provider can answer."""
        provider = SystemProvider(platform)
        for rule in RULES[platform].values():
            if rule is not None:
                assert rule.base in provider._resolvers

    def test_missing_entry_raises(self, monkeypatch):
        """A gap in the table is reported as an error, not as None."""
        table = {Platform.LINUX: {}}
        monkeypatch.setattr("xdirs.rules.RULES", table)
        with pytest.raises(XdirsError, match="No join rule"):
            rule_for(Platform.LINUX, DirectoryKind.CACHE)


class TestJoinRule:
    """Tests for rendering rule parts."""

    def test_segments(self):
        rule = JoinRule(DirectoryKind.USER_APP_CONTAINER, ("{app}.app", "Contents", "MacOS"))
        assert rule.segments("Chrome") == ["Chrome.app", "Contents", "MacOS"]

    def test_no_parts(self):
        assert JoinRule(DirectoryKind.APPLICATION).segments() == []
