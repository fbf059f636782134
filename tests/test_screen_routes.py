from __future__ import annotations

import pytest

from voltflow.models import BACK_TARGETS, TAB_SCREENS, Screen


def test_routes_are_unique_and_round_trip() -> None:
    routes = [screen.route for screen in Screen]
    assert len(routes) == len(set(routes))
    for screen in Screen:
        assert Screen.from_route(screen.route) is screen


def test_from_route_normalizes_case_and_whitespace() -> None:
    assert Screen.from_route("  Payment_Methods ") is Screen.PAYMENT_METHODS
    assert Screen.from_route("autopay") is Screen.AUTO_PAY


def test_from_route_rejects_unknown_route() -> None:
    with pytest.raises(ValueError, match="wallet"):
        Screen.from_route("wallet")


def test_tabs_are_the_four_top_level_screens_in_order() -> None:
    assert [tab.screen for tab in TAB_SCREENS] == [
        Screen.HOME,
        Screen.PAY,
        Screen.HISTORY,
        Screen.PROFILE,
    ]
    assert [tab.key for tab in TAB_SCREENS] == ["1", "2", "3", "4"]
    assert all(tab.screen.is_top_level for tab in TAB_SCREENS)


def test_back_targets() -> None:
    assert Screen.PAYMENT_METHODS.back_target is Screen.PROFILE
    assert Screen.EDIT_PROFILE.back_target is Screen.PROFILE
    assert Screen.NOTIFICATIONS.back_target is Screen.HOME
    assert Screen.PAYMENT_SUCCESS.back_target is Screen.HOME
    assert Screen.HOME.back_target is None
    assert set(BACK_TARGETS) == {s for s in Screen if not s.is_top_level}
