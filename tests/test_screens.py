from __future__ import annotations

from dataclasses import dataclass, field
from types import SimpleNamespace
from typing import Any

import pytest
from conftest import ManualScheduler
from textual.css.query import NoMatches
from textual.message import Message

from voltflow.models import Navigator, PaymentSession, PaymentStatus, Screen
from voltflow.orchestration import PaymentFlow
from voltflow.tui.messages import NavigateTo
from voltflow.tui.screens import (
    STATIC_SCREENS,
    HomeScreen,
    PayScreen,
    PaymentSuccessScreen,
    ProfileScreen,
)
from voltflow.tui.screens.home import quick_action_id
from voltflow.tui.widgets import NavBar, PaymentStatusIndicator, ScreenHeader


def _component_lookup(components: dict[str, object]) -> Any:
    def _query_one(selector: str, _type: object | None = None) -> Any:
        return components[selector]

    return _query_one


def _missing(selector: str, _type: object | None = None) -> Any:
    raise NoMatches(f"No nodes match {selector!r}")


def _press(button_id: str, label: str = "") -> SimpleNamespace:
    event = SimpleNamespace(
        button=SimpleNamespace(id=button_id, label=label, has_class=lambda _: False),
        stopped=False,
    )

    def _stop() -> None:
        event.stopped = True

    event.stop = _stop
    return event


def _dispatch_press(node: object, event: SimpleNamespace) -> None:
    """Call every on_button_pressed in the MRO, the way Textual dispatches."""
    for cls in type(node).__mro__:
        handler = cls.__dict__.get("on_button_pressed")
        if handler is not None:
            handler(node, event)


def _capture_messages(monkeypatch: pytest.MonkeyPatch, node: object) -> list[Message]:
    posted: list[Message] = []
    monkeypatch.setattr(node, "post_message", lambda m: posted.append(m) or True)
    return posted


@dataclass
class _FakeWidget:
    display: bool = True


@dataclass
class _FakeStatus:
    calls: list[PaymentStatus] = field(default_factory=list)

    def set_status(self, status: PaymentStatus) -> None:
        self.calls.append(status)


def _pay_screen(scheduler: ManualScheduler) -> PayScreen:
    session = PaymentSession(scheduler=scheduler)
    return PayScreen(flow=PaymentFlow(Navigator(Screen.PAY), session))


def test_every_screen_has_a_view() -> None:
    assert set(STATIC_SCREENS) | {Screen.PAY} == set(Screen)
    for screen, view in STATIC_SCREENS.items():
        assert view.screen_id is screen
    assert PayScreen.screen_id is Screen.PAY


def test_pay_screen_swaps_button_for_spinner_while_processing(
    monkeypatch: pytest.MonkeyPatch, scheduler: ManualScheduler
) -> None:
    screen = _pay_screen(scheduler)
    spinner = _FakeWidget(display=False)
    button = _FakeWidget()
    status = _FakeStatus()
    monkeypatch.setattr(
        screen,
        "query_one",
        _component_lookup(
            {"#pay-spinner": spinner, "#btn-pay": button, "#pay-status": status}
        ),
    )

    screen.action_pay()
    screen._render_session(screen.session)
    assert spinner.display is True
    assert button.display is False

    scheduler.advance(1500)
    screen._render_session(screen.session)
    assert spinner.display is False
    assert button.display is True
    assert status.calls == [PaymentStatus.PROCESSING, PaymentStatus.SUCCEEDED]


def test_pay_screen_render_ignores_missing_widgets(
    monkeypatch: pytest.MonkeyPatch, scheduler: ManualScheduler
) -> None:
    screen = _pay_screen(scheduler)
    monkeypatch.setattr(screen, "query_one", _missing)
    screen._render_session(screen.session)


def _mount_pay_screen(
    monkeypatch: pytest.MonkeyPatch, screen: PayScreen
) -> list[Any]:
    """Run on_mount with fake widgets; returns the deferred callbacks."""
    deferred: list[Any] = []
    monkeypatch.setattr(
        screen,
        "query_one",
        _component_lookup(
            {
                "#pay-spinner": _FakeWidget(display=False),
                "#btn-pay": _FakeWidget(),
                "#pay-status": _FakeStatus(),
            }
        ),
    )
    monkeypatch.setattr(
        screen, "call_after_refresh", lambda callback: deferred.append(callback)
    )
    screen.on_mount()
    return deferred


def test_pay_screen_consumes_latched_success_after_refresh(
    monkeypatch: pytest.MonkeyPatch, scheduler: ManualScheduler
) -> None:
    screen = _pay_screen(scheduler)
    screen.session.start_payment()
    scheduler.advance(1500)

    deferred = _mount_pay_screen(monkeypatch, screen)
    assert screen.flow.attached is True
    assert screen.flow.navigator.current_screen is Screen.PAY

    for callback in deferred:
        callback()

    assert screen.flow.navigator.current_screen is Screen.PAYMENT_SUCCESS
    assert screen.session.succeeded is False


def test_pay_screen_unmounted_before_refresh_stays_detached(
    monkeypatch: pytest.MonkeyPatch, scheduler: ManualScheduler
) -> None:
    screen = _pay_screen(scheduler)
    navigator = screen.flow.navigator
    deferred = _mount_pay_screen(monkeypatch, screen)

    # Leave Pay before the first refresh runs
    screen.on_unmount()
    navigator.navigate(Screen.HOME)
    for callback in deferred:
        callback()

    assert screen.flow.attached is False
    screen.session.start_payment()
    scheduler.advance(1500)
    assert navigator.current_screen is Screen.HOME
    assert screen.session.succeeded is True


def test_pay_button_press_submits_once(
    monkeypatch: pytest.MonkeyPatch, scheduler: ManualScheduler
) -> None:
    screen = _pay_screen(scheduler)
    event = _press("btn-pay")

    screen.on_button_pressed(event)  # type: ignore[arg-type]
    screen.on_button_pressed(event)  # type: ignore[arg-type]

    assert event.stopped is True
    assert screen.session.is_processing is True
    assert scheduler.pending == 1


def test_home_buttons_post_navigation(monkeypatch: pytest.MonkeyPatch) -> None:
    screen = HomeScreen()
    posted = _capture_messages(monkeypatch, screen)

    for button_id in ("btn-pay-now", "btn-usage", quick_action_id("Usage Graph")):
        _dispatch_press(screen, _press(button_id))

    assert [m.target for m in posted if isinstance(m, NavigateTo)] == [
        Screen.PAY,
        Screen.USAGE_DETAIL,
        Screen.ANALYTICS,
    ]


def test_home_support_action_has_no_target() -> None:
    assert quick_action_id("Support") == "action-support"
    assert "action-support" not in HomeScreen.button_targets


def test_profile_routes_payment_methods_and_notifies_for_others(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    screen = ProfileScreen()
    posted = _capture_messages(monkeypatch, screen)
    notes: list[str] = []
    monkeypatch.setattr(screen, "notify", lambda message, **_: notes.append(message))

    _dispatch_press(screen, _press("item-payment-methods"))
    _dispatch_press(screen, _press("item-biometric-login", "Biometric Login ›"))

    assert [m.target for m in posted] == [Screen.PAYMENT_METHODS]
    assert notes == ["Biometric Login › is not available in this preview"]


def test_success_done_returns_home(monkeypatch: pytest.MonkeyPatch) -> None:
    screen = PaymentSuccessScreen()
    posted = _capture_messages(monkeypatch, screen)
    _dispatch_press(screen, _press("btn-done"))
    assert [m.target for m in posted] == [Screen.HOME]
    assert "$84.32" in (PaymentSuccessScreen.subheading or "")


def test_nav_bar_tab_posts_navigation(monkeypatch: pytest.MonkeyPatch) -> None:
    nav_bar = NavBar(Screen.HOME)
    posted = _capture_messages(monkeypatch, nav_bar)
    event = _press("tab-history")

    nav_bar.on_button_pressed(event)  # type: ignore[arg-type]

    assert event.stopped is True
    assert [m.target for m in posted] == [Screen.HISTORY]


def test_screen_header_back_uses_back_target(monkeypatch: pytest.MonkeyPatch) -> None:
    header = ScreenHeader("Payment Methods", back_target=Screen.PROFILE)
    posted = _capture_messages(monkeypatch, header)
    header.on_button_pressed(_press("btn-back"))  # type: ignore[arg-type]
    assert [m.target for m in posted] == [Screen.PROFILE]


def test_status_indicator_labels() -> None:
    indicator = PaymentStatusIndicator()
    assert indicator._label(True) == "● Ready"
    assert indicator._label(False) == "  Ready"
