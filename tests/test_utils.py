from __future__ import annotations

from decimal import Decimal

import pytest

from voltflow.models import Screen
from voltflow.models.fixtures import (
    BILL,
    HISTORY,
    PAYMENT_METHODS,
    PAY_SCREEN_METHODS,
    PROFILE_SECTIONS,
    QUICK_ACTIONS,
    ActivityKind,
    NotificationKind,
)
from voltflow.tui.utils import (
    format_amount,
    format_percent,
    format_signed_amount,
    get_activity_icon,
    get_notification_markup,
)


@pytest.mark.parametrize(
    ("amount", "expected"),
    [
        (Decimal("84.32"), "$84.32"),
        (Decimal("1135"), "$1,135.00"),
        (Decimal("-127.45"), "$127.45"),
        (Decimal("0.005"), "$0.01"),
    ],
)
def test_format_amount(amount: Decimal, expected: str) -> None:
    assert format_amount(amount) == expected


def test_format_amount_whole_dollars() -> None:
    assert format_amount(Decimal("50"), cents=False) == "$50"


def test_format_signed_amount() -> None:
    assert format_signed_amount(Decimal("-127.45")) == "-$127.45"
    assert format_signed_amount(Decimal("127.45")) == "+$127.45"


def test_format_percent() -> None:
    assert format_percent(BILL.usage_ratio) == "68%"


def test_activity_display() -> None:
    payment, bill = HISTORY[0], HISTORY[1]
    assert payment.title == "Payment"
    assert payment.signed_amount == Decimal("-127.45")
    assert bill.title == "Bill Generated"
    assert bill.signed_amount == Decimal("127.45")
    assert get_activity_icon(ActivityKind.PAYMENT) == "↓"


def test_notification_markup() -> None:
    assert get_notification_markup(NotificationKind.SUCCESS) == "[#10B981]✓[/]"


def test_fixture_navigation_targets() -> None:
    targets = {action.label: action.target for action in QUICK_ACTIONS}
    assert targets == {
        "Auto-pay": Screen.AUTO_PAY,
        "Usage Graph": Screen.ANALYTICS,
        "Support": None,
    }
    assert PROFILE_SECTIONS[0].target is Screen.PAYMENT_METHODS


def test_bank_method_label_differs_between_pay_and_methods_screens() -> None:
    assert [m.name for m in PAY_SCREEN_METHODS] == ["Credit Card", "Bank Transfer"]
    assert [m.name for m in PAYMENT_METHODS] == ["Credit Card", "Bank Account"]
    assert [m.details for m in PAY_SCREEN_METHODS] == [
        m.details for m in PAYMENT_METHODS
    ]
    assert PAY_SCREEN_METHODS[0].is_default is True
