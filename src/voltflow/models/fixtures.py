"""Static display fixtures.

Everything here is hard-coded sample data for the demo screens. None of
it is ever mutated.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from voltflow.models.screen import Screen


class ActivityKind(Enum):
    PAYMENT = "payment"
    BILL = "bill"


class NotificationKind(Enum):
    SUCCESS = "success"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class Account:
    first_name: str
    last_name: str
    email: str
    verified: bool

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def initial(self) -> str:
        return self.first_name[:1].upper()


@dataclass(frozen=True)
class BillSummary:
    biller: str
    masked_account: str
    meter_id: str
    balance: Decimal
    due_date: str
    due_short: str
    usage_ratio: float


@dataclass(frozen=True)
class Activity:
    """A signed ledger line shown in activity lists."""

    kind: ActivityKind
    date: str
    amount: Decimal

    @property
    def title(self) -> str:
        return "Payment" if self.kind is ActivityKind.PAYMENT else "Bill Generated"

    @property
    def signed_amount(self) -> Decimal:
        # Payments leave the account, bills add to the balance
        if self.kind is ActivityKind.PAYMENT:
            return -self.amount
        return self.amount


@dataclass(frozen=True)
class Notification:
    title: str
    body: str
    time: str
    kind: NotificationKind


@dataclass(frozen=True)
class PaymentMethod:
    name: str
    details: str
    is_default: bool = False


@dataclass(frozen=True)
class QuickAction:
    label: str
    target: Screen | None


@dataclass(frozen=True)
class SpendingBar:
    month: str
    amount: int
    highlighted: bool = False


@dataclass(frozen=True)
class AnalyticsSnapshot:
    periods: tuple[str, ...]
    selected_period: str
    total_spent: Decimal
    total_spent_trend: str
    units_used: int
    units_used_trend: str
    spending: tuple[SpendingBar, ...]


@dataclass(frozen=True)
class UsageDetail:
    this_month_kwh: int
    trend: str
    summary: str


@dataclass(frozen=True)
class ProfileSection:
    title: str
    items: tuple[str, ...]
    target: Screen | None = None


ACCOUNT = Account(
    first_name="Alex",
    last_name="Johnson",
    email="alex.johnson@email.com",
    verified=True,
)

BILL = BillSummary(
    biller="City Power & Light",
    masked_account="**** **** 4829",
    meter_id="MTR-2847561",
    balance=Decimal("84.32"),
    due_date="Jan 15, 2026",
    due_short="Jan 15",
    usage_ratio=0.68,
)

GREETING = "Good morning"

RECENT_ACTIVITY: tuple[Activity, ...] = (
    Activity(ActivityKind.PAYMENT, "Dec 28", Decimal("127.45")),
    Activity(ActivityKind.BILL, "Dec 15", Decimal("127.45")),
)

HISTORY: tuple[Activity, ...] = (
    Activity(ActivityKind.PAYMENT, "Jan 10, 2026", Decimal("127.45")),
    Activity(ActivityKind.BILL, "Jan 1, 2026", Decimal("127.45")),
    Activity(ActivityKind.PAYMENT, "Dec 28, 2025", Decimal("115.20")),
)

NOTIFICATIONS: tuple[Notification, ...] = (
    Notification(
        "Payment Successful",
        "Your payment of $127.45 was processed successfully.",
        "2 hours ago",
        NotificationKind.SUCCESS,
    ),
    Notification(
        "Payment Due Soon",
        "Your electricity bill of $84.32 is due on Jan 15.",
        "1 day ago",
        NotificationKind.WARNING,
    ),
    Notification(
        "Auto-Pay Scheduled",
        "Auto-pay of $84.32 will be processed on Jan 15.",
        "2 days ago",
        NotificationKind.INFO,
    ),
)

PAYMENT_METHODS: tuple[PaymentMethod, ...] = (
    PaymentMethod("Credit Card", "**** 4829", is_default=True),
    PaymentMethod("Bank Account", "Chase **** 1234"),
)

# The pay screen labels the bank option by how it pays
PAY_SCREEN_METHODS: tuple[PaymentMethod, ...] = (
    PaymentMethod("Credit Card", "**** 4829", is_default=True),
    PaymentMethod("Bank Transfer", "Chase **** 1234"),
)

QUICK_PAY_AMOUNTS: tuple[Decimal, ...] = (
    Decimal("50"),
    Decimal("100"),
    Decimal("150"),
    Decimal("200"),
)

QUICK_ACTIONS: tuple[QuickAction, ...] = (
    QuickAction("Auto-pay", Screen.AUTO_PAY),
    QuickAction("Usage Graph", Screen.ANALYTICS),
    QuickAction("Support", None),
)

ANALYTICS = AnalyticsSnapshot(
    periods=("3 Months", "6 Months", "1 Year"),
    selected_period="3 Months",
    total_spent=Decimal("425.72"),
    total_spent_trend="12% less",
    units_used=1135,
    units_used_trend="8% less",
    spending=(
        SpendingBar("Oct", 98),
        SpendingBar("Nov", 115),
        SpendingBar("Dec", 127, highlighted=True),
        SpendingBar("Jan", 84),
    ),
)

USAGE = UsageDetail(
    this_month_kwh=220,
    trend="38% less",
    summary=(
        "Based on your purchase history, you've used approximately "
        "220 units this billing cycle."
    ),
)

PROFILE_SECTIONS: tuple[ProfileSection, ...] = (
    ProfileSection("ACCOUNT", ("Payment Methods",), Screen.PAYMENT_METHODS),
    ProfileSection("SECURITY", ("Security Settings", "Biometric Login")),
)

AUTO_PAY_DAY = 15

TRANSACTION_TOKEN = "VF-2026-0111-8429"
