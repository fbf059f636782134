"""Card and list-item widgets for fixture data."""

from decimal import Decimal

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Static

from voltflow.models.fixtures import (
    Activity,
    Notification,
    PaymentMethod,
    SpendingBar,
)
from voltflow.tui.utils import (
    format_amount,
    format_signed_amount,
    get_activity_class,
    get_activity_icon,
    get_notification_markup,
)


class ActivityItem(Horizontal):
    """A ledger line: icon, title with date, signed amount."""

    DEFAULT_CSS = """
    ActivityItem {
        height: auto;
        border: round $panel;
        background: $surface;
        padding: 0 1;
        margin: 0 0 1 0;
    }

    ActivityItem .activity-icon {
        width: 3;
    }

    ActivityItem .activity-icon.payment {
        color: $primary;
    }

    ActivityItem .activity-icon.bill {
        color: $text-muted;
    }

    ActivityItem .activity-body {
        width: 1fr;
        height: auto;
    }

    ActivityItem .activity-date {
        color: $text-muted;
    }

    ActivityItem .activity-amount {
        width: auto;
        text-style: bold;
    }
    """

    def __init__(self, activity: Activity, **kwargs: object) -> None:
        super().__init__(**kwargs)
        self.activity = activity

    def compose(self) -> ComposeResult:
        kind = self.activity.kind
        yield Static(
            get_activity_icon(kind),
            classes=f"activity-icon {get_activity_class(kind)}",
        )
        with Vertical(classes="activity-body"):
            yield Static(self.activity.title, classes="activity-title")
            yield Static(self.activity.date, classes="activity-date")
        yield Static(
            format_signed_amount(self.activity.signed_amount),
            classes="activity-amount",
        )


class PaymentMethodItem(Static):
    """A payment method row; the selected one gets a primary border."""

    DEFAULT_CSS = """
    PaymentMethodItem {
        height: auto;
        border: round $panel;
        background: $surface;
        padding: 0 1;
        margin: 0 0 1 0;
    }

    PaymentMethodItem.-selected {
        border: round $primary;
    }
    """

    def __init__(
        self,
        method: PaymentMethod,
        selected: bool = False,
        show_default: bool = False,
        **kwargs: object,
    ) -> None:
        super().__init__(**kwargs)
        self.method = method
        self.selected = selected
        self.show_default = show_default
        if selected:
            self.add_class("-selected")

    def render(self) -> Text:
        text = Text()
        text.append(self.method.name, style="bold")
        if self.show_default and self.method.is_default:
            text.append("  Default", style="italic")
        if self.selected:
            text.append("  ✓", style="bold")
        text.append("\n")
        text.append(self.method.details)
        return text


class NotificationItem(Static):
    """A notification card with kind icon, body and relative time."""

    DEFAULT_CSS = """
    NotificationItem {
        height: auto;
        border: round $panel;
        background: $surface;
        padding: 0 1;
        margin: 0 0 1 0;
    }
    """

    def __init__(self, notification: Notification, **kwargs: object) -> None:
        super().__init__(**kwargs)
        self.notification = notification

    def render(self) -> Text:
        data = self.notification
        text = Text.from_markup(get_notification_markup(data.kind))
        text.append(f"  {data.title}", style="bold")
        text.append(f"\n{data.body}")
        text.append(f"\n{data.time}", style="dim")
        return text


class StatCard(Static):
    """Label, value and trend, used on the analytics screen."""

    DEFAULT_CSS = """
    StatCard {
        width: 1fr;
        height: auto;
        border: round $panel;
        background: $surface;
        padding: 0 1;
        margin: 0 1 1 0;
    }
    """

    def __init__(
        self, caption: str, figure: str, trend: str, **kwargs: object
    ) -> None:
        super().__init__(**kwargs)
        self.caption = caption
        self.figure = figure
        self.trend = trend

    def render(self) -> Text:
        text = Text()
        text.append(f"{self.caption}\n", style="dim")
        text.append(f"{self.figure}\n", style="bold")
        text.append(self.trend, style="green")
        return text


class SpendingChart(Static):
    """Horizontal bar chart of monthly spending."""

    BAR_WIDTH = 24

    DEFAULT_CSS = """
    SpendingChart {
        height: auto;
        border: round $panel;
        background: $surface;
        padding: 0 1;
        margin: 0 0 1 0;
    }
    """

    def __init__(self, bars: tuple[SpendingBar, ...], **kwargs: object) -> None:
        super().__init__(**kwargs)
        self.bars = bars

    def render(self) -> Text:
        text = Text()
        peak = max((bar.amount for bar in self.bars), default=0)
        for index, bar in enumerate(self.bars):
            length = round(self.BAR_WIDTH * bar.amount / peak) if peak else 0
            if index:
                text.append("\n")
            text.append(f"{bar.month:<4}")
            text.append("█" * length, style="bold" if bar.highlighted else "dim")
            text.append(f" {format_amount(Decimal(bar.amount), cents=False)}")
        return text
