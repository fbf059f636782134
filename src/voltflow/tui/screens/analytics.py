"""Analytics sub-screen: spending and usage insights."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static, Tab, Tabs

from voltflow.models import Screen
from voltflow.models.fixtures import ANALYTICS
from voltflow.tui.screens.base import VoltflowScreen
from voltflow.tui.utils import format_amount
from voltflow.tui.widgets import SpendingChart, StatCard


def period_tab_id(period: str) -> str:
    return "period-" + period.lower().replace(" ", "-")


class AnalyticsScreen(VoltflowScreen):
    """Period tabs, totals and a monthly spending chart."""

    DEFAULT_CSS = """
    AnalyticsScreen .stat-row {
        height: auto;
        padding: 1 0 0 0;
    }
    """

    screen_id = Screen.ANALYTICS
    heading = "Analytics"
    subheading = "Spending & usage insights"

    def compose_body(self) -> ComposeResult:
        yield Tabs(
            *(Tab(period, id=period_tab_id(period)) for period in ANALYTICS.periods),
            active=period_tab_id(ANALYTICS.selected_period),
            id="period-tabs",
        )
        with Horizontal(classes="stat-row"):
            yield StatCard(
                "Total Spent",
                format_amount(ANALYTICS.total_spent),
                ANALYTICS.total_spent_trend,
            )
            yield StatCard(
                "Units Used",
                str(ANALYTICS.units_used),
                ANALYTICS.units_used_trend,
            )
        yield Static("Spending Trend", classes="section-title")
        yield SpendingChart(ANALYTICS.spending, id="spending-chart")
