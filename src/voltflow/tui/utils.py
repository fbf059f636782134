"""TUI utility functions for Voltflow."""

from decimal import ROUND_HALF_UP, Decimal

from voltflow.models.fixtures import ActivityKind, NotificationKind

# =============================================================================
# Money Formatting
# =============================================================================

_CENTS = Decimal("0.01")


def format_amount(amount: Decimal, *, cents: bool = True) -> str:
    """Format an unsigned dollar amount.

    Args:
        amount: Amount in dollars
        cents: Show two decimal places; whole-dollar form otherwise

    Returns:
        String like "$84.32" or "$50"
    """
    magnitude = abs(amount)
    if not cents:
        return f"${magnitude.quantize(Decimal('1'), rounding=ROUND_HALF_UP)}"
    return f"${magnitude.quantize(_CENTS, rounding=ROUND_HALF_UP):,}"


def format_signed_amount(amount: Decimal) -> str:
    """Format a ledger amount with an explicit sign, e.g. "-$127.45"."""
    sign = "-" if amount < 0 else "+"
    return f"{sign}{format_amount(amount)}"


def format_percent(ratio: float) -> str:
    """Format a 0..1 ratio as a whole percentage."""
    return f"{round(ratio * 100)}%"


# =============================================================================
# Display Tables
# =============================================================================

# (icon, css class) per ledger entry kind
ACTIVITY_DISPLAY: dict[ActivityKind, tuple[str, str]] = {
    ActivityKind.PAYMENT: ("↓", "payment"),
    ActivityKind.BILL: ("≡", "bill"),
}

NOTIFICATION_DISPLAY: dict[NotificationKind, tuple[str, str]] = {
    NotificationKind.SUCCESS: ("✓", "#10B981"),
    NotificationKind.WARNING: ("◷", "#F59E0B"),
    NotificationKind.INFO: ("ϟ", "#3177C5"),
}


def get_activity_icon(kind: ActivityKind) -> str:
    icon, _ = ACTIVITY_DISPLAY.get(kind, ("?", ""))
    return icon


def get_activity_class(kind: ActivityKind) -> str:
    _, css_class = ACTIVITY_DISPLAY.get(kind, ("?", ""))
    return css_class


def get_notification_markup(kind: NotificationKind) -> str:
    """Rich markup for a notification icon, e.g. "[#10B981]✓[/]"."""
    icon, color = NOTIFICATION_DISPLAY.get(kind, ("?", "dim"))
    return f"[{color}]{icon}[/]"
