"""
Value formatting shared by the prompt templates.

Request values arrive as whatever JSON type the caller sent. They are
rendered into prompt text rather than validated.
"""

from decimal import Decimal, InvalidOperation
from typing import Any

NOT_SPECIFIED = "Not specified"


def format_budget(budget: Any) -> str:
    """
    Render a budget the way a user typed it.

    Numbers lose trailing zeros and never use exponent notation. Anything
    else (a string such as "about 1500", a list, ...) goes through
    format_text unchanged.

    Examples:
        - 1500                -> "1500"
        - 1500.0              -> "1500"
        - Decimal("1499.99")  -> "1499.99"
        - "about 1500"        -> "about 1500"
        - None                -> "Not specified"
    """
    if isinstance(budget, bool) or not isinstance(budget, (int, float, Decimal)):
        return format_text(budget)
    try:
        amount = Decimal(str(budget))
    except InvalidOperation:
        return format_text(budget)
    if not amount.is_finite():
        return format_text(budget)
    return f"{amount.normalize():f}"


def format_text(value: Any) -> str:
    """Render a free-text prompt field, falling back to 'Not specified'."""
    if value is None:
        return NOT_SPECIFIED
    if isinstance(value, bool):
        text = "true" if value else "false"
    elif isinstance(value, (list, tuple)):
        text = ", ".join(format_text(item) for item in value if item is not None)
    else:
        text = str(value)
    text = text.strip()
    return text if text else NOT_SPECIFIED
