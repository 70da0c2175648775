"""Display formats for a chosen date (entry field and description label)."""

from datetime import date

from calendar_logic import MONTH_NAMES

_WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday",
                  "Friday", "Saturday", "Sunday"]


def short_date(d: date) -> str:
    """``M/d/yy`` without zero padding, e.g. ``2/5/24``."""
    return f"{d.month}/{d.day}/{d.year % 100:02d}"


def long_date(d: date) -> str:
    """e.g. ``Thursday, February 15, 2024``."""
    return f"{_WEEKDAY_NAMES[d.weekday()]}, {MONTH_NAMES[d.month - 1]} {d.day}, {d.year:04d}"


def selection_text(d: date | None) -> str:
    if d is None:
        return " "
    return f"The date selected is {long_date(d)}."
