"""Pure calendar calculations, no UI dependencies.

``build_grid`` turns a displayed month plus a picker configuration into the
42 cells (6 weeks × 7 days) of the date-picker body.  The result is a fresh
list of immutable cells every time; the dialog repaints from it.
"""

from __future__ import annotations

import calendar
from datetime import date
from enum import IntEnum
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from picker_config import PickerConfig

GRID_ROWS = 6
GRID_COLS = 7
GRID_SIZE = GRID_ROWS * GRID_COLS

_MIN_ORDINAL = date.min.toordinal()
_MAX_ORDINAL = date.max.toordinal()


class Weekday(IntEnum):
    """Day of week on the same scale as ``date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


# Monday-first, indexed by Weekday
DAY_ABBR = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
]


class GridCell(NamedTuple):
    """One day slot of the grid. ``date`` is None for a blank slot."""

    date: date | None
    enabled: bool = False
    highlighted: bool = False

    @property
    def label(self) -> str:
        return str(self.date.day) if self.date is not None else ""


BLANK = GridCell(None)


def rotate_weekdays(names: list[str], week_start: int) -> list[str]:
    """Reorder Monday-first *names* so the list starts at *week_start*."""
    return names[week_start:] + names[:week_start]


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def clamp_day(year: int, month: int, day: int) -> date:
    """Return the date in (year, month) nearest to *day* (Jan 31 -> Feb 29)."""
    return date(year, month, min(day, days_in_month(year, month)))


def grid_offset(year: int, month: int, week_start: int) -> int:
    """Number of blank slots before the 1st of the month."""
    return (date(year, month, 1).weekday() - week_start) % 7


def build_grid(
    displayed_month: tuple[int, int],
    anchor: date,
    config: PickerConfig,
) -> list[GridCell]:
    """Return the 42 day cells for *displayed_month*, row-major.

    Days outside the displayed month, and days outside the configured
    earliest/latest bounds, come back as blank disabled cells.  Days on an
    excluded weekday carry their date but are disabled.  The highlighted
    cell is the one whose day-of-month equals ``anchor.day``; only the
    displayed month is compared, so after navigating away from the anchor's
    month the same day number stays marked.
    """
    year, month = displayed_month
    start = date(year, month, 1).toordinal() - grid_offset(year, month, config.week_start)
    earliest = config.earliest_date
    latest = config.latest_date
    excluded = config.excluded_weekdays

    cells: list[GridCell] = []
    for ordinal in range(start, start + GRID_SIZE):
        # Grids touching year 1 or year 9999 run off the date range
        if not _MIN_ORDINAL <= ordinal <= _MAX_ORDINAL:
            cells.append(BLANK)
            continue
        candidate = date.fromordinal(ordinal)
        if earliest is not None and candidate < earliest:
            cells.append(BLANK)
        elif latest is not None and candidate > latest:
            cells.append(BLANK)
        elif candidate.year != year or candidate.month != month:
            cells.append(BLANK)
        else:
            cells.append(GridCell(
                candidate,
                enabled=candidate.weekday() not in excluded,
                highlighted=candidate.day == anchor.day,
            ))
    return cells


def title_text(displayed_month: tuple[int, int], month_names) -> str:
    """Return the dialog title, e.g. ``"February 2024"``."""
    year, month = displayed_month
    return f"{month_names[month - 1]} {year}"


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    if month == 12:
        return year + 1, 1
    return year, month + 1


def add_months(d: date, months: int) -> date:
    """Shift *d* by *months*, clamping the day to the target month."""
    y, m = divmod(d.year * 12 + d.month - 1 + months, 12)
    return clamp_day(y, m + 1, d.day)
