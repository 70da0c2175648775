"""Month/year navigation and the earliest/latest bound check."""

from __future__ import annotations

import logging
from datetime import MAXYEAR, MINYEAR, date
from enum import Enum

from calendar_logic import clamp_day, next_month, prev_month

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Navigation step; the value is the label of its button."""

    PREV_YEAR = "\u25C0\u25C0"
    PREV_MONTH = "\u25C0"
    NEXT_MONTH = "\u25B6"
    NEXT_YEAR = "\u25B6\u25B6"

    @property
    def backward(self) -> bool:
        return self in (Direction.PREV_YEAR, Direction.PREV_MONTH)


def apply_step(current: tuple[int, int], direction: Direction) -> tuple[int, int]:
    """Return the (year, month) one step away from *current*.

    Raises ValueError if the result falls outside the years ``datetime``
    can represent.
    """
    year, month = current
    if direction is Direction.PREV_YEAR:
        year -= 1
    elif direction is Direction.NEXT_YEAR:
        year += 1
    elif direction is Direction.PREV_MONTH:
        year, month = prev_month(year, month)
    else:
        year, month = next_month(year, month)
    if not MINYEAR <= year <= MAXYEAR:
        raise ValueError(f"Year {year} is out of range")
    return year, month


def can_step(
    current: tuple[int, int],
    direction: Direction,
    earliest_date: date | None = None,
    latest_date: date | None = None,
) -> bool:
    """Return True if moving one step in *direction* stays within the bounds.

    Bounds are compared at month granularity: a bound anywhere inside a
    month allows navigating to that month but not past it.
    """
    try:
        year, month = apply_step(current, direction)
    except ValueError:
        return False

    if direction.backward:
        if earliest_date is None:
            return True
        allowed = (year, month) >= (earliest_date.year, earliest_date.month)
    else:
        if latest_date is None:
            return True
        allowed = (year, month) <= (latest_date.year, latest_date.month)

    if not allowed:
        logger.debug("Navigation %s from %04d-%02d blocked by bound",
                     direction.name, current[0], current[1])
    return allowed


def step_cursor(cursor: date, direction: Direction) -> date:
    """Move *cursor* one step, keeping its day where the target month allows.

    Jan 31 one month forward lands on the last day of February.
    """
    year, month = apply_step((cursor.year, cursor.month), direction)
    return clamp_day(year, month, cursor.day)
