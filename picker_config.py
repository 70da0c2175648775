"""Validated, immutable configuration for one date-picker session."""

from __future__ import annotations

import calendar
import dataclasses
from dataclasses import dataclass
from datetime import date

from calendar_logic import DAY_ABBR, MONTH_NAMES, Weekday, rotate_weekdays


class InvalidConfiguration(ValueError):
    """Raised when a picker configuration value is rejected."""


ConfigurationError = InvalidConfiguration


def default_day_names(week_start: int = Weekday.SUNDAY) -> tuple[str, ...]:
    """English three-letter day names ordered from *week_start*."""
    return tuple(rotate_weekdays(DAY_ABBR, week_start))


def locale_day_names(week_start: int = Weekday.SUNDAY) -> tuple[str, ...]:
    """Day abbreviations from the current locale, ordered from *week_start*."""
    return tuple(rotate_weekdays(list(calendar.day_abbr), week_start))


def locale_month_names() -> tuple[str, ...]:
    """Month names from the current locale, January first."""
    return tuple(calendar.month_name[1:])


@dataclass(frozen=True)
class PickerConfig:
    """Everything the grid and navigation need besides the displayed month.

    Instances are never mutated.  The ``with_*`` methods return a new
    config and raise ``InvalidConfiguration`` without touching the current
    one when the new value is rejected.

    >>> cfg = PickerConfig(date(2024, 2, 15)).with_excluded_weekdays(
    ...     Weekday.SATURDAY, Weekday.SUNDAY)
    """

    anchor: date
    week_start: Weekday = Weekday.SUNDAY
    excluded_weekdays: frozenset[Weekday] = frozenset()
    earliest_date: date | None = None
    latest_date: date | None = None
    # None means the English abbreviations, ordered from week_start
    day_names: tuple[str, ...] | None = None
    month_names: tuple[str, ...] = tuple(MONTH_NAMES)

    def __post_init__(self) -> None:
        # Normalise plain ints / lists handed in by callers
        try:
            object.__setattr__(self, "week_start", Weekday(self.week_start))
            object.__setattr__(self, "excluded_weekdays",
                               frozenset(Weekday(d) for d in self.excluded_weekdays))
        except ValueError as exc:
            raise InvalidConfiguration(str(exc)) from exc
        if self.day_names is None:
            object.__setattr__(self, "day_names", default_day_names(self.week_start))
        else:
            object.__setattr__(self, "day_names", tuple(self.day_names))
        object.__setattr__(self, "month_names", tuple(self.month_names))

        if len(self.day_names) != 7:
            raise InvalidConfiguration(
                f"There must be 7 day names. You have provided {len(self.day_names)}")
        if len(self.month_names) != 12:
            raise InvalidConfiguration(
                f"There must be 12 month names. You have provided {len(self.month_names)}")
        if self.earliest_date is not None and self.earliest_date > self.anchor:
            raise InvalidConfiguration(
                f"Earliest date {self.earliest_date} must come before "
                f"the calendar date {self.anchor}")
        if self.latest_date is not None and self.latest_date < self.anchor:
            raise InvalidConfiguration(
                f"Latest date {self.latest_date} must come after "
                f"the calendar date {self.anchor}")

    @classmethod
    def for_locale(cls, anchor: date, week_start: int = Weekday.SUNDAY) -> PickerConfig:
        """Build a config using the current locale's day and month names."""
        return cls(
            anchor,
            week_start=Weekday(week_start),
            day_names=locale_day_names(week_start),
            month_names=locale_month_names(),
        )

    def with_day_names(self, names, week_start: int | None = None) -> PickerConfig:
        if week_start is None:
            return dataclasses.replace(self, day_names=names)
        return dataclasses.replace(self, day_names=names, week_start=week_start)

    def with_week_start(self, week_start: int) -> PickerConfig:
        """Change the first column, rotating the current day names with it."""
        try:
            shift = (Weekday(week_start) - self.week_start) % 7
        except ValueError as exc:
            raise InvalidConfiguration(str(exc)) from exc
        names = rotate_weekdays(list(self.day_names), shift)
        return dataclasses.replace(self, week_start=week_start, day_names=names)

    def with_month_names(self, names) -> PickerConfig:
        return dataclasses.replace(self, month_names=names)

    def with_earliest_date(self, earliest: date | None) -> PickerConfig:
        return dataclasses.replace(self, earliest_date=earliest)

    def with_latest_date(self, latest: date | None) -> PickerConfig:
        return dataclasses.replace(self, latest_date=latest)

    def with_excluded_weekdays(self, *days: int) -> PickerConfig:
        """Any subset is accepted, including all seven days."""
        return dataclasses.replace(self, excluded_weekdays=frozenset(days))

    @property
    def displayed_month(self) -> tuple[int, int]:
        """The month a new session opens on."""
        return self.anchor.year, self.anchor.month
