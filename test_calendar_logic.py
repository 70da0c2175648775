from datetime import date

import pytest

from calendar_logic import (
    DAY_ABBR,
    GRID_SIZE,
    GridCell,
    Weekday,
    add_months,
    build_grid,
    clamp_day,
    days_in_month,
    grid_offset,
    next_month,
    prev_month,
    title_text,
)
from picker_config import PickerConfig

MONTHS = [(y, m) for y in (2023, 2024, 2025) for m in range(1, 13)]


def _rows(cells):
    return [cells[r * 7:(r + 1) * 7] for r in range(6)]


def _selectable(cells):
    return [c.date for c in cells if c.enabled]


def _labels(row):
    return [c.date.day if c.date else None for c in row]


@pytest.mark.parametrize("week_start", list(Weekday))
@pytest.mark.parametrize("year,month", MONTHS)
def test_grid_shape(year, month, week_start):
    anchor = date(year, month, 1)
    cells = build_grid((year, month), anchor, PickerConfig(anchor, week_start=week_start))

    assert len(cells) == GRID_SIZE
    dated = [c for c in cells if c.date is not None]
    assert len(dated) == days_in_month(year, month)

    offset = (date(year, month, 1).weekday() - week_start) % 7
    assert all(c.date is None for c in cells[:offset])
    assert cells[offset].date == date(year, month, 1)
    # consecutive days, one per cell
    assert [c.date.day for c in dated] == list(range(1, len(dated) + 1))


def test_february_2024_sunday_start():
    anchor = date(2024, 2, 15)
    cells = build_grid((2024, 2), anchor, PickerConfig(anchor))
    rows = _rows(cells)

    assert _labels(rows[0]) == [None, None, None, None, 1, 2, 3]
    assert date(2024, 2, 29) in _selectable(cells)
    highlighted = [c for c in cells if c.highlighted]
    assert highlighted == [GridCell(date(2024, 2, 15), enabled=True, highlighted=True)]
    assert all(c.enabled for c in cells if c.date is not None)


def test_monday_start_shifts_columns():
    anchor = date(2024, 2, 15)
    cfg = PickerConfig(anchor, week_start=Weekday.MONDAY)
    rows = _rows(build_grid((2024, 2), anchor, cfg))
    assert _labels(rows[0]) == [None, None, None, 1, 2, 3, 4]
    assert grid_offset(2024, 2, Weekday.MONDAY) == 3


@pytest.mark.parametrize("week_start", list(Weekday))
@pytest.mark.parametrize("year,month", [(2024, 2), (2024, 9), (2025, 6)])
def test_header_over_first_of_month_names_its_weekday(year, month, week_start):
    anchor = date(year, month, 1)
    cfg = PickerConfig(anchor, week_start=week_start)
    cells = build_grid((year, month), anchor, cfg)

    col = next(i for i, c in enumerate(cells) if c.date == anchor) % 7
    assert cfg.day_names[col] == DAY_ABBR[anchor.weekday()]


def test_month_starting_on_week_start_has_no_leading_blanks():
    # September 2024 starts on a Sunday
    anchor = date(2024, 9, 1)
    cells = build_grid((2024, 9), anchor, PickerConfig(anchor))
    assert cells[0].date == date(2024, 9, 1)


def test_excluded_weekend_days_are_disabled():
    anchor = date(2024, 2, 15)
    cfg = PickerConfig(anchor).with_excluded_weekdays(Weekday.SATURDAY, Weekday.SUNDAY)
    cells = build_grid((2024, 2), anchor, cfg)

    for c in cells:
        if c.date is None:
            assert not c.enabled
        elif c.date.weekday() >= 5:
            assert not c.enabled
            assert c.label == str(c.date.day)
        else:
            assert c.enabled


def test_all_weekdays_excluded_leaves_nothing_selectable():
    anchor = date(2024, 2, 15)
    cfg = PickerConfig(anchor).with_excluded_weekdays(*Weekday)
    cells = build_grid((2024, 2), anchor, cfg)
    assert _selectable(cells) == []
    assert len([c for c in cells if c.date]) == 29


def test_bounds_clip_days_to_blank():
    anchor = date(2024, 3, 20)
    cfg = (PickerConfig(anchor)
           .with_earliest_date(date(2024, 3, 15))
           .with_latest_date(date(2024, 3, 25)))
    cells = build_grid((2024, 3), anchor, cfg)

    dated = [c.date for c in cells if c.date is not None]
    assert dated[0] == date(2024, 3, 15)
    assert dated[-1] == date(2024, 3, 25)
    assert len(dated) == 11


def test_highlight_keeps_day_number_in_other_months():
    anchor = date(2024, 2, 15)
    cells = build_grid((2024, 5), anchor, PickerConfig(anchor))
    assert [c.date for c in cells if c.highlighted] == [date(2024, 5, 15)]


def test_highlight_shown_on_excluded_day():
    anchor = date(2024, 2, 17)  # Saturday
    cfg = PickerConfig(anchor).with_excluded_weekdays(Weekday.SATURDAY)
    cell = next(c for c in build_grid((2024, 2), anchor, cfg) if c.highlighted)
    assert cell.date == anchor
    assert not cell.enabled


def test_no_highlight_when_day_missing_from_month():
    anchor = date(2024, 1, 31)
    cells = build_grid((2024, 2), anchor, PickerConfig(anchor))
    assert not any(c.highlighted for c in cells)


def test_build_is_deterministic():
    anchor = date(2024, 2, 15)
    cfg = PickerConfig(anchor).with_excluded_weekdays(Weekday.MONDAY)
    assert build_grid((2024, 2), anchor, cfg) == build_grid((2024, 2), anchor, cfg)


def test_grid_at_start_of_date_range():
    anchor = date(1, 1, 1)  # a Monday
    cells = build_grid((1, 1), anchor, PickerConfig(anchor))
    assert len(cells) == GRID_SIZE
    assert cells[0].date is None
    assert cells[1].date == date(1, 1, 1)


def test_grid_at_end_of_date_range():
    anchor = date(9999, 12, 31)
    cells = build_grid((9999, 12), anchor, PickerConfig(anchor))
    assert len(cells) == GRID_SIZE
    assert len([c for c in cells if c.date]) == 31


def test_title_text():
    assert title_text((2024, 2), ["Jan", "Feb"] + ["x"] * 10) == "Feb 2024"
    names = PickerConfig(date(2024, 12, 1)).month_names
    assert title_text((2024, 12), names) == "December 2024"


def test_month_helpers():
    assert prev_month(2024, 1) == (2023, 12)
    assert next_month(2024, 12) == (2025, 1)
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2023, 2) == 28
    assert clamp_day(2023, 2, 31) == date(2023, 2, 28)
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert add_months(date(2024, 3, 15), -3) == date(2023, 12, 15)
    assert add_months(date(2024, 2, 29), -12) == date(2023, 2, 28)
