"""One date-picker interaction: navigation, selection and cancel.

The session owns the only mutable state of a picker (the cursor date and
the outcome).  A presentation layer turns clicks into intents, passes them
to ``dispatch`` and repaints from ``cells`` and ``title`` afterwards.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from calendar_logic import GRID_SIZE, GridCell, build_grid, title_text
from navigation import Direction, can_step, step_cursor
from picker_config import PickerConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Navigate:
    direction: Direction


@dataclass(frozen=True)
class SelectCell:
    index: int

    def __post_init__(self) -> None:
        if not 0 <= self.index < GRID_SIZE:
            raise ValueError(f"Cell index {self.index} outside 0..{GRID_SIZE - 1}")


@dataclass(frozen=True)
class Cancel:
    pass


Intent = Navigate | SelectCell | Cancel

NAVIGATE_PREV_YEAR = Navigate(Direction.PREV_YEAR)
NAVIGATE_PREV_MONTH = Navigate(Direction.PREV_MONTH)
NAVIGATE_NEXT_MONTH = Navigate(Direction.NEXT_MONTH)
NAVIGATE_NEXT_YEAR = Navigate(Direction.NEXT_YEAR)


class PickerSession:
    """Interaction state for a single opening of the picker."""

    def __init__(self, config: PickerConfig) -> None:
        self.config = config
        # Navigation moves the cursor; its day drives the highlight
        self.cursor: date = config.anchor
        self._selected: date | None = None
        self._closed = False
        self._cells = self._build()

    # ------------------------------------------------------------------
    # View
    # ------------------------------------------------------------------
    @property
    def displayed_month(self) -> tuple[int, int]:
        return self.cursor.year, self.cursor.month

    @property
    def cells(self) -> list[GridCell]:
        return list(self._cells)

    @property
    def title(self) -> str:
        return title_text(self.displayed_month, self.config.month_names)

    def _build(self) -> list[GridCell]:
        return build_grid(self.displayed_month, self.cursor, self.config)

    # ------------------------------------------------------------------
    # Outcome
    # ------------------------------------------------------------------
    @property
    def is_open(self) -> bool:
        return not self._closed

    @property
    def selected_date(self) -> date | None:
        return self._selected

    @property
    def cancelled(self) -> bool:
        return self._closed and self._selected is None

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------
    def dispatch(self, intent: Intent) -> bool:
        """Apply *intent*; return True if the view or outcome changed."""
        if self._closed:
            logger.debug("Ignoring %r on a closed session", intent)
            return False
        if isinstance(intent, Navigate):
            return self._navigate(intent.direction)
        if isinstance(intent, SelectCell):
            return self._select(intent.index)
        if isinstance(intent, Cancel):
            self._closed = True
            logger.debug("Picker cancelled")
            return True
        raise TypeError(f"Unknown intent: {intent!r}")

    def _navigate(self, direction: Direction) -> bool:
        cfg = self.config
        if not can_step(self.displayed_month, direction,
                        cfg.earliest_date, cfg.latest_date):
            return False
        self.cursor = step_cursor(self.cursor, direction)
        self._cells = self._build()
        return True

    def _select(self, index: int) -> bool:
        cell = self._cells[index]
        if not cell.enabled or cell.date is None:
            logger.debug("Ignoring click on disabled cell %d", index)
            return False
        self._selected = cell.date
        self._closed = True
        logger.debug("Selected %s", cell.date.isoformat())
        return True
