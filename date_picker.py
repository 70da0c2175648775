"""Modal date-picker dialog (tkinter) driven by a PickerSession."""

from __future__ import annotations

import logging
import tkinter as tk
from dataclasses import dataclass
from datetime import date
from tkinter import font as tkfont

from calendar_logic import GRID_COLS, GRID_SIZE
from navigation import Direction
from picker_config import PickerConfig
from picker_session import Cancel, Intent, Navigate, PickerSession, SelectCell
from settings import load_settings

logger = logging.getLogger(__name__)

# Nav buttons either side of the month title, outermost first
_LEFT_NAV = (Direction.PREV_YEAR, Direction.PREV_MONTH)
_RIGHT_NAV = (Direction.NEXT_YEAR, Direction.NEXT_MONTH)


@dataclass(frozen=True)
class PickerStyle:
    """Colours and font size of the dialog.

    Setting ``highlight`` equal to ``background`` effectively turns the
    day highlight off.
    """

    background: str = "white"
    foreground: str = "blue"
    highlight: str = "yellow"
    font_size: int = 10

    @classmethod
    def from_settings(cls, settings: dict | None = None) -> PickerStyle:
        s = settings if settings is not None else load_settings()
        return cls(s["background"], s["foreground"], s["highlight"], s["font_size"])


class DatePicker(tk.Toplevel):
    """Month grid with year/month navigation; closes on pick or cancel."""

    def __init__(self, master: tk.Misc, config: PickerConfig, title: str,
                 style: PickerStyle | None = None) -> None:
        super().__init__(master)
        self.title(title)
        self.resizable(False, False)
        self.transient(master)

        self.session = PickerSession(config)
        self.style = style or PickerStyle.from_settings()
        self.configure(bg=self.style.background)

        families = tkfont.families(self)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self._font = tkfont.Font(family=base, size=self.style.font_size, weight="bold")

        self._title_label: tk.Label | None = None
        self._day_buttons: list[tk.Button] = []
        self._build_widgets(config)
        self._refresh()

        self.bind("<Escape>", lambda _e: self._send(Cancel()))
        self.protocol("WM_DELETE_WINDOW", lambda: self._send(Cancel()))

    # ------------------------------------------------------------------
    # Build widgets once; _refresh reconfigures them
    # ------------------------------------------------------------------
    def _build_widgets(self, config: PickerConfig) -> None:
        st = self.style
        outer = tk.Frame(self, bg=st.background, padx=6, pady=4)
        outer.pack()

        nav = tk.Frame(outer, bg=st.background)
        nav.pack(fill="x", pady=(0, 4))
        for direction in _LEFT_NAV:
            self._nav_button(nav, direction).pack(side="left")
        self._title_label = tk.Label(
            nav, font=self._font, bg=st.background, fg=st.foreground,
        )
        self._title_label.pack(side="left", expand=True, fill="x", padx=8)
        for direction in _RIGHT_NAV:
            self._nav_button(nav, direction).pack(side="right")

        body = tk.Frame(outer, bg=st.background)
        body.pack()
        for col, name in enumerate(config.day_names):
            tk.Label(
                body, text=name, font=self._font, bg=st.background,
                fg=st.foreground, width=4,
            ).grid(row=0, column=col, padx=1, pady=1)

        for index in range(GRID_SIZE):
            btn = tk.Button(
                body, font=self._font, width=3, relief="flat",
                bg=st.background, fg=st.foreground,
                activebackground=st.highlight, disabledforeground="#888888",
                command=lambda i=index: self._send(SelectCell(i)),
            )
            btn.grid(row=1 + index // GRID_COLS, column=index % GRID_COLS,
                     padx=1, pady=1)
            self._day_buttons.append(btn)

    def _nav_button(self, parent: tk.Frame, direction: Direction) -> tk.Label:
        lbl = tk.Label(
            parent, text=direction.value, font=self._font, bg=self.style.background,
            fg=self.style.foreground, cursor="hand2", padx=4,
        )
        lbl.bind("<Button-1>", lambda _e: self._send(Navigate(direction)))
        return lbl

    # ------------------------------------------------------------------
    # Intent dispatch + repaint
    # ------------------------------------------------------------------
    def _send(self, intent: Intent) -> None:
        if not self.session.dispatch(intent):
            return
        if self.session.is_open:
            self._refresh()
        else:
            self.grab_release()
            self.destroy()

    def _refresh(self) -> None:
        st = self.style
        self._title_label.configure(text=self.session.title)
        for btn, cell in zip(self._day_buttons, self.session.cells):
            btn.configure(
                text=cell.label or " ",
                state="normal" if cell.enabled else "disabled",
                bg=st.highlight if cell.highlighted else st.background,
                cursor="hand2" if cell.enabled else "",
            )

    # ------------------------------------------------------------------
    # Modal run
    # ------------------------------------------------------------------
    def show_modal(self) -> date | None:
        """Show the dialog centred on its master and wait until it closes."""
        self.update_idletasks()
        master = self.master
        x = master.winfo_rootx() + (master.winfo_width() - self.winfo_reqwidth()) // 2
        y = master.winfo_rooty() + (master.winfo_height() - self.winfo_reqheight()) // 2
        self.geometry(f"+{max(0, x)}+{max(0, y)}")
        self.grab_set()
        self.focus_set()
        title = self.wm_title()
        self.wait_window(self)
        logger.debug("%s closed with %s", title, self.session.selected_date)
        return self.session.selected_date


def ask_date(master: tk.Misc, config: PickerConfig, title: str,
             style: PickerStyle | None = None) -> date | None:
    """Open a modal picker and return the chosen date, or None if cancelled."""
    return DatePicker(master, config, title, style).show_modal()
