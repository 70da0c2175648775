"""Entry point: demo window with three independent date fields."""

import logging
import tkinter as tk
from datetime import date
from tkinter import messagebox

from PIL import ImageTk

from calendar_logic import Weekday, add_months
from date_format import selection_text, short_date
from date_picker import PickerStyle, ask_date
from icon_gen import create_calendar_icon
from log_utils import setup_logger
from picker_config import InvalidConfiguration, PickerConfig
from settings import load_settings, update_settings, week_start

logger = logging.getLogger(__name__)


class DateField:
    """Label, entry, calendar button and description line on one grid row."""

    def __init__(self, parent: tk.Frame, row: int, label: str, icon,
                 initial: date | None = None) -> None:
        tk.Label(parent, text=label).grid(row=row, column=0, sticky="w", padx=5, pady=5)
        self.entry = tk.Entry(parent, width=10)
        self.entry.grid(row=row, column=1, sticky="w", padx=5, pady=5)
        self.button = tk.Button(parent, image=icon)
        self.button.grid(row=row, column=2, sticky="w", padx=5, pady=5)
        self.description = tk.Label(parent, text=" ", anchor="w")
        self.description.grid(row=row + 1, column=0, columnspan=3, sticky="we", padx=5)
        if initial is not None:
            self.show(initial)

    def show(self, d: date) -> None:
        self.entry.delete(0, "end")
        self.entry.insert(0, short_date(d))
        self.description.configure(text=selection_text(d))


class DemoWindow:
    """Host window: birth, subscription and transaction dates."""

    def __init__(self) -> None:
        self.root = tk.Tk()
        self.root.title("Date Picker Demo")
        self.settings = load_settings()
        self.style = PickerStyle.from_settings(self.settings)

        today = date.today()
        # Keep a reference, tkinter does not
        self._icon = ImageTk.PhotoImage(create_calendar_icon(today.day), master=self.root)

        frame = tk.Frame(self.root, padx=50, pady=50)
        frame.pack(fill="both", expand=True)
        frame.columnconfigure(0, minsize=150)

        self.birth = DateField(frame, 0, "Birth Date:", self._icon)
        self.subscription = DateField(frame, 2, "Subscription Date:", self._icon, today)
        self.transaction = DateField(frame, 4, "Transaction Date:", self._icon, today)

        self.birth.button.configure(command=self._pick_birth_date)
        self.subscription.button.configure(command=self._pick_subscription_date)
        self.transaction.button.configure(command=self._pick_transaction_date)

        tk.Button(frame, text="Settings...", command=self.open_settings).grid(
            row=6, column=0, sticky="w", padx=5, pady=(15, 0),
        )

    # ------------------------------------------------------------------
    # Settings dialog
    # ------------------------------------------------------------------
    def open_settings(self) -> None:
        dlg = tk.Toplevel(self.root)
        dlg.title("Settings")
        dlg.resizable(False, False)
        dlg.transient(self.root)
        dlg.grab_set()

        frame = tk.Frame(dlg, padx=12, pady=8)
        frame.pack()

        colour_vars: dict[str, tk.StringVar] = {}
        for row, key in enumerate(("background", "foreground", "highlight")):
            tk.Label(frame, text=f"{key.capitalize()} colour:").grid(
                row=row, column=0, sticky="w", pady=4,
            )
            var = tk.StringVar(value=self.settings[key])
            tk.Entry(frame, textvariable=var, width=12).grid(
                row=row, column=1, padx=(8, 0), pady=4,
            )
            colour_vars[key] = var

        tk.Label(frame, text="Font size:").grid(row=3, column=0, sticky="w", pady=4)
        spin_size = tk.Spinbox(frame, from_=6, to=72, width=4)
        spin_size.delete(0, "end")
        spin_size.insert(0, str(self.settings["font_size"]))
        spin_size.grid(row=3, column=1, sticky="w", padx=(8, 0), pady=4)

        tk.Label(frame, text="Week starts on:").grid(row=4, column=0, sticky="w", pady=4)
        start_var = tk.StringVar(value=self.settings["week_start"])
        tk.OptionMenu(frame, start_var, *Weekday.__members__).grid(
            row=4, column=1, sticky="w", padx=(8, 0), pady=4,
        )

        def on_ok() -> None:
            try:
                size = int(spin_size.get())
            except ValueError:
                return
            values = {k: v.get().strip() for k, v in colour_vars.items()}
            values["font_size"] = size
            values["week_start"] = start_var.get()
            self.settings = update_settings(values)
            self.style = PickerStyle.from_settings(self.settings)
            logger.info("Settings saved: %s", self.settings)
            dlg.destroy()

        btn_frame = tk.Frame(frame)
        btn_frame.grid(row=5, column=0, columnspan=2, pady=(8, 0))
        tk.Button(btn_frame, text="OK", width=8, command=on_ok).pack(side="left", padx=4)
        tk.Button(btn_frame, text="Cancel", width=8, command=dlg.destroy).pack(
            side="left", padx=4,
        )

    def _base_config(self, anchor: date) -> PickerConfig:
        return PickerConfig(anchor, week_start=week_start(self.settings))

    def _pick(self, field: DateField, title: str, build, style: PickerStyle) -> None:
        try:
            config = build()
        except InvalidConfiguration as exc:
            logger.error("Cannot open %s picker: %s", title, exc)
            messagebox.showerror(title, str(exc), parent=self.root)
            return
        selected = ask_date(self.root, config, title, style)
        if selected is None:
            logger.info("%s picker cancelled", title)
            return
        logger.info("%s set to %s", title, selected.isoformat())
        field.show(selected)

    def _pick_birth_date(self) -> None:
        today = date.today()
        style = PickerStyle("#A52A2A", "#C0C0C0", "#808000", 24)
        self._pick(
            self.birth, "Birth Date",
            lambda: self._base_config(add_months(today, -65 * 12))
            .with_latest_date(add_months(today, -21 * 12)),
            style,
        )

    def _pick_subscription_date(self) -> None:
        today = date.today()
        style = PickerStyle("black", "white", "red", self.style.font_size)
        self._pick(
            self.subscription, "Subscription Date",
            lambda: self._base_config(today)
            .with_earliest_date(today)
            .with_latest_date(add_months(today, 12)),
            style,
        )

    def _pick_transaction_date(self) -> None:
        today = date.today()
        self._pick(
            self.transaction, "Transaction Date",
            lambda: self._base_config(today)
            .with_earliest_date(add_months(today, -3))
            .with_latest_date(add_months(today, 1))
            .with_excluded_weekdays(Weekday.SATURDAY, Weekday.SUNDAY),
            self.style,
        )


def main() -> None:
    setup_logger()
    logger.info("Starting date picker demo")
    DemoWindow().root.mainloop()


if __name__ == "__main__":
    main()
