import tkinter as tk
from datetime import date
from tkinter import ttk

import customtkinter as ctk
from tkcalendar import Calendar

from utils.constants import DEFAULT_DATE_FORMAT
from utils.date_helpers import format_date, format_display_date, parse_display_date


class DatePickerWidget(ctk.CTkFrame):
    """Entry in the display format plus a calendar popup button.

    Blank is a valid value: the ledger fills in today's date.
    .get() returns YYYY-MM-DD, '' when blank, or the raw text when unparsable
    so the service can reject it.
    """

    def __init__(self, master, date_format: str = DEFAULT_DATE_FORMAT, **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)
        self.grid_columnconfigure(0, weight=1)

        self._date_format = date_format
        self._popup: ctk.CTkToplevel | None = None
        self._var = tk.StringVar(value="")

        self._entry = ctk.CTkEntry(self, textvariable=self._var, width=120)
        self._entry.grid(row=0, column=0, sticky="ew")
        self._entry.bind("<FocusOut>", self._on_focus_out)

        ctk.CTkButton(
            self, text="📅", width=32, command=self._toggle_popup
        ).grid(row=0, column=1, padx=(4, 0))

    def get(self) -> str:
        raw = self._var.get().strip()
        if not raw:
            return ""
        d = parse_display_date(raw, self._date_format)
        return format_date(d) if d else raw

    def clear(self):
        self._var.set("")
        self._reset_border()

    def set_date_format(self, fmt_key: str):
        current = self.get()
        self._date_format = fmt_key
        if current:
            self._var.set(format_display_date(current, fmt_key))

    def _on_focus_out(self, _event=None):
        raw = self._var.get().strip()
        if not raw:
            self._reset_border()
            return
        d = parse_display_date(raw, self._date_format)
        if d:
            self._var.set(format_display_date(format_date(d), self._date_format))
            self._reset_border()
        else:
            self._entry.configure(border_color="#ef4444")

    def _reset_border(self):
        self._entry.configure(border_color=("gray65", "gray35"))

    def _toggle_popup(self):
        if self._popup and self._popup.winfo_exists():
            self._popup.destroy()
            self._popup = None
            return

        popup = ctk.CTkToplevel(self)
        popup.overrideredirect(True)
        popup.resizable(False, False)
        self._popup = popup

        if ctk.get_appearance_mode() == "Dark":
            bg, fg = "#2b2b2b", "#ffffff"
        else:
            bg, fg = "#ffffff", "#000000"
        style = ttk.Style(popup)
        style.theme_use("default")
        style.configure("Calendar.Treeview", background=bg, foreground=fg, fieldbackground=bg)

        current = parse_display_date(self._var.get().strip(), self._date_format) or date.today()
        cal = Calendar(
            popup,
            selectmode="day",
            year=current.year,
            month=current.month,
            day=current.day,
            date_pattern="yyyy-mm-dd",
            background=bg,
            foreground=fg,
            headersbackground=bg,
            headersforeground=fg,
            selectbackground="#3b82f6",
            weekendbackground=bg,
            weekendforeground=fg,
            othermonthforeground="gray60",
            bordercolor=bg,
        )
        cal.pack(padx=4, pady=4)
        cal.bind("<<CalendarSelected>>", lambda e: self._on_date_selected(cal))

        self._entry.update_idletasks()
        x = self._entry.winfo_rootx()
        y = self._entry.winfo_rooty() + self._entry.winfo_height() + 2
        popup.geometry(f"+{x}+{y}")

    def _on_date_selected(self, cal: Calendar):
        # Calendar hands back yyyy-mm-dd
        self._var.set(format_display_date(cal.get_date(), self._date_format))
        self._reset_border()
        if self._popup:
            self._popup.destroy()
            self._popup = None
