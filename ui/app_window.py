import customtkinter as ctk
from tkinter import filedialog

from services.app_state import AppState
from services.export_service import export_filename
from services.report_service import RecentRow
from ui.components.alert_banner import AlertBanner
from ui.components.transaction_form import TransactionForm
from ui.controller import LedgerController
from ui.tabs.dashboard_tab import DashboardTab
from ui.tabs.settings_tab import SettingsTab
from utils.constants import APP_NAME, APP_WIDTH, APP_HEIGHT


def appearance_for(dark_mode: bool) -> str:
    return "dark" if dark_mode else "light"


class AppWindow(ctk.CTk):
    def __init__(self, state: AppState, **kwargs):
        super().__init__(**kwargs)
        self._app_state = state
        self._controller = LedgerController(state, self)

        self.title(APP_NAME)
        self.minsize(APP_WIDTH, APP_HEIGHT)
        self.geometry(f"{APP_WIDTH}x{APP_HEIGHT}")

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)

        self._build_header()
        self._build_banner_area()
        self._build_form()
        self._build_tabs()

        self._controller.refresh()

    @property
    def controller(self) -> LedgerController:
        return self._controller

    # ── Layout ───────────────────────────────────────────────────────────────
    def _build_header(self):
        bar = ctk.CTkFrame(self, fg_color=("gray85", "gray15"), corner_radius=0, height=48)
        bar.grid(row=0, column=0, sticky="ew")
        bar.grid_propagate(False)

        ctk.CTkLabel(
            bar, text=APP_NAME, font=ctk.CTkFont(size=18, weight="bold"),
        ).pack(side="left", padx=16, pady=8)

        self._dark_var = ctk.BooleanVar(value=self._app_state.dark_mode)
        ctk.CTkSwitch(
            bar, text="Dark mode", variable=self._dark_var,
            command=lambda: self._controller.toggle_dark_mode(self._dark_var.get()),
        ).pack(side="right", padx=16)

    def _build_banner_area(self):
        self._banner_frame = ctk.CTkFrame(self, fg_color="transparent", height=0)
        self._banner_frame.grid(row=1, column=0, sticky="ew", padx=8)

    def _build_form(self):
        self._form = TransactionForm(
            self,
            on_submit=self._controller.add_transaction,
            date_format=self._app_state.date_format,
        )
        self._form.grid(row=2, column=0, sticky="ew", padx=16, pady=(8, 0))

    def _build_tabs(self):
        self._tabview = ctk.CTkTabview(self)
        self._tabview.grid(row=3, column=0, sticky="nsew", padx=8, pady=(0, 8))

        for tab_name in ("Dashboard", "Settings"):
            self._tabview.add(tab_name)
            self._tabview.tab(tab_name).grid_columnconfigure(0, weight=1)
            self._tabview.tab(tab_name).grid_rowconfigure(0, weight=1)

        self._dashboard_tab = DashboardTab(
            self._tabview.tab("Dashboard"),
            on_delete=self._controller.delete_transaction,
            on_month_change=self._controller.filter_by_month,
            on_export=self._export_csv,
        )
        self._dashboard_tab.grid(row=0, column=0, sticky="nsew")

        self._settings_tab = SettingsTab(
            self._tabview.tab("Settings"),
            date_format=self._app_state.date_format,
            on_date_format_change=self._change_date_format,
        )
        self._settings_tab.grid(row=0, column=0, sticky="nsew")

    # ── Callbacks ────────────────────────────────────────────────────────────
    def _export_csv(self):
        path = filedialog.asksaveasfilename(
            title="Export CSV",
            defaultextension=".csv",
            filetypes=[("CSV files", "*.csv")],
            initialfile=export_filename(),
        )
        if not path:
            return
        self._controller.export(path)

    def _change_date_format(self, fmt_key: str):
        self._controller.set_date_format(fmt_key)
        self._form.set_date_format(self._app_state.date_format)

    # ── LedgerView ───────────────────────────────────────────────────────────
    def render_summary(self, summary: dict):
        self._dashboard_tab.render_summary(summary)

    def render_list(self, rows: list[RecentRow]):
        self._dashboard_tab.render_list(rows)

    def set_months(self, months: list[str]):
        self._dashboard_tab.set_months(months)

    def render_chart(self, data: dict | None, dark_mode: bool):
        self._dashboard_tab.render_chart(data, dark_mode)

    def apply_theme(self, dark_mode: bool):
        ctk.set_appearance_mode(appearance_for(dark_mode))

    def notify(self, message: str, kind: str = "success"):
        AlertBanner(self._banner_frame, message=message, kind=kind).pack(fill="x", pady=2)
