import logging
from typing import Protocol

from models.transaction import Transaction
from services import export_service, report_service
from services.app_state import AppState

logger = logging.getLogger(__name__)


class LedgerView(Protocol):
    """What the controller draws on. AppWindow implements it."""

    def render_summary(self, summary: dict) -> None: ...
    def render_list(self, rows: list[report_service.RecentRow]) -> None: ...
    def set_months(self, months: list[str]) -> None: ...
    def render_chart(self, data: dict | None, dark_mode: bool) -> None: ...
    def apply_theme(self, dark_mode: bool) -> None: ...
    def notify(self, message: str, kind: str = "success") -> None: ...


class LedgerController:
    """User actions. Each mutating action redraws everything synchronously."""

    def __init__(self, state: AppState, view: LedgerView):
        self._state = state
        self._view = view

    @property
    def state(self) -> AppState:
        return self._state

    # ── Actions ──────────────────────────────────────────────────────────────

    def add_transaction(self, amount, type_: str, category: str, date: str = "") -> Transaction | None:
        try:
            tx = self._state.transactions.create(amount, type_, category, date)
        except ValueError as e:
            logger.info("Rejected transaction input: %s", e)
            self._view.notify(str(e), "error")
            return None
        self._view.notify("Transaction added successfully!", "success")
        self.refresh()
        return tx

    def delete_transaction(self, tx_id: int):
        self._state.transactions.remove(tx_id)
        self.refresh()
        self._view.notify("Transaction deleted!", "warning")

    def filter_by_month(self, month: str | None):
        self._state.month_filter = (month or "").strip()
        self.render_list()

    def export(self, path: str) -> bool:
        try:
            export_service.write_csv(
                path, self._state.all_transactions(), self._state.date_format
            )
        except OSError as e:
            logger.error("Export to %s failed: %s", path, e)
            self._view.notify(f"Export failed: {e}", "error")
            return False
        self._view.notify("Data exported successfully!", "success")
        return True

    def toggle_dark_mode(self, enabled: bool):
        self._state.set_dark_mode(enabled)
        self._view.apply_theme(self._state.dark_mode)
        self.render_chart()

    def set_date_format(self, fmt_key: str):
        try:
            self._state.set_date_format(fmt_key)
        except ValueError as e:
            self._view.notify(str(e), "error")
            return
        self.render_list()

    # ── Derive and redraw ────────────────────────────────────────────────────

    def refresh(self):
        self._view.set_months(report_service.available_months(self._state.all_transactions()))
        self.render_summary()
        self.render_list()
        self.render_chart()

    def render_summary(self):
        self._view.render_summary(report_service.get_summary(self._state.all_transactions()))

    def render_list(self):
        rows = report_service.recent_rows(
            self._state.visible_transactions(),
            date_format=self._state.date_format,
        )
        self._view.render_list(rows)

    def render_chart(self):
        totals = report_service.expense_by_category(self._state.all_transactions())
        self._view.render_chart(report_service.chart_data(totals), self._state.dark_mode)
