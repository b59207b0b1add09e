import logging
from typing import Sequence

from database.db_manager import DatabaseManager
from database.transaction_dao import TransactionDAO
from models.transaction import Transaction
from services.report_service import filter_by_month
from services.transaction_service import TransactionService
from utils.constants import DARK_MODE_KEY, DATE_FORMAT_KEY, DEFAULT_DATE_FORMAT
from utils.date_helpers import DATE_FORMAT_OPTIONS

logger = logging.getLogger(__name__)


class AppState:
    """Everything the window needs: the transaction store plus UI preferences.

    Built once at startup from the database and passed explicitly to the
    controller and the window.
    """

    def __init__(self, db: DatabaseManager, tx_service: TransactionService):
        self._db = db
        self.transactions = tx_service
        self.month_filter: str = ""
        self._dark_mode = False
        self._date_format = DEFAULT_DATE_FORMAT

    @classmethod
    def load(cls, db: DatabaseManager, tx_service: TransactionService | None = None) -> "AppState":
        state = cls(db, tx_service or TransactionService(TransactionDAO(db)))
        state.transactions.load()
        state._dark_mode = db.get_item(DARK_MODE_KEY) == "true"
        fmt = db.get_item(DATE_FORMAT_KEY, DEFAULT_DATE_FORMAT)
        state._date_format = fmt if fmt in DATE_FORMAT_OPTIONS else DEFAULT_DATE_FORMAT
        return state

    # ── Preferences ──────────────────────────────────────────────────────────

    @property
    def dark_mode(self) -> bool:
        return self._dark_mode

    def set_dark_mode(self, enabled: bool):
        self._dark_mode = bool(enabled)
        self._db.set_item(DARK_MODE_KEY, "true" if self._dark_mode else "false")
        logger.debug("Dark mode %s", "on" if self._dark_mode else "off")

    @property
    def date_format(self) -> str:
        return self._date_format

    def set_date_format(self, fmt_key: str):
        if fmt_key not in DATE_FORMAT_OPTIONS:
            raise ValueError(f"Unknown date format: {fmt_key}")
        self._date_format = fmt_key
        self._db.set_item(DATE_FORMAT_KEY, fmt_key)

    # ── Views ────────────────────────────────────────────────────────────────

    def all_transactions(self) -> tuple[Transaction, ...]:
        return self.transactions.all()

    def visible_transactions(self) -> Sequence[Transaction]:
        """All transactions narrowed by the current month filter."""
        return filter_by_month(self.transactions.all(), self.month_filter)
