import json
import logging

from database.db_manager import DatabaseManager
from models.transaction import Transaction
from utils.constants import TRANSACTIONS_KEY

logger = logging.getLogger(__name__)


class TransactionDAO:
    """Reads and writes the whole transaction list as one JSON snapshot."""

    def __init__(self, db: DatabaseManager, key: str = TRANSACTIONS_KEY):
        self._db = db
        self._key = key

    def _row_to_model(self, row: dict) -> Transaction:
        return Transaction(
            id=int(row["id"]),
            amount=float(row["amount"]),
            type=str(row["type"]),
            category=str(row["category"]),
            date=str(row["date"]),
            color=str(row["color"]),
        )

    def load_all(self) -> list[Transaction]:
        """Return the persisted list, newest first.

        A missing, empty or unparsable slot reads as an empty list.
        """
        raw = self._db.get_item(self._key)
        if not raw:
            return []
        try:
            rows = json.loads(raw)
            if not isinstance(rows, list):
                raise TypeError(f"expected a list, got {type(rows).__name__}")
            return [self._row_to_model(r) for r in rows]
        except (ValueError, TypeError, KeyError) as e:
            logger.warning("Ignoring unreadable %r slot: %s", self._key, e)
            return []

    def save_all(self, transactions: list[Transaction]):
        """Overwrite the snapshot with the given list."""
        payload = json.dumps([t.to_dict() for t in transactions], ensure_ascii=False)
        self._db.set_item(self._key, payload)
