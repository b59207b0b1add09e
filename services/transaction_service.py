import logging
import math
import re
import time

from database.transaction_dao import TransactionDAO
from models.category import color_for
from models.transaction import Transaction
from utils.constants import TRANSACTION_TYPES
from utils.date_helpers import parse_date, format_date, today_str

logger = logging.getLogger(__name__)

_AMOUNT_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)")


def _now_ms() -> int:
    return int(time.time() * 1000)


class TransactionService:
    """Owns the in-memory transaction list (newest first) and its persisted copy."""

    def __init__(self, tx_dao: TransactionDAO, id_factory=_now_ms):
        self._dao = tx_dao
        self._id_factory = id_factory
        self._transactions: list[Transaction] = []

    def load(self) -> tuple[Transaction, ...]:
        self._transactions = self._dao.load_all()
        logger.info("Loaded %d transaction(s)", len(self._transactions))
        return self.all()

    def all(self) -> tuple[Transaction, ...]:
        return tuple(self._transactions)

    def add(self, tx: Transaction) -> Transaction:
        """Prepend and persist. Amount validation is the caller's job."""
        self._transactions.insert(0, tx)
        self._dao.save_all(self._transactions)
        logger.debug("Added transaction %s (%s %s)", tx.id, tx.type, tx.amount)
        return tx

    def remove(self, tx_id: int) -> int:
        """Drop every transaction with this id and persist. Returns the number removed."""
        before = len(self._transactions)
        self._transactions = [t for t in self._transactions if t.id != tx_id]
        self._dao.save_all(self._transactions)
        removed = before - len(self._transactions)
        if removed:
            logger.debug("Removed %d transaction(s) with id %s", removed, tx_id)
        else:
            logger.debug("No transaction with id %s", tx_id)
        return removed

    def create(
        self,
        amount,
        type_: str,
        category: str,
        date: str = "",
    ) -> Transaction:
        """Validate raw form input, build the record and add it."""
        value = self._parse_amount(amount)
        if type_ not in TRANSACTION_TYPES:
            raise ValueError(f"Invalid type: {type_}")
        date_str = self._normalize_date(date)
        tx = Transaction(
            id=self._id_factory(),
            amount=value,
            type=type_,
            category=category,
            date=date_str,
            color=color_for(category),
        )
        return self.add(tx)

    def _parse_amount(self, amount) -> float:
        """Plain decimal notation only: no digit separators or exponents."""
        text = str(amount).strip() if amount is not None else ""
        if not _AMOUNT_RE.fullmatch(text):
            raise ValueError("Please enter valid amount")
        value = float(text)
        if not math.isfinite(value) or value <= 0:
            raise ValueError("Please enter valid amount")
        return value

    def _normalize_date(self, date: str) -> str:
        date = (date or "").strip()
        if not date:
            return today_str()
        d = parse_date(date)
        if d is None:
            raise ValueError("Invalid date.")
        return format_date(d)
