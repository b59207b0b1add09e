import pytest

from database.db_manager import DatabaseManager
from database.transaction_dao import TransactionDAO
from models.transaction import Transaction
from services.transaction_service import TransactionService


def make_tx(id=1, amount=100.0, type="expense", category="Food", date="2024-01-01", color="#ef4444"):
    return Transaction(id=id, amount=amount, type=type, category=category, date=date, color=color)


class Counter:
    """Deterministic id factory: 1, 2, 3, ..."""

    def __init__(self, start=1):
        self.next = start

    def __call__(self):
        value = self.next
        self.next += 1
        return value


@pytest.fixture
def db(tmp_path):
    manager = DatabaseManager(str(tmp_path / "ledger.db"))
    manager.initialize()
    yield manager
    manager.close()


@pytest.fixture
def tx_dao(db):
    return TransactionDAO(db)


@pytest.fixture
def tx_service(tx_dao):
    svc = TransactionService(tx_dao, id_factory=Counter())
    svc.load()
    return svc
