import pytest

from conftest import Counter
from services.app_state import AppState
from services.transaction_service import TransactionService
from database.transaction_dao import TransactionDAO
from utils.constants import DARK_MODE_KEY, DATE_FORMAT_KEY


def test_load_defaults(db):
    state = AppState.load(db)
    assert state.dark_mode is False
    assert state.date_format == "DD/MM/YYYY"
    assert state.month_filter == ""
    assert state.all_transactions() == ()


def test_dark_mode_persists_as_string(db):
    state = AppState.load(db)
    state.set_dark_mode(True)
    assert db.get_item(DARK_MODE_KEY) == "true"
    assert AppState.load(db).dark_mode is True

    state.set_dark_mode(False)
    assert db.get_item(DARK_MODE_KEY) == "false"
    assert AppState.load(db).dark_mode is False


def test_unknown_date_format_falls_back(db):
    db.set_item(DATE_FORMAT_KEY, "YY/MM")
    assert AppState.load(db).date_format == "DD/MM/YYYY"


def test_set_date_format(db):
    state = AppState.load(db)
    state.set_date_format("YYYY-MM-DD")
    assert AppState.load(db).date_format == "YYYY-MM-DD"
    with pytest.raises(ValueError):
        state.set_date_format("bogus")


def test_visible_transactions_respects_month_filter(db):
    svc = TransactionService(TransactionDAO(db), id_factory=Counter())
    state = AppState.load(db, svc)
    svc.create("10", "expense", "Food", "2024-03-01")
    svc.create("20", "expense", "Food", "2024-04-01")

    assert len(state.visible_transactions()) == 2
    state.month_filter = "2024-03"
    assert [t.amount for t in state.visible_transactions()] == [10.0]
