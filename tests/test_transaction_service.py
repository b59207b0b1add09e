import pytest

from conftest import Counter, make_tx
from services.transaction_service import TransactionService
from utils.date_helpers import today_str


def test_create_prepends_and_persists(tx_service, tx_dao):
    first = tx_service.create("5000", "income", "Salary", "2024-01-05")
    second = tx_service.create("1200", "expense", "Food", "2024-01-06")

    assert tx_service.all() == (second, first)
    assert tx_dao.load_all() == [second, first]


def test_create_resolves_color_and_defaults(tx_service):
    tx = tx_service.create(" 42.5 ", "expense", "Pets", "")
    assert tx.amount == 42.5
    assert tx.color == "#6b7280"
    assert tx.date == today_str()
    assert tx.id == 1


def test_newest_first_is_insertion_order_not_date_order(tx_service):
    tx_service.create("1", "expense", "Food", "2024-05-01")
    tx_service.create("2", "expense", "Food", "2023-01-01")
    assert [t.date for t in tx_service.all()] == ["2023-01-01", "2024-05-01"]


@pytest.mark.parametrize("amount", ["0", "-5", "abc", "", None, "nan", "inf", "1_000", "1e3", "12.5.1"])
def test_invalid_amount_is_rejected_without_mutation(tx_service, tx_dao, amount):
    tx_service.create("10", "expense", "Food")
    with pytest.raises(ValueError, match="valid amount"):
        tx_service.create(amount, "expense", "Food")
    assert len(tx_service.all()) == 1
    assert len(tx_dao.load_all()) == 1


@pytest.mark.parametrize("amount, expected", [("12.50", 12.5), (".5", 0.5), (" 7 ", 7.0), ("+3", 3.0)])
def test_plain_decimal_amounts_are_accepted(tx_service, amount, expected):
    assert tx_service.create(amount, "income", "Salary").amount == expected


def test_invalid_type_and_date_are_rejected(tx_service):
    with pytest.raises(ValueError):
        tx_service.create("10", "transfer", "Food")
    with pytest.raises(ValueError, match="Invalid date"):
        tx_service.create("10", "expense", "Food", "yesterday")
    assert tx_service.all() == ()


def test_remove_drops_all_matching_ids(tx_service, tx_dao):
    tx_service.add(make_tx(id=5, amount=1))
    tx_service.add(make_tx(id=6, amount=2))
    tx_service.add(make_tx(id=5, amount=3))

    assert tx_service.remove(5) == 2
    assert [t.id for t in tx_service.all()] == [6]
    assert [t.id for t in tx_dao.load_all()] == [6]


def test_remove_unknown_id_keeps_content_and_order(tx_service, tx_dao):
    a = tx_service.add(make_tx(id=1))
    b = tx_service.add(make_tx(id=2))
    assert tx_service.remove(99) == 0
    assert tx_service.all() == (b, a)
    assert tx_dao.load_all() == [b, a]


def test_load_restores_persisted_sequence(tx_dao):
    writer = TransactionService(tx_dao, id_factory=Counter(100))
    writer.create("10", "income", "Salary", "2024-02-01")
    writer.create("3", "expense", "Travel", "2024-02-02")

    reader = TransactionService(tx_dao)
    assert reader.load() == writer.all()


def test_all_is_read_only_view(tx_service):
    tx_service.create("10", "expense", "Food")
    view = tx_service.all()
    assert isinstance(view, tuple)
    with pytest.raises(AttributeError):
        view[0].amount = 1
