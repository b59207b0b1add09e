import json

from conftest import make_tx
from utils.constants import TRANSACTIONS_KEY


def test_missing_slot_loads_empty(tx_dao):
    assert tx_dao.load_all() == []


def test_empty_and_corrupt_slots_load_empty(db, tx_dao):
    for raw in ["", "not json", "{\"a\": 1}", "[1, 2]", "[{\"id\": 1}]", "null"]:
        db.set_item(TRANSACTIONS_KEY, raw)
        assert tx_dao.load_all() == []


def test_round_trip_keeps_every_field(tx_dao):
    txs = [
        make_tx(id=1700000000002, amount=12.5, category="Café, bar", color="#6b7280"),
        make_tx(id=1700000000001, amount=5000, type="income", category="Salary",
                date="2024-01-05", color="#3b82f6"),
    ]
    tx_dao.save_all(txs)
    assert tx_dao.load_all() == txs


def test_snapshot_is_a_json_list(db, tx_dao):
    tx_dao.save_all([make_tx(id=7)])
    rows = json.loads(db.get_item(TRANSACTIONS_KEY))
    assert rows == [{
        "id": 7, "amount": 100.0, "type": "expense", "category": "Food",
        "date": "2024-01-01", "color": "#ef4444",
    }]


def test_save_overwrites_previous_snapshot(tx_dao):
    tx_dao.save_all([make_tx(id=1), make_tx(id=2)])
    tx_dao.save_all([make_tx(id=3)])
    assert [t.id for t in tx_dao.load_all()] == [3]
