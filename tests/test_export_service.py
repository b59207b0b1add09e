from datetime import date

from conftest import make_tx
from services import export_service


def test_empty_export_is_header_only():
    assert export_service.build_csv([]) == "Date,Type,Category,Amount\n"


def test_rows_follow_sequence_order():
    txs = [
        make_tx(id=2, amount=1200, type="expense", category="Food", date="2024-01-06"),
        make_tx(id=1, amount=5000.5, type="income", category="Salary", date="2024-01-05"),
    ]
    assert export_service.build_csv(txs).splitlines() == [
        "Date,Type,Category,Amount",
        "06/01/2024,EXPENSE,Food,1200",
        "05/01/2024,INCOME,Salary,5000.5",
    ]


def test_delimiter_in_category_is_quoted():
    (_, row) = export_service.build_rows([make_tx(category="Food, drinks")])
    assert row[2] == "Food, drinks"
    assert export_service.build_csv([make_tx(category="Food, drinks")]).splitlines()[1] == \
        '01/01/2024,EXPENSE,"Food, drinks",100'


def test_export_filename():
    assert export_service.export_filename(date(2024, 3, 9)) == "expenses_2024-03-09.csv"


def test_write_csv(tmp_path):
    path = tmp_path / "out.csv"
    count = export_service.write_csv(str(path), [make_tx()], date_format="YYYY-MM-DD")
    assert count == 1
    assert path.read_text(encoding="utf-8") == "Date,Type,Category,Amount\n2024-01-01,EXPENSE,Food,100\n"
