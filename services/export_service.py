"""CSV export of the full transaction list."""
import csv
import io
import logging
from datetime import date
from typing import Sequence

from models.transaction import Transaction
from utils.constants import DEFAULT_DATE_FORMAT
from utils.currency import format_plain
from utils.date_helpers import format_date, format_display_date, today

logger = logging.getLogger(__name__)

CSV_HEADER = ["Date", "Type", "Category", "Amount"]


def export_filename(on: date | None = None) -> str:
    """expenses_<YYYY-MM-DD>.csv for the given (default: today's) date."""
    return f"expenses_{format_date(on or today())}.csv"


def build_rows(
    transactions: Sequence[Transaction],
    date_format: str = DEFAULT_DATE_FORMAT,
) -> list[list[str]]:
    """Header plus one row per transaction, in the order given."""
    rows = [list(CSV_HEADER)]
    for tx in transactions:
        rows.append([
            format_display_date(tx.date, date_format),
            tx.type.upper(),
            tx.category,
            format_plain(tx.amount),
        ])
    return rows


def build_csv(
    transactions: Sequence[Transaction],
    date_format: str = DEFAULT_DATE_FORMAT,
) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerows(build_rows(transactions, date_format))
    return buf.getvalue()


def write_csv(
    path: str,
    transactions: Sequence[Transaction],
    date_format: str = DEFAULT_DATE_FORMAT,
) -> int:
    """Write the CSV file and return the number of transaction rows."""
    with open(path, "w", newline="", encoding="utf-8") as f:
        f.write(build_csv(transactions, date_format))
    logger.info("Exported %d transaction(s) to %s", len(transactions), path)
    return len(transactions)
