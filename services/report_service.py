"""Derived figures for the dashboard.

Everything here is a pure function of a transaction sequence: no state,
no persistence, recomputed from scratch on every redraw.
"""
from dataclasses import dataclass
from typing import Iterable, Sequence

from models.category import CATEGORY_PALETTE
from models.transaction import Transaction
from utils.constants import RECENT_LIMIT, DEFAULT_DATE_FORMAT
from utils.currency import format_currency, format_signed
from utils.date_helpers import format_display_date


def total_income(seq: Iterable[Transaction]) -> float:
    return sum((t.amount for t in seq if t.type == "income"), 0.0)


def total_expense(seq: Iterable[Transaction]) -> float:
    return sum((t.amount for t in seq if t.type == "expense"), 0.0)


def balance(seq: Sequence[Transaction]) -> float:
    """Income minus expense; may be negative."""
    return total_income(seq) - total_expense(seq)


def expense_by_category(seq: Iterable[Transaction]) -> dict[str, float]:
    """Sum of expense amounts per category label, in first-seen order.

    Categories without expenses are absent rather than zero.
    """
    totals: dict[str, float] = {}
    for t in seq:
        if t.type == "expense":
            totals[t.category] = totals.get(t.category, 0.0) + t.amount
    return totals


def filter_by_month(seq: Sequence[Transaction], month: str | None) -> Sequence[Transaction]:
    """Transactions whose date starts with `month` (e.g. '2024-03').

    Plain string-prefix match; an empty month returns `seq` unchanged.
    """
    if not month:
        return seq
    return [t for t in seq if t.date.startswith(month)]


def available_months(seq: Iterable[Transaction]) -> list[str]:
    """Distinct YYYY-MM prefixes present in `seq`, newest first."""
    return sorted({t.date[:7] for t in seq if len(t.date) >= 7}, reverse=True)


def get_summary(seq: Sequence[Transaction]) -> dict:
    income = total_income(seq)
    expense = total_expense(seq)
    return {"income": income, "expense": expense, "balance": income - expense}


@dataclass(frozen=True)
class RecentRow:
    id: int
    type: str
    date_text: str
    category: str
    amount_text: str
    color: str


def recent_rows(
    seq: Sequence[Transaction],
    limit: int = RECENT_LIMIT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> list[RecentRow]:
    """Display rows for the first `limit` transactions (seq is newest first)."""
    return [
        RecentRow(
            id=t.id,
            type=t.type,
            date_text=format_display_date(t.date, date_format),
            category=t.category,
            amount_text=format_signed(t.amount, t.type),
            color=t.color,
        )
        for t in list(seq)[:limit]
    ]


def chart_data(totals: dict[str, float]) -> dict | None:
    """Donut dataset {labels, values, colors}, or None when there is nothing to draw.

    Colors are assigned by position from the category palette and wrap around
    when there are more categories than palette entries.
    """
    if not totals:
        return None
    labels = list(totals.keys())
    return {
        "labels": labels,
        "values": [totals[label] for label in labels],
        "colors": [CATEGORY_PALETTE[i % len(CATEGORY_PALETTE)] for i in range(len(labels))],
    }


def tooltip_label(label: str, value: float, total: float) -> str:
    """e.g. 'Food: ₹1,200 (40.0%)'."""
    pct = (value / total * 100) if total else 0.0
    return f"{label}: {format_currency(value)} ({pct:.1f}%)"
