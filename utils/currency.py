from utils.constants import CURRENCY_SYMBOL


def _group_indian(digits: str) -> str:
    """Group an integer digit string as 12,34,567 (last three, then pairs)."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_number(amount: float) -> str:
    """en-IN style number: '1,00,000', '1,234.5', at most 3 fraction digits."""
    sign = "-" if amount < 0 else ""
    text = f"{abs(amount):.3f}".rstrip("0").rstrip(".")
    whole, _, frac = text.partition(".")
    grouped = _group_indian(whole)
    return f"{sign}{grouped}.{frac}" if frac else f"{sign}{grouped}"


def format_currency(amount: float, symbol: str = CURRENCY_SYMBOL) -> str:
    """Format a float as currency string, e.g. '₹1,23,456.5' or '₹-1,200'."""
    return f"{symbol}{format_number(amount)}"


def format_signed(amount: float, type_: str, symbol: str = CURRENCY_SYMBOL) -> str:
    """'+' for income, '-' for expense."""
    sign = "+" if type_ == "income" else "-"
    return f"{sign}{symbol}{format_number(abs(amount))}"


def format_plain(amount: float) -> str:
    """Bare number for CSV: 5000, 12.5."""
    if float(amount).is_integer():
        return str(int(amount))
    return repr(float(amount))
