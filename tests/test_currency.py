from utils.currency import format_currency, format_number, format_plain, format_signed


def test_format_number_uses_indian_grouping():
    assert format_number(999) == "999"
    assert format_number(5000) == "5,000"
    assert format_number(100000) == "1,00,000"
    assert format_number(12345678) == "1,23,45,678"


def test_format_number_drops_trailing_zeros_and_caps_fraction():
    assert format_number(0) == "0"
    assert format_number(1200.50) == "1,200.5"
    assert format_number(12.3456) == "12.346"


def test_format_currency_prefixes_symbol():
    assert format_currency(3800) == "₹3,800"
    assert format_currency(-1200) == "₹-1,200"
    assert format_currency(10, symbol="$") == "$10"


def test_format_signed_follows_type():
    assert format_signed(5000, "income") == "+₹5,000"
    assert format_signed(1200, "expense") == "-₹1,200"


def test_format_plain():
    assert format_plain(5000.0) == "5000"
    assert format_plain(12.5) == "12.5"
