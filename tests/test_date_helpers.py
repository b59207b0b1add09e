from datetime import date

from utils.date_helpers import format_display_date, parse_date, parse_display_date


def test_parse_date_accepts_iso_variants():
    assert parse_date("2024-03-05") == date(2024, 3, 5)
    assert parse_date("2024/03/05") == date(2024, 3, 5)
    assert parse_date("05-03-2024") is None
    assert parse_date("") is None


def test_format_display_date():
    assert format_display_date("2024-01-05") == "05/01/2024"
    assert format_display_date("2024-01-05", "MM/DD/YYYY") == "01/05/2024"
    assert format_display_date("not a date") == "not a date"


def test_parse_display_date_falls_back_to_iso():
    assert parse_display_date("05/01/2024", "DD/MM/YYYY") == date(2024, 1, 5)
    assert parse_display_date("2024-01-05", "DD/MM/YYYY") == date(2024, 1, 5)
    assert parse_display_date("31/31/2024", "DD/MM/YYYY") is None
