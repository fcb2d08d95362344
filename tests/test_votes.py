import logging
from decimal import Decimal

from election_helpers.votes import parse_votes


def test_parse_votes_thousands_conventions():
    assert parse_votes("1,234,567") == 1234567
    assert parse_votes("1.234.567") == 1234567
    assert parse_votes("1 234 567") == 1234567
    assert parse_votes("12,345") == 12345


def test_parse_votes_indian_grouping_and_abbreviations():
    assert parse_votes("12,34,567") == 1234567
    assert parse_votes("2.5 lakh") == 250000
    assert parse_votes("1.5 crore") == 15000000
    assert parse_votes("1.2M") == 1200000
    assert parse_votes("45K") == 45000
    assert parse_votes("3b") == 3000000000


def test_parse_votes_decimals_are_floored():
    assert parse_votes("1.234,56") == 1234
    assert parse_votes("1,234.56") == 1234
    assert parse_votes(12.9) == 12
    assert parse_votes(Decimal("3.7")) == 3


def test_parse_votes_transliterates_digit_scripts():
    assert parse_votes("١٢٣٤٥٦٧") == 1234567
    assert parse_votes("۱۲۳") == 123
    assert parse_votes("१२३४") == 1234


def test_parse_votes_unicode_spaces():
    assert parse_votes("\u00a01\u00a0234\u2009567 ") == 1234567


def test_parse_votes_missing_values_are_zero():
    for value in (None, "", "   ", "N/A", "na", "NULL", "--", "-", "TBD", "pending", "???", "..."):
        assert parse_votes(value) == 0, value


def test_parse_votes_discards_sign():
    assert parse_votes(-50) == 50
    assert parse_votes("-50") == 50
    assert parse_votes(-12.5) == 12


def test_parse_votes_percentages_are_not_counts():
    assert parse_votes("45%") == 0
    assert parse_votes("12.5 %") == 0


def test_parse_votes_non_finite_numbers(caplog):
    logger = logging.getLogger("test.votes.non_finite")
    with caplog.at_level(logging.WARNING, logger="test.votes.non_finite"):
        assert parse_votes(float("nan"), logger=logger) == 0
        assert parse_votes(float("inf"), logger=logger) == 0
        assert parse_votes(Decimal("Infinity"), logger=logger) == 0
    assert "not finite" in caplog.text


def test_parse_votes_warns_on_text_without_digits(caplog):
    logger = logging.getLogger("test.votes.garbage")
    with caplog.at_level(logging.WARNING, logger="test.votes.garbage"):
        assert parse_votes("abc", logger=logger) == 0
    assert "no digits" in caplog.text


def test_parse_votes_is_total():
    samples = [
        "1,2,3,4",
        ",,,",
        "1..2",
        "--5--",
        "k",
        "12e5",
        "１２３",
        "9" * 40,
        "9" * 5000,
        "12," * 2500 + "345",
        True,
        False,
        0,
        -0.0,
        "  42  ",
    ]
    for value in samples:
        result = parse_votes(value)
        assert isinstance(result, int), value
        assert result >= 0, value


def test_parse_votes_very_long_digit_runs():
    assert parse_votes("9" * 5000) == 10**5000 - 1
    assert parse_votes("1," + ",".join(["000"] * 1500)) == 10**4500
    assert parse_votes("1.234.567" + ".000" * 1500) == 1234567 * 10**4500

    result = parse_votes("1" * 4301 + ".5")
    assert isinstance(result, int)
    assert result % 10 == 5

    assert parse_votes(Decimal("-" + "1" * 40)) == int("1" * 40)
