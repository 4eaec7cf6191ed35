"""Unit tests for amount-in-words and long date formatting."""

from datetime import date

import pytest

from src.core.services.amount_words import format_long_date, number_to_words


@pytest.mark.parametrize(
    "amount,expected",
    [
        (0, "Zero Rupees Only"),
        (1, "One Rupees Only"),
        (15, "Fifteen Rupees Only"),
        (105, "One Hundred Five Rupees Only"),
        (1200.5, "One Thousand Two Hundred Rupees and Fifty Paise Only"),
        (3700, "Three Thousand Seven Hundred Rupees Only"),
        (125000, "One Lakh Twenty Five Thousand Rupees Only"),
        (10000000, "One Crore Rupees Only"),
        (0.07, "Zero Rupees and Seven Paise Only"),
    ],
)
def test_number_to_words(amount, expected):
    assert number_to_words(amount) == expected


def test_large_crores_recurse():
    assert number_to_words(1_000_000_000_0) == "One Thousand Crore Rupees Only"


def test_paise_rounding():
    assert number_to_words(99.999) == "One Hundred Rupees Only"


def test_format_long_date():
    assert format_long_date(date(2025, 12, 13)) == "13 December 2025"
    assert format_long_date(date(2026, 1, 2)) == "2 January 2026"


def test_format_long_date_none():
    assert format_long_date(None) == ""
