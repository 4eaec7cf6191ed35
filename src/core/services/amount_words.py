"""
Amount-in-words and date formatting for printed invoices.

Uses the Indian numbering system (Crore, Lakh, Thousand, Hundred).
"""

from datetime import date

_ONES = [
    "",
    "One",
    "Two",
    "Three",
    "Four",
    "Five",
    "Six",
    "Seven",
    "Eight",
    "Nine",
    "Ten",
    "Eleven",
    "Twelve",
    "Thirteen",
    "Fourteen",
    "Fifteen",
    "Sixteen",
    "Seventeen",
    "Eighteen",
    "Nineteen",
]
_TENS = ["", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety"]

# (divisor, label), largest first
_SCALES = [
    (10_000_000, "Crore"),
    (100_000, "Lakh"),
    (1_000, "Thousand"),
]


def _below_thousand(n: int) -> list[str]:
    words = []
    if n > 99:
        words += [_ONES[n // 100], "Hundred"]
        n %= 100
    if n > 19:
        words.append(_TENS[n // 10])
        n %= 10
    if n > 0:
        words.append(_ONES[n])
    return words


def _integer_words(n: int) -> list[str]:
    words = []
    for divisor, label in _SCALES:
        if n >= divisor:
            # Crores above 999 keep recursing rather than overflow the table
            words += _integer_words(n // divisor) + [label]
            n %= divisor
    words += _below_thousand(n)
    return words


def number_to_words(amount: float) -> str:
    """
    Spell out a rupee amount.

    >>> number_to_words(1200.5)
    'One Thousand Two Hundred Rupees and Fifty Paise Only'
    """
    paise_total = round(abs(amount) * 100)
    rupees, paise = divmod(paise_total, 100)

    rupee_words = _integer_words(rupees) or ["Zero"]
    text = " ".join(rupee_words) + " Rupees"
    if paise:
        text += " and " + " ".join(_below_thousand(paise)) + " Paise"
    return text + " Only"


def format_long_date(value: date | None) -> str:
    """Format a date as ``13 December 2025``; empty for no date."""
    if value is None:
        return ""
    return f"{value.day} {value:%B %Y}"
