"""Regex patterns for Thai ID card text extraction."""

import re
from typing import Optional


# Pattern: d dddd ddddd dd d, as printed on the card
# ASCII-only so \d never matches Thai digits
ID_CARD_NUMBER_PATTERN = re.compile(r'\d{1} \d{4} \d{5} \d{2} \d{1}', re.ASCII)

# Pattern: day, month word, year, e.g. "5 January 1990"
DATE_PATTERN = re.compile(r'\d{1,2} \w+ \d{4}', re.ASCII)


def parse_id_card_number(text: str) -> Optional[str]:
    """
    Parse a 13-digit citizen ID from text using regex.

    Args:
        text: Text containing a spaced ID card number

    Returns:
        Digits with the separating spaces removed, or None if no match

    Examples:
        >>> parse_id_card_number("Identification Number 1 2345 67890 12 3")
        '1234567890123'
        >>> parse_id_card_number("1234567890123") is None
        True
    """
    match = ID_CARD_NUMBER_PATTERN.search(text)
    if match:
        return match.group(0).replace(" ", "")
    return None


def parse_date(text: str) -> Optional[str]:
    """
    Parse the first "<day> <month> <year>" date in text.

    Examples:
        >>> parse_date("เกิดวันที่ 5 January 1990")
        '5 January 1990'
    """
    match = DATE_PATTERN.search(text)
    return match.group(0) if match else None
