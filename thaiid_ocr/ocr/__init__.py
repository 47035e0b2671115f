"""OCR package for field extraction from Thai ID card text."""

from .extract import EXTRACTION_RULES, CardTextExtractor, card_extractor, extract
from .regexes import (
    DATE_PATTERN,
    ID_CARD_NUMBER_PATTERN,
    parse_date,
    parse_id_card_number,
)

__all__ = [
    "extract",
    "EXTRACTION_RULES",
    "CardTextExtractor",
    "card_extractor",
    "parse_id_card_number",
    "parse_date",
    "ID_CARD_NUMBER_PATTERN",
    "DATE_PATTERN",
]
