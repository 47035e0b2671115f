"""Field extraction from the recognized text of a Thai ID card."""

from dataclasses import replace
from typing import Dict, List, Optional, Tuple

from ..core.constants import (
    ADDRESS_LABELS,
    ADDRESS_LINE_SPAN,
    BIRTH_DATE_LABELS,
    EXPIRY_DATE_LABELS,
    ID_NUMBER_LABELS,
    ISSUE_DATE_LABELS,
    LAST_NAME_TOKEN_INDEX,
    MIN_NAME_TOKENS,
    NAME_LABELS,
    NAME_TOKEN_INDEX,
)
from ..core.types import CardRecord, LabelRule
from ..utils.log import LoggerMixin
from .regexes import parse_date, parse_id_card_number


def extract_id_card_number(line: str) -> Optional[str]:
    return parse_id_card_number(line)


def extract_name(line: str) -> Tuple[Optional[str], Optional[str]]:
    """
    Take the given name and last name from fixed token positions.

    The line is split on single spaces, so "Name : Mr. John Smith" gives
    ("John", "Smith"). Lines with fewer than five tokens give (None, None).
    Middle names or doubled spaces shift the positions; this is a known
    limitation of the card layout assumption.
    """
    parts = line.split(" ")
    if len(parts) >= MIN_NAME_TOKENS:
        return parts[NAME_TOKEN_INDEX], parts[LAST_NAME_TOKEN_INDEX]
    return None, None


def extract_date(line: str) -> Optional[str]:
    return parse_date(line)


def extract_address(lines: List[str]) -> Optional[str]:
    """Join the first address label line with the line that follows it."""
    for i, line in enumerate(lines):
        if any(label in line for label in ADDRESS_LABELS):
            block = lines[i:i + ADDRESS_LINE_SPAN]
            return " ".join(part.strip() for part in block)
    return None


def _id_rule(line: str, lines: List[str]) -> Dict[str, Optional[str]]:
    return {"id_card_number": extract_id_card_number(line)}


def _name_rule(line: str, lines: List[str]) -> Dict[str, Optional[str]]:
    name, last_name = extract_name(line)
    return {"name": name, "last_name": last_name}


def _birth_date_rule(line: str, lines: List[str]) -> Dict[str, Optional[str]]:
    return {"date_of_birth": extract_date(line)}


def _address_rule(line: str, lines: List[str]) -> Dict[str, Optional[str]]:
    return {"address": extract_address(lines)}


def _issue_date_rule(line: str, lines: List[str]) -> Dict[str, Optional[str]]:
    return {"date_of_issue": extract_date(line)}


def _expiry_date_rule(line: str, lines: List[str]) -> Dict[str, Optional[str]]:
    return {"date_of_expiry": extract_date(line)}


# Evaluated in order; only the first matching rule applies to a line
EXTRACTION_RULES: Tuple[LabelRule, ...] = (
    LabelRule("id_card_number", ID_NUMBER_LABELS, _id_rule),
    LabelRule("name", NAME_LABELS, _name_rule),
    LabelRule("date_of_birth", BIRTH_DATE_LABELS, _birth_date_rule),
    LabelRule("address", ADDRESS_LABELS, _address_rule),
    LabelRule("date_of_issue", ISSUE_DATE_LABELS, _issue_date_rule),
    LabelRule("date_of_expiry", EXPIRY_DATE_LABELS, _expiry_date_rule),
)


def match_rule(line: str) -> Optional[LabelRule]:
    """Return the first rule whose label occurs in the line."""
    for rule in EXTRACTION_RULES:
        if rule.matches(line):
            return rule
    return None


def extract(text: Optional[str]) -> CardRecord:
    """
    Parse OCR text into a CardRecord.

    Every line is trimmed and checked against EXTRACTION_RULES. A later
    matching line overwrites the value set by an earlier one. Fields whose
    label never appears stay None. Never raises.
    """
    record = CardRecord()
    if not text:
        return record

    lines = text.split("\n")
    for raw_line in lines:
        line = raw_line.strip()
        rule = match_rule(line)
        if rule is None:
            continue
        record = replace(record, **rule.extractor(line, lines))

    return record


class CardTextExtractor(LoggerMixin):
    """Runs extract() with structured logging around it."""

    def extract_card_record(self, text: Optional[str]) -> CardRecord:
        context = self.log_start(
            "Card text extraction", text_length=len(text) if text else 0
        )
        record = extract(text)
        found = [key for key, value in record.to_dict().items() if value]
        self.log_success(context, fields_found=found)
        return record


# Global singleton
card_extractor = CardTextExtractor()
