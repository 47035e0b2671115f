from dataclasses import dataclass, fields
from typing import Callable, Dict, List, Optional, Tuple

from .constants import CARD_FIELDS


@dataclass
class CardRecord:
    id_card_number: Optional[str] = None
    name: Optional[str] = None
    last_name: Optional[str] = None
    date_of_birth: Optional[str] = None
    address: Optional[str] = None
    date_of_issue: Optional[str] = None
    date_of_expiry: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        """Flat wire mapping; missing values become empty strings."""
        values = [getattr(self, f.name) or "" for f in fields(self)]
        return dict(zip(CARD_FIELDS, values))

    def is_empty(self) -> bool:
        return not any(getattr(self, f.name) for f in fields(self))


# (line, all lines) -> {attribute: value}
FieldExtractor = Callable[[str, List[str]], Dict[str, Optional[str]]]


@dataclass(frozen=True)
class LabelRule:
    field: str
    labels: Tuple[str, ...]
    extractor: FieldExtractor

    def matches(self, line: str) -> bool:
        return any(label in line for label in self.labels)
