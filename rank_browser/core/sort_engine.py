from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

from rank_browser.core.exceptions import InvalidSortDirectiveError
from rank_browser.core.record import FIELD_NAMES, Record

_NON_NUMERIC = re.compile(r"[^0-9.\-]+")

# Ordering between kinds of value: missing < numeric < text
_MISSING = 0
_NUMERIC = 1
_TEXT = 2

SortKey = Tuple[int, Any]


class SortDirection(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"
    NONE = "none"


@dataclass(frozen=True)
class SortDirective:
    """
    The user's chosen sort field and direction.

    `field` is None exactly when `direction` is NONE; anything else is a
    partial directive and is rejected.
    """

    field: Optional[str] = None
    direction: SortDirection = SortDirection.NONE

    def __post_init__(self) -> None:
        # Accept plain strings ("ascending") for direction
        if not isinstance(self.direction, SortDirection):
            try:
                object.__setattr__(self, "direction", SortDirection(self.direction))
            except ValueError as e:
                raise InvalidSortDirectiveError(
                    f"Unknown sort direction {self.direction!r}"
                ) from e

        if (self.field is None) != (self.direction is SortDirection.NONE):
            raise InvalidSortDirectiveError(
                f"Partial sort directive: field={self.field!r}, direction={self.direction.value!r}"
            )
        if self.field is not None and self.field not in FIELD_NAMES:
            raise InvalidSortDirectiveError(f"Unknown sort field {self.field!r}")

    @classmethod
    def none(cls) -> SortDirective:
        return cls()

    @property
    def is_none(self) -> bool:
        return self.field is None

    def to_dict(self) -> Dict[str, Any]:
        return {"field": self.field, "direction": self.direction.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> SortDirective:
        return cls(
            field=data.get("field"),
            direction=data.get("direction") or SortDirection.NONE,
        )


def sort_key(value: Any) -> SortKey:
    """
    Map a field value to a comparable key.

    - None and NaN are the lowest value
    - ints/floats compare as numbers
    - strings are reduced to digits, '.' and '-'; if that parses as a float the
      string compares as that number, otherwise it compares lexically

    Never raises, so every pair of values is comparable.
    """
    if value is None:
        return (_MISSING, 0)

    if isinstance(value, (int, float)):
        if isinstance(value, float) and math.isnan(value):
            return (_MISSING, 0)
        return (_NUMERIC, float(value))

    text = str(value)
    number = _parse_decorated_number(text)
    if number is not None:
        return (_NUMERIC, number)
    return (_TEXT, text)


def _parse_decorated_number(text: str) -> Optional[float]:
    stripped = _NON_NUMERIC.sub("", text)
    if not stripped:
        return None
    try:
        number = float(stripped)
    except ValueError:
        return None
    if math.isnan(number):
        return None
    return number


def sort_records(records: Iterable[Record], directive: SortDirective) -> List[Record]:
    """
    Return a new list of records ordered by `directive`.

    With no directive the input order is kept. Python's sort is stable for
    both `reverse=False` and `reverse=True`, so ties keep their input order in
    either direction.
    """
    rows = list(records)
    if directive.is_none:
        return rows

    field_name = directive.field
    return sorted(
        rows,
        key=lambda record: sort_key(record.get(field_name)),
        reverse=directive.direction is SortDirection.DESCENDING,
    )
