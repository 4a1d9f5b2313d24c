from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional, Tuple, Union

Value = Union[str, int, float, None]

# attribute -> key used in the source document
SOURCE_KEYS: Dict[str, str] = {
    "rank": "college_rank",
    "name": "college_name",
    "location": "college_location",
    "course": "college_course",
    "fees": "college_fees",
    "placement": "college_placement",
    "review_rating": "college_review_rating",
    "rating": "college_rating",
}


@dataclass(frozen=True)
class Record:
    """
    One row of the ranking table.

    Fields:

    - rank: ordinal rank, also used as the identifier
    - name: display name, the only field the text filter looks at
    - location / course: free text
    - fees / placement: numbers or decorated strings ("₹1,20,000", "$500")
    - review_rating / rating: 0-10 scores

    Any field can be None when the source omits it. Values are stored exactly
    as they came in; numeric coercion for sorting lives in sort_engine.
    """

    rank: Value = None
    name: Optional[str] = None
    location: Optional[str] = None
    course: Optional[str] = None
    fees: Value = None
    placement: Value = None
    review_rating: Value = None
    rating: Value = None

    def get(self, field_name: str) -> Value:
        return getattr(self, field_name, None)

    def to_dict(self) -> Dict[str, Any]:
        return {SOURCE_KEYS[f.name]: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Record:
        """
        Build a Record from a source object. Accepts both the document keys
        ("college_fees") and the bare attribute names ("fees").
        """
        values: Dict[str, Value] = {}
        for attr, key in SOURCE_KEYS.items():
            raw = data.get(key, data.get(attr))
            values[attr] = _clean_value(raw)

        # pandas widens integer columns with gaps to float
        rank = values["rank"]
        if isinstance(rank, float) and rank.is_integer():
            values["rank"] = int(rank)

        return cls(**values)


def _clean_value(value: Any) -> Value:
    if value is None:
        return None
    # numpy scalars coming out of a DataFrame
    if hasattr(value, "item") and not isinstance(value, (str, bytes)):
        value = value.item()
    if isinstance(value, float) and math.isnan(value):
        return None
    if isinstance(value, (str, int, float)):
        return value
    return str(value)


FIELD_NAMES: Tuple[str, ...] = tuple(f.name for f in fields(Record))
