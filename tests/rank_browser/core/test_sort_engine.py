from __future__ import annotations

import pytest

from rank_browser.core.exceptions import InvalidSortDirectiveError
from rank_browser.core.record import Record
from rank_browser.core.sort_engine import SortDirection, SortDirective, sort_key, sort_records


def _asc(field: str) -> SortDirective:
    return SortDirective(field=field, direction=SortDirection.ASCENDING)


def _desc(field: str) -> SortDirective:
    return SortDirective(field=field, direction=SortDirection.DESCENDING)


def test_mixed_decorated_and_plain_fees_sort_numerically():
    records = [
        Record(rank=1, name="A", fees="$1,000"),
        Record(rank=2, name="B", fees=500),
        Record(rank=3, name="C", fees="$500"),
    ]

    result = sort_records(records, _asc("fees"))

    assert [r.fees for r in result] == [500, "$500", "$1,000"]

    # 500 and "$500" share a key; ties keep input order
    reordered = [records[0], records[2], records[1]]
    assert [r.fees for r in sort_records(reordered, _asc("fees"))] == ["$500", 500, "$1,000"]


def test_rupee_grouping_is_coerced():
    records = [
        Record(rank=1, fees="₹1,20,000"),
        Record(rank=2, fees="₹95,000"),
        Record(rank=3, fees="₹2,00,500"),
    ]

    result = sort_records(records, _desc("fees"))

    assert [r.rank for r in result] == [3, 1, 2]


def test_no_directive_returns_input_order_as_new_list():
    records = [Record(rank=3), Record(rank=1), Record(rank=2)]

    result = sort_records(records, SortDirective.none())

    assert result == records
    assert result is not records


def test_sort_is_stable_in_both_directions():
    records = [
        Record(rank=1, name="first", rating=8.0),
        Record(rank=2, name="second", rating=9.0),
        Record(rank=3, name="third", rating=8.0),
        Record(rank=4, name="fourth", rating=9.0),
    ]

    asc = sort_records(records, _asc("rating"))
    desc = sort_records(records, _desc("rating"))

    assert [r.name for r in asc] == ["first", "third", "second", "fourth"]
    assert [r.name for r in desc] == ["second", "fourth", "first", "third"]


def test_sorting_twice_gives_identical_output():
    records = [Record(rank=i, placement=f"₹{(i * 37) % 11},00,000") for i in range(1, 12)]
    directive = _desc("placement")

    assert sort_records(records, directive) == sort_records(records, directive)


def test_missing_values_are_lowest():
    records = [
        Record(rank=1, placement="₹9,00,000"),
        Record(rank=2, placement=None),
        Record(rank=3, placement="₹4,00,000"),
        Record(rank=4, placement=float("nan")),
    ]

    asc = sort_records(records, _asc("placement"))
    desc = sort_records(records, _desc("placement"))

    assert [r.rank for r in asc] == [2, 4, 3, 1]
    assert [r.rank for r in desc] == [1, 3, 2, 4]


def test_non_numeric_strings_compare_lexically_after_numbers():
    records = [
        Record(rank=1, fees="N/A"),
        Record(rank=2, fees="₹50,000"),
        Record(rank=3, fees="Contact college"),
        Record(rank=4, fees=None),
    ]

    result = sort_records(records, _asc("fees"))

    assert [r.fees for r in result] == [None, "₹50,000", "Contact college", "N/A"]


def test_sort_key_is_total():
    assert sort_key(None) < sort_key(-1e9) < sort_key("abc")
    assert sort_key("1-2") == (2, "1-2")
    assert sort_key(".") == (2, ".")
    assert sort_key("-3.5 LPA") == (1, -3.5)


def test_sort_does_not_mutate_records():
    records = [Record(rank=1, fees="₹1,000"), Record(rank=2, fees="₹10")]
    snapshot = list(records)

    sort_records(records, _asc("fees"))

    assert records == snapshot
    assert records[0].fees == "₹1,000"


def test_sort_by_text_field():
    records = [Record(rank=1, name="Pune"), Record(rank=2, name="Delhi"), Record(rank=3, name="Mumbai")]

    result = sort_records(records, _asc("name"))

    assert [r.name for r in result] == ["Delhi", "Mumbai", "Pune"]


@pytest.mark.parametrize(
    "field, direction",
    [
        ("fees", SortDirection.NONE),
        (None, SortDirection.ASCENDING),
        ("not_a_field", SortDirection.ASCENDING),
        ("fees", "sideways"),
    ],
)
def test_invalid_directives_are_rejected(field, direction):
    with pytest.raises(InvalidSortDirectiveError):
        SortDirective(field=field, direction=direction)


def test_directive_dict_roundtrip():
    directive = SortDirective(field="review_rating", direction="descending")

    assert directive.direction is SortDirection.DESCENDING
    assert SortDirective.from_dict(directive.to_dict()) == directive
    assert SortDirective.from_dict({}) == SortDirective.none()
