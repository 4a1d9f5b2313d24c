from __future__ import annotations

import pytest

from rank_browser.core.data_view import DataView
from rank_browser.core.exceptions import InvalidSortDirectiveError
from rank_browser.core.record import Record
from rank_browser.core.record_store import RecordStore
from rank_browser.core.sort_engine import SortDirection, SortDirective

NAMES = [
    "Alpha", "Bravo", "Charlie", "Delta", "Echo", "Foxtrot",
    "Golf", "Hotel", "India", "Juliett", "Kilo", "Lima",
]


def _make_store() -> RecordStore:
    """12 records named A-L with fees 100..1200 in rank order."""
    records = [
        Record(rank=i + 1, name=name, fees=(i + 1) * 100)
        for i, name in enumerate(NAMES)
    ]
    return RecordStore.from_records(records)


def test_end_to_end_sort_and_filter_over_first_page():
    view = DataView(_make_store())

    view.request_more()
    assert view.load_state.loaded_count == 10

    view.set_sort("fees", "descending")
    assert view.rows[0].fees == 1000
    assert view.rows[0].name == "Juliett"

    view.set_query("a")
    assert [r.name for r in view.rows] == ["India", "Delta", "Charlie", "Bravo", "Alpha"]


def test_loading_more_keeps_sort_and_query():
    view = DataView(_make_store())
    view.request_more()
    view.set_sort("fees", SortDirection.DESCENDING)
    view.set_query("a")

    view.request_more()

    assert view.exhausted is True
    assert [r.name for r in view.rows] == ["Lima", "India", "Delta", "Charlie", "Bravo", "Alpha"]


def test_window_stays_in_source_order_under_sort_and_filter():
    view = DataView(_make_store())
    view.request_more()
    view.set_sort("fees", "descending")
    view.set_query("o")

    assert [r.name for r in view.window] == NAMES[:10]


def test_reverting_sort_and_query_restores_source_order():
    view = DataView(_make_store())
    view.request_more()
    view.set_sort("fees", "descending")
    view.set_query("zzz")
    assert view.rows == ()

    view.clear_sort()
    view.set_query("")

    assert [r.name for r in view.rows] == NAMES[:10]
    assert view.directive == SortDirective.none()


def test_scroll_drives_loading():
    view = DataView(_make_store())

    assert view.on_scroll(0, 800, 700) is True
    assert view.load_state.loaded_count == 10
    assert view.last_fired_height == 700

    assert view.on_scroll(400, 800, 1300) is True
    assert view.exhausted is True
    assert view.on_scroll(400, 800, 1300) is False


def test_partial_sort_is_rejected_and_keeps_previous_directive():
    view = DataView(_make_store())
    view.set_sort("fees", "ascending")

    with pytest.raises(InvalidSortDirectiveError):
        view.set_sort("fees", None)

    assert view.directive == SortDirective(field="fees", direction=SortDirection.ASCENDING)


def test_rows_served_from_memo_when_inputs_unchanged():
    view = DataView(_make_store())
    view.request_more()
    view.set_sort("fees", "ascending")

    first = view.rows
    second = view.rows

    assert first is second


def test_scroll_keeps_loading_while_filter_hides_new_rows():
    # only the first 10 of 50 records match, so later pages add no visible rows
    records = [
        Record(rank=i, name=f"Match {i}" if i <= 10 else f"Other {i}")
        for i in range(1, 51)
    ]
    view = DataView(RecordStore.from_records(records), query="match")

    fired = 0
    while view.on_scroll(0, 800, 700):
        fired += 1
        assert len(view.rows) == 10

    # five full pages, then one empty advance that marks the window exhausted
    assert fired == 6
    assert view.exhausted is True
    assert view.load_state.loaded_count == 50
