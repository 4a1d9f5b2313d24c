from __future__ import annotations

import json

import pytest

from rank_browser.core.exceptions import RecordSourceError
from rank_browser.core.record_store import RecordStore
from rank_browser.core.window_loader import WindowLoader
from rank_browser.services.record_source import JsonRecordSource


def _write_document(tmp_path, payload, name="college_data.json"):
    path = tmp_path / name
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return path


def test_reads_records_in_document_order(tmp_path):
    path = _write_document(
        tmp_path,
        [
            {"college_rank": 1, "college_name": "First", "college_fees": "₹1,20,000", "college_rating": 9.1},
            {"college_rank": 2, "college_name": "Second", "college_fees": 500, "college_rating": 8.0},
            {"college_rank": 3, "college_name": "Third", "college_fees": "$1,000"},
        ],
    )

    records = JsonRecordSource(path).fetch()

    assert [r.name for r in records] == ["First", "Second", "Third"]
    # decorated strings and plain numbers kept as stored
    assert records[0].fees == "₹1,20,000"
    assert records[1].fees == 500
    # key missing from the third object
    assert records[2].rating is None
    assert [r.rank for r in records] == [1, 2, 3]


def test_empty_array_gives_no_records(tmp_path):
    path = _write_document(tmp_path, [])

    assert list(JsonRecordSource(path).fetch()) == []


def test_missing_file_raises_record_source_error(tmp_path):
    with pytest.raises(RecordSourceError):
        JsonRecordSource(tmp_path / "nope.json").fetch()


def test_invalid_json_raises_record_source_error(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("[{not json", encoding="utf-8")

    with pytest.raises(RecordSourceError):
        JsonRecordSource(path).fetch()


def test_unreadable_document_exhausts_window(tmp_path):
    loader = WindowLoader(RecordStore(JsonRecordSource(tmp_path / "nope.json")), page_size=10)

    assert loader.advance() == 0
    assert loader.state.exhausted is True
    assert loader.state.failed is True


@pytest.mark.parametrize(
    "payload",
    [
        [1, 2, 3],
        [["First", 1], ["Second", 2]],
        [{"title": "First", "score": 1}, {"title": "Second", "score": 2}],
    ],
)
def test_wrong_shape_document_raises_record_source_error(tmp_path, payload):
    path = _write_document(tmp_path, payload)

    with pytest.raises(RecordSourceError):
        JsonRecordSource(path).fetch()


def test_wrong_shape_document_marks_window_failed(tmp_path):
    path = _write_document(tmp_path, [1, 2, 3])
    loader = WindowLoader(RecordStore(JsonRecordSource(path)), page_size=10)

    assert loader.advance() == 0
    assert loader.state.failed is True
    assert loader.window() == ()


def test_display_keys_are_accepted(tmp_path):
    path = _write_document(tmp_path, [{"rank": 1, "name": "First"}])

    records = JsonRecordSource(path).fetch()

    assert [(r.rank, r.name) for r in records] == [(1, "First")]
