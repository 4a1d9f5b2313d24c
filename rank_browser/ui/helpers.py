from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from dash import html

from rank_browser.core.record import Record
from rank_browser.core.sort_engine import SortDirection, SortDirective
from rank_browser.core.window_loader import LoadState

# (record attribute, column header) for columns with sort buttons
SORTABLE_COLUMNS: List[Tuple[str, str]] = [
    ("fees", "Course Fees"),
    ("placement", "Placements"),
    ("review_rating", "User Reviews"),
    ("rating", "CD Reviews"),
]

_COLUMN_LABELS = dict(SORTABLE_COLUMNS, rank="CD Rank", name="College")


def _text(value) -> str:
    return "–" if value is None else str(value)


def _rating(value) -> str:
    return "–" if value is None else f"{value} / 10"


def build_table_rows(rows: Sequence[Record]) -> List[html.Tr]:
    return [
        html.Tr(
            [
                html.Td(f"#{_text(r.rank)}", className="rb-rank"),
                html.Td(
                    [
                        html.P(_text(r.name), className="rb-name fw-bold mb-1"),
                        html.P(_text(r.location), className="small mb-1"),
                        html.P(f"Program: {_text(r.course)}", className="rb-course mb-0"),
                    ]
                ),
                html.Td(_text(r.fees), className="rb-value"),
                html.Td(_text(r.placement), className="rb-value"),
                html.Td(_rating(r.review_rating)),
                html.Td(_rating(r.rating)),
            ],
            # rank is the identifier; fall back to position for unranked rows
            key=f"{_text(r.rank)}-{idx}",
        )
        for idx, r in enumerate(rows)
    ]


def status_text(n_visible: int, state: LoadState, query: Optional[str]) -> str:
    text = f"Showing {n_visible} of {state.loaded_count} loaded"
    if query:
        text += f" matching “{query}”"
    return text


def end_notice(state: LoadState) -> str:
    if state.failed:
        return "Could not load records"
    if state.exhausted:
        return "No more data to load"
    return ""


def sort_indicator(directive: SortDirective) -> str:
    if directive.is_none:
        return "Unsorted"
    arrow = "↑" if directive.direction is SortDirection.ASCENDING else "↓"
    label = _COLUMN_LABELS.get(directive.field, directive.field)
    return f"Sorted by {label} {arrow}"
