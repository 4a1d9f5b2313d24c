from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from rank_browser.core.sort_engine import SortDirection
from rank_browser.ui.helpers import SORTABLE_COLUMNS
from rank_browser.ui.ids import IDs, sort_button_id


def _sortable_header(field: str, label: str) -> html.Th:
    return html.Th(
        [
            label,
            html.Button(
                "↑",
                id=sort_button_id(field, SortDirection.ASCENDING.value),
                className="rb-sort-btn ps-2 pe-1",
                title=f"Sort by {label}, lowest first",
            ),
            html.Button(
                "↓",
                id=sort_button_id(field, SortDirection.DESCENDING.value),
                className="rb-sort-btn",
                title=f"Sort by {label}, highest first",
            ),
        ],
        className="rb-th",
    )


def build_table_panel() -> dbc.Card:
    header = html.Thead(
        html.Tr(
            [
                html.Th("CD Rank", className="rb-th"),
                html.Th("Colleges", className="rb-th"),
            ]
            + [_sortable_header(field, label) for field, label in SORTABLE_COLUMNS]
        )
    )

    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        dbc.Input(
                            id=IDs.Control.SEARCH_INPUT,
                            type="text",
                            placeholder="Search by college name",
                            debounce=False,
                            className="rb-search me-3",
                        ),
                        html.Small(id=IDs.Control.SORT_INDICATOR, className="text-muted me-2"),
                        dbc.Button(
                            "Clear sort",
                            id=IDs.Control.SORT_CLEAR_BTN,
                            color="secondary",
                            size="sm",
                            outline=True,
                        ),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                [
                    dbc.Table(
                        [header, html.Tbody(id=IDs.Control.TABLE_BODY)],
                        bordered=True,
                        hover=True,
                        className="rb-table",
                    ),
                    html.Div(
                        [
                            html.Small(id=IDs.Control.STATUS_TEXT, className="text-muted"),
                            dbc.Button(
                                "Load more",
                                id=IDs.Control.LOAD_MORE_BTN,
                                color="secondary",
                                size="sm",
                                className="ms-auto",
                            ),
                        ],
                        className="d-flex justify-content-between align-items-center",
                    ),
                    html.P(id=IDs.Control.END_NOTICE, className="text-center mt-4"),
                ],
            ),
        ],
        className="rb-maincard",
    )
