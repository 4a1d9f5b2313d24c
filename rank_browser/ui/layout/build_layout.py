from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from rank_browser.ui.ids import IDs
from rank_browser.ui.layout.build_navbar import build_navbar
from rank_browser.ui.layout.build_table_panel import build_table_panel

if TYPE_CHECKING:
    from rank_browser.ui.config import AppConfig

# How often the browser samples its scroll position (ms)
SCROLL_POLL_INTERVAL_MS = 400


def build_layout(ctx: "AppConfig"):
    return dbc.Container(
        fluid=True,
        className="rb-root",
        children=[
            build_navbar(ctx.global_config),

            # Per-session state
            dcc.Store(id=IDs.Store.LOAD_STATE, storage_type="session"),
            dcc.Store(id=IDs.Store.SORT_STATE, storage_type="session"),
            dcc.Store(id=IDs.Store.SCROLL_GUARD, storage_type="session"),
            dcc.Store(id=IDs.Store.SCROLL_METRICS, storage_type="memory"),
            dcc.Interval(id=IDs.Control.SCROLL_POLL, interval=SCROLL_POLL_INTERVAL_MS),

            dbc.Row(
                dbc.Col(build_table_panel(), md=12, className="mt-3"),
                className="gx-3",
            ),
        ],
    )
