from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, Tuple

import dash
from dash import ALL, Input, Output, State, no_update

from rank_browser.core.data_view import DataView
from rank_browser.core.exceptions import InvalidSortDirectiveError
from rank_browser.core.sort_engine import SortDirective
from rank_browser.ui.callbacks.callbacks_utils import safe_float, safe_int, safe_load_state, safe_sort_directive
from rank_browser.ui.helpers import build_table_rows, end_notice, sort_indicator, status_text
from rank_browser.ui.ids import IDs

if TYPE_CHECKING:
    from rank_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

# Samples the page scroll position; only pushes a new value when it changed
_SCROLL_METRICS_JS = """
function(n_intervals, previous) {
    var el = document.documentElement;
    var metrics = {
        scroll_offset: el.scrollTop,
        viewport_height: window.innerHeight,
        content_height: el.scrollHeight
    };
    if (previous
        && previous.scroll_offset === metrics.scroll_offset
        && previous.viewport_height === metrics.viewport_height
        && previous.content_height === metrics.content_height) {
        return window.dash_clientside.no_update;
    }
    return metrics;
}
"""


def _data_view(
    ctx: AppConfig,
    load_state_data: Any,
    sort_data: Any = None,
    query: Optional[str] = None,
    guard_data: Any = None,
) -> DataView:
    """Rebuild a session's DataView from its browser-side stores."""
    guard = guard_data if isinstance(guard_data, dict) else {}
    return DataView(
        ctx.store,
        page_size=ctx.page_size,
        scroll_threshold=ctx.scroll_threshold,
        composer=ctx.composer,
        load_state=safe_load_state(load_state_data, ctx.page_size),
        directive=safe_sort_directive(sort_data),
        query=query or "",
        last_fired_height=safe_float(guard.get("last_fired_height")),
        fired_at_count=safe_int(guard.get("fired_at_count")),
    )


def next_load_state(
    ctx: AppConfig,
    triggered_id: Any,
    scroll_metrics: Any,
    load_state_data: Any,
    guard_data: Any,
) -> Optional[Tuple[dict, dict]]:
    """
    Pure helper behind the load callback. Returns the new (load-state,
    scroll-guard) payloads, or None when nothing should change.

    - first call of a session (no stored state): load the first page
    - "Load more" clicked: advance one page
    - scroll sample: let the scroll trigger decide
    """
    view = _data_view(ctx, load_state_data, guard_data=guard_data)

    if triggered_id is None:
        if safe_load_state(load_state_data, ctx.page_size) is not None:
            return None
        view.request_more()
    elif triggered_id == IDs.Control.LOAD_MORE_BTN:
        view.request_more()
    elif triggered_id == IDs.Store.SCROLL_METRICS:
        if not isinstance(scroll_metrics, dict):
            return None
        offset = safe_float(scroll_metrics.get("scroll_offset"))
        viewport = safe_float(scroll_metrics.get("viewport_height"))
        content = safe_float(scroll_metrics.get("content_height"))
        if offset is None or viewport is None or content is None:
            return None
        if not view.on_scroll(offset, viewport, content):
            return None
    else:
        return None

    guard = {"last_fired_height": view.last_fired_height, "fired_at_count": view.fired_at_count}
    return view.load_state.to_dict(), guard


def sort_state_for(triggered_id: Any) -> Optional[dict]:
    """Sort-state payload for a clicked sort control, or None to leave it alone."""
    if triggered_id == IDs.Control.SORT_CLEAR_BTN:
        return SortDirective.none().to_dict()
    if isinstance(triggered_id, dict) and triggered_id.get("type") == IDs.Pattern.SORT_BUTTON:
        try:
            return SortDirective(
                field=triggered_id.get("field"),
                direction=triggered_id.get("direction"),
            ).to_dict()
        except InvalidSortDirectiveError:
            logger.exception("Ignoring invalid sort button id: %r", triggered_id)
            return None
    return None


def view_outputs(ctx: AppConfig, load_state_data: Any, sort_data: Any, query: Optional[str]):
    """Pure helper behind the render callback."""
    view = _data_view(ctx, load_state_data, sort_data, query)
    rows = view.rows
    state = view.load_state
    return (
        build_table_rows(rows),
        status_text(len(rows), state, view.query),
        end_notice(state),
        state.exhausted,
        sort_indicator(view.directive),
    )


def register_view_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Scroll sampling (browser side)
    # ---------------------------------------------------------
    app.clientside_callback(
        _SCROLL_METRICS_JS,
        Output(IDs.Store.SCROLL_METRICS, "data"),
        Input(IDs.Control.SCROLL_POLL, "n_intervals"),
        State(IDs.Store.SCROLL_METRICS, "data"),
    )

    # ---------------------------------------------------------
    # Window loading: initial page, "Load more", scroll trigger
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.LOAD_STATE, "data"),
        Output(IDs.Store.SCROLL_GUARD, "data"),
        Input(IDs.Control.LOAD_MORE_BTN, "n_clicks"),
        Input(IDs.Store.SCROLL_METRICS, "data"),
        State(IDs.Store.LOAD_STATE, "data"),
        State(IDs.Store.SCROLL_GUARD, "data"),
    )
    def update_load_state(_n_clicks, scroll_metrics, load_state_data, guard_data):
        result = next_load_state(
            ctx,
            dash.callback_context.triggered_id,
            scroll_metrics,
            load_state_data,
            guard_data,
        )
        if result is None:
            return no_update, no_update
        return result

    # ---------------------------------------------------------
    # Sort buttons
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.SORT_STATE, "data"),
        Input({"type": IDs.Pattern.SORT_BUTTON, "field": ALL, "direction": ALL}, "n_clicks"),
        Input(IDs.Control.SORT_CLEAR_BTN, "n_clicks"),
        prevent_initial_call=True,
    )
    def update_sort_state(_sort_clicks, _clear_clicks):
        payload = sort_state_for(dash.callback_context.triggered_id)
        return no_update if payload is None else payload

    # ---------------------------------------------------------
    # Visible rows
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.TABLE_BODY, "children"),
        Output(IDs.Control.STATUS_TEXT, "children"),
        Output(IDs.Control.END_NOTICE, "children"),
        Output(IDs.Control.LOAD_MORE_BTN, "disabled"),
        Output(IDs.Control.SORT_INDICATOR, "children"),
        Input(IDs.Store.LOAD_STATE, "data"),
        Input(IDs.Store.SORT_STATE, "data"),
        Input(IDs.Control.SEARCH_INPUT, "value"),
    )
    def render_rows(load_state_data, sort_data, query):
        return view_outputs(ctx, load_state_data, sort_data, query)
