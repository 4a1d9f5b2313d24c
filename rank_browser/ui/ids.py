from __future__ import annotations

__all__ = ["IDs", "sort_button_id"]


class IDs:
    class Store:
        LOAD_STATE = "load-state"
        SORT_STATE = "sort-state"
        SCROLL_GUARD = "scroll-guard"
        SCROLL_METRICS = "scroll-metrics"

    class Control:
        SEARCH_INPUT = "search-input"
        SORT_CLEAR_BTN = "sort-clear-btn"
        SORT_INDICATOR = "sort-indicator"
        LOAD_MORE_BTN = "load-more-btn"
        SCROLL_POLL = "scroll-poll"

        TABLE_BODY = "ranking-table-body"
        STATUS_TEXT = "status-text"
        END_NOTICE = "end-notice"

    class Pattern:
        # pattern-matching "type" strings
        SORT_BUTTON = "sort-button"


def sort_button_id(field: str, direction: str) -> dict:
    return {"type": IDs.Pattern.SORT_BUTTON, "field": field, "direction": direction}
