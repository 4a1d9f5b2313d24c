from __future__ import annotations
import logging
from typing import Optional

from rank_browser.core.exceptions import InvalidSortDirectiveError
from rank_browser.core.sort_engine import SortDirective
from rank_browser.core.window_loader import LoadState

logger = logging.getLogger(__name__)

def safe_load_state(data: object, page_size: int) -> Optional[LoadState]:
    """LoadState from a browser store payload, or None if absent/invalid."""
    if not isinstance(data, dict) or not data:
        return None
    try:
        return LoadState.from_dict(data, page_size=page_size)
    except (TypeError, ValueError):
        logger.exception("Invalid load-state: %r", data)
        return None


def safe_sort_directive(data: object) -> SortDirective:
    """SortDirective from a browser store payload; falls back to no sort."""
    if not isinstance(data, dict) or not data:
        return SortDirective.none()
    try:
        return SortDirective.from_dict(data)
    except InvalidSortDirectiveError:
        logger.exception("Invalid sort-state: %r", data)
        return SortDirective.none()


def safe_float(value: object) -> Optional[float]:
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None


def safe_int(value: object) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
