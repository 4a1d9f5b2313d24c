from __future__ import annotations

import logging
from typing import Dict, Optional, Sequence, Tuple

from rank_browser.core.filter_engine import filter_records
from rank_browser.core.record import Record
from rank_browser.core.sort_engine import SortDirective, sort_records

logger = logging.getLogger(__name__)

ComposeKey = Tuple[Tuple[Record, ...], SortDirective, str]


def compose(
    window: Sequence[Record],
    directive: SortDirective,
    query: Optional[str],
) -> Tuple[Record, ...]:
    """Visible rows: sort the window first, then filter the sorted rows."""
    return tuple(filter_records(sort_records(window, directive), query))


class ViewComposer:
    """
    Memoized `compose`.

    Results are cached per (window, directive, query); asking again with an
    equal triple returns the cached rows without re-sorting.
    """

    MAX_CACHE = 64

    def __init__(self) -> None:
        self._cache: Dict[ComposeKey, Tuple[Record, ...]] = {}
        self.computations = 0

    def compose(
        self,
        window: Sequence[Record],
        directive: SortDirective,
        query: Optional[str],
    ) -> Tuple[Record, ...]:
        key: ComposeKey = (tuple(window), directive, query or "")
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        rows = compose(key[0], directive, key[2])
        self.computations += 1
        logger.debug(
            "Composed view",
            extra={
                "window_size": len(key[0]),
                "sort": directive.to_dict(),
                "query": key[2],
                "n_rows": len(rows),
            },
        )

        self._cache[key] = rows

        # Prevent unbounded growth
        if len(self._cache) > self.MAX_CACHE:
            self._cache.clear()
            self._cache[key] = rows

        return rows

    def clear(self) -> None:
        self._cache.clear()
