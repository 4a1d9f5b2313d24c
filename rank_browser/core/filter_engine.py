from __future__ import annotations

from typing import Iterable, List, Optional

from rank_browser.core.record import Record


def filter_records(records: Iterable[Record], query: Optional[str]) -> List[Record]:
    """
    Keep records whose name contains `query`, ignoring case.

    An empty or None query keeps everything. A record without a name only
    survives the empty query. Input order is preserved.
    """
    rows = list(records)
    if not query:
        return rows

    needle = query.casefold()
    return [r for r in rows if r.name is not None and needle in str(r.name).casefold()]
