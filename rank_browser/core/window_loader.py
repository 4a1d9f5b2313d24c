from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, replace
from typing import Any, Callable, Dict, List, Optional, Tuple

from rank_browser.core.exceptions import RecordSourceError
from rank_browser.core.record import Record
from rank_browser.core.record_store import RecordStore

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10

LoadListener = Callable[["LoadState"], None]


@dataclass(frozen=True)
class LoadState:
    """
    How much of the record store is revealed.

    Fields:

    - loaded_count: size of the revealed prefix; only grows
    - page_size: records revealed per advance
    - exhausted: the last advance returned fewer than page_size records;
      never goes back to False
    - failed: the source could not be read; implies exhausted
    """

    loaded_count: int = 0
    page_size: int = DEFAULT_PAGE_SIZE
    exhausted: bool = False
    failed: bool = False

    def __post_init__(self) -> None:
        if self.page_size <= 0:
            raise ValueError(f"page_size must be positive, got {self.page_size}")
        if self.loaded_count < 0:
            raise ValueError(f"loaded_count must not be negative, got {self.loaded_count}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], page_size: int = DEFAULT_PAGE_SIZE) -> LoadState:
        return cls(
            loaded_count=max(0, int(data.get("loaded_count", 0))),
            page_size=int(data.get("page_size", page_size)),
            exhausted=bool(data.get("exhausted", False)),
            failed=bool(data.get("failed", False)),
        )


class WindowLoader:
    """
    Reveals the record store one page at a time.

    The revealed window is always a prefix of the store in source order.
    Subscribers are called with the new LoadState after every advance that
    changed it.
    """

    def __init__(
        self,
        store: RecordStore,
        page_size: int = DEFAULT_PAGE_SIZE,
        state: Optional[LoadState] = None,
    ) -> None:
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self._store = store
        self._state = state if state is not None else LoadState(page_size=page_size)
        self._listeners: List[LoadListener] = []
        self._loading = False

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return self._loading

    def subscribe(self, listener: LoadListener) -> None:
        self._listeners.append(listener)

    def advance(self) -> int:
        """
        Reveal the next page and return the new loaded_count.

        No-op once exhausted, and while another advance is still running.
        A source failure counts as an empty page and marks the state failed.
        """
        state = self._state
        if state.exhausted:
            logger.debug("Advance ignored: window exhausted", extra={"loaded_count": state.loaded_count})
            return state.loaded_count
        if self._loading:
            logger.debug("Advance ignored: load already in flight", extra={"loaded_count": state.loaded_count})
            return state.loaded_count

        self._loading = True
        try:
            new_state = self._next_state(state)
        finally:
            self._loading = False

        if new_state != state:
            self._state = new_state
            self._notify()
        return new_state.loaded_count

    def _next_state(self, state: LoadState) -> LoadState:
        try:
            records = self._store.ensure_loaded()
        except RecordSourceError:
            logger.exception("Record source unavailable; marking window exhausted")
            return replace(state, exhausted=True, failed=True)

        start = state.loaded_count
        page = records[start:start + state.page_size]
        exhausted = len(page) < state.page_size

        if exhausted:
            logger.info(
                "Record store exhausted",
                extra={"loaded_count": start + len(page), "n_records": len(records)},
            )
        else:
            logger.info("Advanced window", extra={"loaded_count": start + len(page)})

        return replace(state, loaded_count=start + len(page), exhausted=exhausted)

    def window(self) -> Tuple[Record, ...]:
        """The revealed prefix of the store."""
        # A state restored from the browser may point at a store this process
        # hasn't read yet
        if self._state.loaded_count and not self._store.is_loaded:
            try:
                self._store.ensure_loaded()
            except RecordSourceError:
                logger.exception("Record source unavailable while restoring window")
                return ()
        return self._store.records[: self._state.loaded_count]

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._state)
