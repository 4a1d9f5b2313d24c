from __future__ import annotations

import logging
from typing import Optional, Tuple, Union

from rank_browser.core.record import Record
from rank_browser.core.record_store import RecordStore
from rank_browser.core.scroll_trigger import DEFAULT_SCROLL_THRESHOLD, ScrollTrigger
from rank_browser.core.sort_engine import SortDirection, SortDirective
from rank_browser.core.view_composer import ViewComposer
from rank_browser.core.window_loader import DEFAULT_PAGE_SIZE, LoadState, WindowLoader

logger = logging.getLogger(__name__)


class DataView:
    """
    Controller the presentation layer talks to.

    Owns the window loader and scroll trigger for one session and keeps the
    current sort directive and query. `rows` is always
    filter(sort(window, directive), query), served from the composer's memo
    when none of the three inputs changed.
    """

    def __init__(
        self,
        store: RecordStore,
        page_size: int = DEFAULT_PAGE_SIZE,
        scroll_threshold: float = DEFAULT_SCROLL_THRESHOLD,
        composer: Optional[ViewComposer] = None,
        load_state: Optional[LoadState] = None,
        directive: Optional[SortDirective] = None,
        query: str = "",
        last_fired_height: Optional[float] = None,
        fired_at_count: Optional[int] = None,
    ) -> None:
        self._loader = WindowLoader(store, page_size=page_size, state=load_state)
        self._trigger = ScrollTrigger(
            self._loader,
            threshold=scroll_threshold,
            last_fired_height=last_fired_height,
            fired_at_count=fired_at_count,
        )
        self._composer = composer if composer is not None else ViewComposer()
        self._directive = directive if directive is not None else SortDirective.none()
        self._query = query or ""

    # -------------------------------------------------------------------------
    # Controls
    # -------------------------------------------------------------------------
    def set_sort(self, field: Optional[str], direction: Union[SortDirection, str, None]) -> None:
        """Raises InvalidSortDirectiveError for partial directives or unknown fields."""
        self._directive = SortDirective(field=field, direction=direction or SortDirection.NONE)
        logger.info("Sort changed", extra={"sort": self._directive.to_dict()})

    def clear_sort(self) -> None:
        self._directive = SortDirective.none()

    def set_query(self, text: Optional[str]) -> None:
        self._query = text or ""

    def request_more(self) -> int:
        """Manual 'load more'; same transition the scroll trigger uses."""
        return self._loader.advance()

    def on_scroll(self, scroll_offset: float, viewport_height: float, content_height: float) -> bool:
        return self._trigger.on_scroll(scroll_offset, viewport_height, content_height)

    # -------------------------------------------------------------------------
    # Read side
    # -------------------------------------------------------------------------
    @property
    def rows(self) -> Tuple[Record, ...]:
        return self._composer.compose(self._loader.window(), self._directive, self._query)

    @property
    def window(self) -> Tuple[Record, ...]:
        return self._loader.window()

    @property
    def loader(self) -> WindowLoader:
        return self._loader

    @property
    def load_state(self) -> LoadState:
        return self._loader.state

    @property
    def directive(self) -> SortDirective:
        return self._directive

    @property
    def query(self) -> str:
        return self._query

    @property
    def exhausted(self) -> bool:
        return self._loader.state.exhausted

    @property
    def failed(self) -> bool:
        return self._loader.state.failed

    @property
    def last_fired_height(self) -> Optional[float]:
        return self._trigger.last_fired_height

    @property
    def fired_at_count(self) -> Optional[int]:
        return self._trigger.fired_at_count
