from __future__ import annotations

import logging
from typing import Optional

from rank_browser.core.window_loader import WindowLoader

logger = logging.getLogger(__name__)

DEFAULT_SCROLL_THRESHOLD = 200


def should_advance(
    scroll_offset: float,
    viewport_height: float,
    content_height: float,
    threshold: float = DEFAULT_SCROLL_THRESHOLD,
) -> bool:
    """True when the bottom of the viewport is within `threshold` of the content end."""
    return scroll_offset + viewport_height >= content_height - threshold


class ScrollTrigger:
    """
    Turns scroll positions into WindowLoader.advance() calls.

    After firing, the trigger remembers the loaded_count it fired from and the
    content height it saw. Samples are dropped only while both are unchanged,
    i.e. while the page it asked for has not landed yet. Once loaded_count has
    moved, the next sample at the bottom fires again even if the new rows are
    all hidden by the filter and the content height stayed the same.
    """

    def __init__(
        self,
        loader: WindowLoader,
        threshold: float = DEFAULT_SCROLL_THRESHOLD,
        last_fired_height: Optional[float] = None,
        fired_at_count: Optional[int] = None,
    ) -> None:
        self._loader = loader
        self.threshold = threshold
        self.last_fired_height = last_fired_height
        self.fired_at_count = fired_at_count

    def _pending(self, content_height: float) -> bool:
        return (
            self.fired_at_count is not None
            and self._loader.state.loaded_count == self.fired_at_count
            and content_height == self.last_fired_height
        )

    def on_scroll(self, scroll_offset: float, viewport_height: float, content_height: float) -> bool:
        """Handle one scroll sample; returns True if an advance was requested."""
        if self._loader.state.exhausted:
            return False
        if not should_advance(scroll_offset, viewport_height, content_height, self.threshold):
            return False
        if self._pending(content_height):
            logger.debug(
                "Scroll advance suppressed: previous page not landed",
                extra={"content_height": content_height, "loaded_count": self.fired_at_count},
            )
            return False

        self.fired_at_count = self._loader.state.loaded_count
        self.last_fired_height = content_height
        self._loader.advance()
        return True
