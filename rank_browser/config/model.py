from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from rank_browser.core.scroll_trigger import DEFAULT_SCROLL_THRESHOLD
from rank_browser.core.window_loader import DEFAULT_PAGE_SIZE


@dataclass
class GlobalConfig:
    """
    Parsed global.json.

    data_source is either a resolved local Path or an http(s) URL string.
    """
    ui_title: str
    subtitle: str
    data_source: Union[Path, str]
    page_size: int = DEFAULT_PAGE_SIZE
    scroll_threshold: int = DEFAULT_SCROLL_THRESHOLD
