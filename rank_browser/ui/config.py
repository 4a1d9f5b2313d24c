from dataclasses import dataclass, field
from pathlib import Path

from rank_browser.config.model import GlobalConfig
from rank_browser.core.record_store import RecordStore
from rank_browser.core.view_composer import ViewComposer


@dataclass
class AppConfig:
    """
    Shared, read-only app state passed into layout and callback registration
    instead of module-level globals. Per-session state (load state, sort,
    query) lives in the browser stores, never here.
    """
    config_root: Path
    global_config: GlobalConfig
    store: RecordStore
    composer: ViewComposer = field(default_factory=ViewComposer)

    @property
    def page_size(self) -> int:
        return self.global_config.page_size

    @property
    def scroll_threshold(self) -> int:
        return self.global_config.scroll_threshold
