from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from rank_browser.config.loader import load_global_config
from rank_browser.core.record_store import RecordStore
from rank_browser.services.record_source import JsonRecordSource, RecordSource
from rank_browser.ui.layout.build_layout import build_layout
from rank_browser.ui.callbacks.callbacks_view import register_view_callbacks

logger = logging.getLogger(__name__)


def create_dash_app(
    config_root: Path | str = Path("config"),
    source: Optional[RecordSource] = None,
) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Record store (read lazily on the first page request, then cached)
    if source is None:
        source = JsonRecordSource(global_config.data_source)
    store = RecordStore(source)

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        store=store,
    )

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )

    app.title = global_config.ui_title
    app.layout = build_layout(ctx)

    register_view_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"config_root": str(config_root), "data_source": source.describe()},
    )
    return app
