from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Union

from rank_browser.config.model import GlobalConfig
from rank_browser.core.exceptions import ConfigError
from rank_browser.core.scroll_trigger import DEFAULT_SCROLL_THRESHOLD
from rank_browser.core.window_loader import DEFAULT_PAGE_SIZE

logger = logging.getLogger(__name__)

DEFAULT_DATA_SOURCE = "data/college_data.json"


def _resolve_data_source(root: Path, raw: str) -> Union[Path, str]:
    if raw.startswith(("http://", "https://")):
        return raw
    path = Path(raw)
    if path.is_absolute():
        return path
    return (root / path).resolve()


def _positive_int(raw_global: dict, key: str, default: int) -> int:
    value = raw_global.get(key, default)
    try:
        number = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"global.json: '{key}' must be an integer, got {value!r}") from e
    if number <= 0:
        raise ConfigError(f"global.json: '{key}' must be positive, got {number}")
    return number


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load global.json from a config directory.
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise ConfigError(f"File not found at {global_path}")

    try:
        with global_path.open(encoding="utf-8") as f:
            raw_global = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    if not isinstance(raw_global, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    data_source = _resolve_data_source(root, str(raw_global.get("data_source", DEFAULT_DATA_SOURCE)))

    config = GlobalConfig(
        ui_title=raw_global.get("ui_title", "College Rankings"),
        subtitle=raw_global.get("subtitle", "Ranking table"),
        data_source=data_source,
        page_size=_positive_int(raw_global, "page_size", DEFAULT_PAGE_SIZE),
        scroll_threshold=_positive_int(raw_global, "scroll_threshold", DEFAULT_SCROLL_THRESHOLD),
    )

    logger.info(
        "Global config loaded",
        extra={
            "config_root": str(root),
            "data_source": str(config.data_source),
            "page_size": config.page_size,
        },
    )
    return config
