from __future__ import annotations
import json
from pathlib import Path
from typing import Optional

from loguru import logger

from storefront_ai import settings
from storefront_ai.domain.models import StoreConfig


def load_config(path: Optional[Path] = None) -> Optional[StoreConfig]:
    path = Path(path or settings.CONFIG_PATH)
    if not path.exists():
        return None
    with open(path, "r", encoding="utf-8") as f:
        return StoreConfig.model_validate(json.load(f))


def save_config(config: StoreConfig, path: Optional[Path] = None) -> Path:
    path = Path(path or settings.CONFIG_PATH)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config.model_dump(by_alias=True), f)
    logger.info(f"Saved connection settings for {config.display_host} to {path}")
    return path
