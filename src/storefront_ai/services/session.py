from __future__ import annotations
from pathlib import Path
from typing import Any, Optional

from loguru import logger

from storefront_ai.adapters.easystore import MockStoreSource, StoreDataSource, make_store_source
from storefront_ai.domain.models import StoreConfig
from storefront_ai.services import config_store
from storefront_ai.services.store_service import ConnectionRejected, StoreData, connect, refresh_store_data


class StoreSession:
    """Active data source plus the data last loaded from it.

    Sources are never reconfigured in place: new settings build a new source,
    which replaces the active one only after it validates.
    """

    def __init__(
        self,
        config: Optional[StoreConfig] = None,
        source: Optional[StoreDataSource] = None,
        config_path: Optional[Path] = None,
    ):
        self.config = config
        self.source: StoreDataSource = source or make_store_source(config)
        self.config_path = config_path
        self.data = StoreData()
        self.loaded = False

    @classmethod
    def from_saved(cls, config_path: Optional[Path] = None) -> "StoreSession":
        return cls(config=config_store.load_config(config_path), config_path=config_path)

    @property
    def demo(self) -> bool:
        return self.source.is_demo

    async def load(self) -> StoreData:
        self.data = await refresh_store_data(self.source, self.data)
        self.loaded = True
        return self.data

    async def use_demo(self) -> StoreData:
        self.source = MockStoreSource()
        return await self.load()

    async def apply_settings(self, config: StoreConfig, **source_kwargs: Any) -> bool:
        """Validate, persist, then switch to `config`.

        Returns False when the shop rejects the credentials. An OSError from
        writing the config propagates, and the session is left as it was.
        """
        try:
            source = await connect(config, **source_kwargs)
        except ConnectionRejected as e:
            logger.warning(f"{config.display_host}: {e}")
            return False
        config_store.save_config(config, self.config_path)
        self.config, self.source = config, source
        await self.load()
        return True
