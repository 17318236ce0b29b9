from __future__ import annotations

import logging
from typing import Optional

import pandas as pd
from flask_caching import Cache

from ..config import Settings, get_settings
from ..utils import today_key
from .base import ItemSource
from .cache import CacheFacade
from .rest import RestSource
from .sql import SqlSource
from .synthetic import SyntheticSource

logger = logging.getLogger(__name__)


class SourceRepository:
    """Record access with source selection, capping, and caching."""

    def __init__(
        self,
        source: Optional[ItemSource] = None,
        cache_facade: Optional[CacheFacade] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.source = source or self._default_source()
        self.cache_facade = cache_facade or CacheFacade(cache=None, timeout_seconds=self.settings.cache_timeout_seconds)

    # ---- Source selection ----
    def _default_source(self) -> ItemSource:
        src = self.settings.data_source
        if src == "REST":
            return RestSource(self.settings)
        if src == "SQL":
            return SqlSource(self.settings)
        return SyntheticSource(self.settings)

    # ---- Loaders ----
    def load_uncached(self) -> pd.DataFrame:
        df = self.source.load()
        if len(df) > self.settings.max_rows:
            logger.info(
                "Capping source records",
                extra={"rows": len(df), "max_rows": self.settings.max_rows},
            )
            df = df.head(self.settings.max_rows).reset_index(drop=True)
        return df

    def load_cached(self, key: str) -> pd.DataFrame:
        @self.cache_facade.memoize
        def _inner(_source: str, _k: str) -> pd.DataFrame:  # pragma: no cover - thin wrapper
            return self.load_uncached()

        return _inner(self.source_key(), key)

    def source_key(self) -> str:
        """Identity of this repository's source, so repositories sharing a cache never collide."""
        return f"{type(self.source).__qualname__}:{id(self.source)}"

    def get_records(self, force_key: Optional[str] = None) -> pd.DataFrame:
        key = force_key if force_key else today_key()
        df = self.load_cached(key)
        return df.copy()

    # ---- Cache wiring ----
    def set_cache(self, cache: Cache) -> None:
        self.cache_facade = CacheFacade(cache, timeout_seconds=self.settings.cache_timeout_seconds)
