from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, List, Optional, Sequence

import pandas as pd

from .config import ProviderOptions, Settings, get_settings
from .datasources import SourceRepository, create_cache
from .errors import TransformError
from .models import Item
from .provider import Selector, SelectorDataProvider
from .transform import default_transformer
from .utils import today_key

logger = logging.getLogger(__name__)

Transformer = Callable[[pd.DataFrame], List[Item]]


class QueryBinding:
    """Drives a SelectorDataProvider from a SourceRepository.

    Each `refresh` publishes a loading state, loads records (retrying up to
    `query_retry` times with exponential backoff), converts them to Items and
    publishes the result.
    Failures are forwarded to the provider as error state, never raised.
    """

    def __init__(
        self,
        repository: Optional[SourceRepository] = None,
        provider: Optional[SelectorDataProvider] = None,
        transformer: Optional[Transformer] = None,
        settings: Optional[Settings] = None,
        selector: Optional[Selector] = None,
        dependencies: Sequence[Any] = (),
    ) -> None:
        self.settings = settings or get_settings()
        if repository is None:
            repository = SourceRepository(settings=self.settings)
            repository.set_cache(create_cache(self.settings))
        self.repository = repository
        self.provider = provider or SelectorDataProvider(ProviderOptions.from_settings(self.settings))
        self.transformer = transformer or default_transformer
        self._items: List[Item] = []
        if selector is not None:
            self.set_selector(selector, dependencies)

    def set_selector(self, selector: Optional[Selector], dependencies: Sequence[Any] = ()) -> None:
        self.provider.update_selector(selector, dependencies)

    def _load(self, force_key: Optional[str]) -> pd.DataFrame:
        attempts = self.settings.query_retry + 1
        attempt = 1
        while True:
            try:
                return self.repository.get_records(force_key)
            except Exception as e:  # noqa: BLE001
                if attempt >= attempts:
                    raise
                logger.warning(
                    "Source load failed, retrying",
                    extra={"attempt": attempt, "attempts": attempts, "error": str(e)},
                )
                time.sleep(self.retry_delay(attempt))
                attempt += 1

    def retry_delay(self, attempt: int) -> float:
        """Exponential backoff before retry number `attempt`, capped."""
        delay = self.settings.query_retry_delay_seconds * 2 ** (attempt - 1)
        return min(delay, self.settings.query_retry_max_delay_seconds)

    def refresh(self, force: bool = False) -> None:
        """Load from the source and push the outcome into the provider.

        `force` bypasses the daily cache key, like a manual refresh.
        """
        force_key = f"{today_key()}__{int(time.time())}" if force else None
        self.provider.update_raw_data(self._items, True, None)

        try:
            records = self._load(force_key)
        except Exception as e:  # noqa: BLE001 - surfaced through the provider's error item
            logger.error("Source load failed", extra={"error": str(e)})
            # Previously loaded items stay visible alongside the error
            self.provider.update_raw_data(self._items, False, e)
            return

        try:
            items = self.transformer(records)
        except Exception as e:  # noqa: BLE001
            logger.error("Data transformation error", exc_info=e)
            self._items = []
            self.provider.update_raw_data([], False, TransformError.wrap(e))
            return

        self._items = items
        self.provider.update_raw_data(items, False, None)

    def selector_info(self) -> Dict[str, Any]:
        state = self.provider.get_state()
        return {
            "raw_count": state.raw_item_count,
            "selected_count": state.selected_item_count,
            "has_selector": state.has_selector,
        }
