from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, Sequence, Set

from ..config import ProviderOptions
from ..models import Item, ProviderState, is_sentinel_id
from .base import Selector, Unsubscribe
from .change_detection import ChangeDetector
from .pipeline import Failed, SelectorPipeline
from .sentinels import SentinelSynthesizer
from .subscribers import SubscriberRegistry

logger = logging.getLogger(__name__)


class SelectorDataProvider:
    """Windowed data provider over a selector-derived view of raw items.

    The external source pushes whole raw sequences through `update_raw_data`
    and the active derived-view function through `update_selector`. Readers
    use the windowed-read contract (`subscribe`, `get_data`,
    `get_total_count`, `get_item_by_id`) which never raises for normal
    operation: transient states are served as placeholder or error rows.

    Everything runs synchronously on the caller's thread. Calling back into
    the provider from a selector or a subscriber is not supported.
    """

    def __init__(self, options: Optional[ProviderOptions] = None) -> None:
        self.options = options or ProviderOptions()
        self._raw_items: List[Item] = []
        self._selected_items: List[Item] = []
        self._is_loading = False
        self._error: Optional[BaseException] = None

        self._subscribers = SubscriberRegistry()
        self._change_detector = ChangeDetector(self.options.enable_change_detection)
        self._pipeline = SelectorPipeline()
        self._sentinels = SentinelSynthesizer(self.options)

    # ---- Subscriptions ----
    def subscribe(self, callback: Callable[[], Any]) -> Unsubscribe:
        return self._subscribers.subscribe(callback)

    # ---- Source inputs ----
    def update_raw_data(
        self,
        items: List[Item],
        is_loading: bool,
        error: Optional[BaseException],
    ) -> None:
        flags_changed = self._is_loading != is_loading or self._error is not error
        items_changed = self._change_detector.has_changed(self._raw_items, items)

        if not (flags_changed or items_changed):
            logger.debug("Raw update skipped, no material change", extra={"raw_count": len(items)})
            return

        self._raw_items = items
        self._is_loading = is_loading
        self._error = error
        self._recompute()

    def update_selector(self, selector: Optional[Selector], dependencies: Sequence[Any] = ()) -> None:
        if self._pipeline.update(selector, dependencies):
            self._recompute()

    def _recompute(self) -> None:
        result = self._pipeline.apply(self._raw_items)
        self._selected_items = result.items
        if isinstance(result, Failed):
            # Raw items are kept so a later selector can retry against them
            self._error = result.error
        logger.debug(
            "Derived view recomputed",
            extra={
                "outcome": type(result).__name__,
                "raw_count": len(self._raw_items),
                "selected_count": len(self._selected_items),
            },
        )
        self._subscribers.notify()

    # ---- Windowed reads ----
    def get_data(self, start_index: int, end_index: int) -> List[Item]:
        sentinels = self._sentinels.synthesize(
            start_index, end_index, self._is_loading, self._error, len(self._selected_items)
        )
        if sentinels is not None:
            return sentinels

        size = len(self._selected_items)
        safe_start = max(0, start_index)
        safe_end = min(size - 1, end_index)
        if safe_start > safe_end or safe_start >= size:
            return []
        return self._selected_items[safe_start:safe_end + 1]

    def get_total_count(self) -> int:
        count = self._sentinels.total_count(self._is_loading, self._error, len(self._selected_items))
        if count is not None:
            return count
        return len(self._selected_items)

    def get_item_by_id(self, item_id: str) -> Optional[Item]:
        if is_sentinel_id(item_id):
            return None
        for item in self._selected_items:
            if item.id == item_id:
                return item
        return None

    def get_current_item_ids(self) -> Set[str]:
        return {item.id for item in self._selected_items}

    # ---- Diagnostics ----
    def get_raw_data(self) -> List[Item]:
        return self._raw_items

    def get_selected_data(self) -> List[Item]:
        return self._selected_items

    def get_state(self) -> ProviderState:
        return ProviderState(
            is_loading=self._is_loading,
            error=self._error,
            raw_item_count=len(self._raw_items),
            selected_item_count=len(self._selected_items),
            has_selector=self._pipeline.has_selector,
            dependency_count=len(self._pipeline.dependencies),
            subscriber_count=len(self._subscribers),
        )
