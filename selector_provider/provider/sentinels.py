from __future__ import annotations

from typing import List, Optional

from ..config import ProviderOptions
from ..models import ERROR_ITEM_ID, PLACEHOLDER_PREFIX, ErrorContent, Item, PlaceholderContent


def placeholder_item(index: int) -> Item:
    return Item(
        id=f"{PLACEHOLDER_PREFIX}{index}",
        content=PlaceholderContent(index=index),
    )


def error_item(error: BaseException) -> Item:
    return Item(
        id=ERROR_ITEM_ID,
        content=ErrorContent(message=str(error), original_error=error),
    )


class SentinelSynthesizer:
    """Builds stand-in rows while the derived view is empty.

    Stateless: the same range and flags always yield the same ids. The loading
    branch is checked before the error branch.
    """

    def __init__(self, options: ProviderOptions) -> None:
        self.options = options

    def shows_placeholders(self, is_loading: bool, derived_count: int) -> bool:
        return is_loading and derived_count == 0 and self.options.show_placeholders_while_loading

    def shows_error(self, error: Optional[BaseException], derived_count: int) -> bool:
        return error is not None and derived_count == 0 and self.options.show_error_item

    def synthesize(
        self,
        start_index: int,
        end_index: int,
        is_loading: bool,
        error: Optional[BaseException],
        derived_count: int,
    ) -> Optional[List[Item]]:
        """Sentinel rows for the range, or None when real data should be served."""
        if self.shows_placeholders(is_loading, derived_count):
            count = max(0, min(end_index - start_index + 1, self.options.placeholder_count))
            return [placeholder_item(start_index + i) for i in range(count)]
        if self.shows_error(error, derived_count):
            return [error_item(error)]
        return None

    def total_count(
        self,
        is_loading: bool,
        error: Optional[BaseException],
        derived_count: int,
    ) -> Optional[int]:
        if self.shows_placeholders(is_loading, derived_count):
            return self.options.placeholder_count
        if self.shows_error(error, derived_count):
            return 1
        return None
