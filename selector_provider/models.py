from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict

PLACEHOLDER_PREFIX = "__placeholder-"
ERROR_ITEM_ID = "__error-item"


class Item(BaseModel):
    """One row of a raw or derived sequence."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    id: str
    content: Any = None
    type: Optional[str] = None


class PlaceholderContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_placeholder: Literal[True] = True
    index: int


class ErrorContent(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    is_error: Literal[True] = True
    message: str
    original_error: BaseException


class ProviderState(BaseModel):
    """Diagnostic snapshot returned by SelectorDataProvider.get_state()."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    is_loading: bool
    error: Optional[BaseException] = None
    raw_item_count: int
    selected_item_count: int
    has_selector: bool
    dependency_count: int
    subscriber_count: int


def is_sentinel_id(item_id: str) -> bool:
    return item_id.startswith(PLACEHOLDER_PREFIX) or item_id == ERROR_ITEM_ID
