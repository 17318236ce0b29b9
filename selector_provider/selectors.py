"""Prebuilt selector combinators.

Each factory returns a pure `(items, *dependencies) -> items` callable usable
with `SelectorDataProvider.update_selector`. Build the selector once and keep
the reference: the provider recomputes whenever the reference changes.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Iterable, List, Sequence

from .models import Item
from .provider.base import Selector

DEFAULT_SEARCH_FIELDS = ("title", "name", "description")


def _field(content: Any, name: str) -> Any:
    if isinstance(content, Mapping):
        return content.get(name)
    return getattr(content, name, None)


def filter_by_types(types: Iterable[str]) -> Selector:
    type_set = set(types)

    def select(items: List[Item], *_deps: Any) -> List[Item]:
        if not type_set:
            return items
        return [item for item in items if item.type and item.type in type_set]

    return select


def search_text(text: str, fields: Sequence[str] = DEFAULT_SEARCH_FIELDS) -> Selector:
    needle = text.lower()

    def select(items: List[Item], *_deps: Any) -> List[Item]:
        if not text.strip():
            return items
        out = []
        for item in items:
            parts = [item.id, *(_field(item.content, f) for f in fields)]
            haystack = " ".join(str(p) for p in parts if p).lower()
            if needle in haystack:
                out.append(item)
        return out

    return select


def combine(*selectors: Selector) -> Selector:
    """AND-compose selectors; each one sees the previous output."""

    def select(items: List[Item], *deps: Any) -> List[Item]:
        for selector in selectors:
            items = selector(items, *deps)
        return items

    return select


def sort_by(key: Callable[[Item], Any], reverse: bool = False) -> Selector:
    def select(items: List[Item], *_deps: Any) -> List[Item]:
        return sorted(items, key=key, reverse=reverse)

    return select
