from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Union

import pandas as pd

from .models import Item

ID_FIELDS = ("id", "key", "_id")
TYPE_FIELDS = ("type", "category")


def _get(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        # list-likes make pd.isna return an array
        return False


def _record_id(record: Any, index: int) -> str:
    for name in ID_FIELDS:
        value = _get(record, name)
        if _is_missing(value):
            continue
        text = str(value)
        if text:
            return text
    return f"item-{index}"


def _record_type(record: Any) -> Optional[str]:
    for name in TYPE_FIELDS:
        value = _get(record, name)
        if not _is_missing(value) and value:
            return str(value)
    return None


def default_transformer(data: Union[pd.DataFrame, Iterable[Any]]) -> List[Item]:
    """Wrap source records as Items.

    The id comes from the first usable `id`, `key` or `_id` field, else
    `item-{index}`; the type from `type` or `category`.
    """
    if isinstance(data, pd.DataFrame):
        records: Iterable[Any] = data.to_dict(orient="records")
    else:
        records = data
    return [
        Item(id=_record_id(record, index), content=record, type=_record_type(record))
        for index, record in enumerate(records)
    ]
