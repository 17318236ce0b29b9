from __future__ import annotations

from typing import Sequence

from ..models import Item


class ChangeDetector:
    """Cheap heuristic deciding whether a raw update needs recomputation.

    Compares length plus the ids of the first and last items. Reordering or
    mutating interior items while keeping length and endpoints intact is NOT
    detected; callers that need that sensitivity disable change detection.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled

    def has_changed(self, previous: Sequence[Item], incoming: Sequence[Item]) -> bool:
        if not self.enabled:
            return True
        if len(previous) != len(incoming):
            return True
        if not incoming:
            return False
        return previous[0].id != incoming[0].id or previous[-1].id != incoming[-1].id
