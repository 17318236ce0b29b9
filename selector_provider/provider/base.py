from typing import Any, Callable, List, Optional, Protocol

from ..models import Item

Selector = Callable[..., List[Item]]
Unsubscribe = Callable[[], None]


class WindowedDataProvider(Protocol):
    """Protocol for the windowed-read contract consumed by a virtualized view."""

    def subscribe(self, callback: Callable[[], Any]) -> Unsubscribe: ...

    def get_data(self, start_index: int, end_index: int) -> List[Item]: ...

    def get_total_count(self) -> int: ...

    def get_item_by_id(self, item_id: str) -> Optional[Item]: ...
