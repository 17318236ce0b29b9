from __future__ import annotations

from typing import Any, Callable, Dict

from .base import Unsubscribe


class SubscriberRegistry:
    """Insertion-ordered set of change callbacks.

    `notify` calls every callback synchronously, in registration order, once
    per call. A callback that raises propagates to whoever triggered the
    notification.
    """

    def __init__(self) -> None:
        # dict keys keep insertion order and give set semantics
        self._callbacks: Dict[Callable[[], Any], None] = {}

    def subscribe(self, callback: Callable[[], Any]) -> Unsubscribe:
        self._callbacks[callback] = None

        def unsubscribe() -> None:
            self._callbacks.pop(callback, None)

        return unsubscribe

    def notify(self) -> None:
        # Snapshot so callbacks may unsubscribe mid-fan-out; skip any removed since
        for callback in list(self._callbacks):
            if callback in self._callbacks:
                callback()

    def __len__(self) -> int:
        return len(self._callbacks)
