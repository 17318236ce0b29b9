from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Tuple, Union

from ..errors import SelectorError
from ..models import Item
from ..utils import shallow_equal
from .base import Selector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Passthrough:
    """No selector ran: the derived view is the raw list itself."""
    items: List[Item]


@dataclass(frozen=True)
class Selected:
    items: List[Item]


@dataclass(frozen=True)
class Failed:
    error: SelectorError
    items: List[Item] = field(default_factory=list)


Derivation = Union[Passthrough, Selected, Failed]


class SelectorPipeline:
    """Current selector plus its dependency list, and the logic to apply them."""

    def __init__(self) -> None:
        self.selector: Optional[Selector] = None
        self.dependencies: Tuple[Any, ...] = ()

    @property
    def has_selector(self) -> bool:
        return self.selector is not None

    def update(self, selector: Optional[Selector], dependencies: Sequence[Any] = ()) -> bool:
        """Store selector/dependencies if either differs; return whether they did."""
        if self.selector is selector and shallow_equal(self.dependencies, dependencies):
            return False
        self.selector = selector
        self.dependencies = tuple(dependencies)
        return True

    def apply(self, raw_items: List[Item]) -> Derivation:
        if self.selector is None or not raw_items:
            return Passthrough(raw_items)
        try:
            return Selected(list(self.selector(raw_items, *self.dependencies)))
        except Exception as exc:  # noqa: BLE001 - any selector failure becomes provider state
            logger.error(
                "Selector function error",
                exc_info=exc,
                extra={"selector": getattr(self.selector, "__name__", repr(self.selector)),
                       "raw_count": len(raw_items)},
            )
            return Failed(SelectorError.wrap(exc))
