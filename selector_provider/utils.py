import datetime as dt
from typing import Any, Sequence

_PRIMITIVES = (type(None), bool, int, float, str, bytes)


def today_key() -> str:
    """Cache-busting key that changes daily."""
    return dt.date.today().isoformat()


def same_value(a: Any, b: Any) -> bool:
    """Identity for objects, value equality for primitives."""
    if a is b:
        return True
    if type(a) in _PRIMITIVES and type(b) in _PRIMITIVES:
        # True == 1 in Python, but a flag and a count are different deps
        if isinstance(a, bool) or isinstance(b, bool):
            return False
        return a == b
    return False


def shallow_equal(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """Positional comparison of two dependency lists."""
    if len(a) != len(b):
        return False
    return all(same_value(x, y) for x, y in zip(a, b))
