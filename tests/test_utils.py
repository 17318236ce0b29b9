import datetime as dt

from selector_provider.utils import same_value, shallow_equal, today_key


def test_today_key(monkeypatch):
    class FakeDate(dt.date):
        @classmethod
        def today(cls):
            return cls(2025, 1, 15)

    monkeypatch.setattr(dt, "date", FakeDate)
    assert today_key() == "2025-01-15"


def test_same_value_primitives_by_value_objects_by_identity():
    assert same_value("abc", "ab" + "c")
    assert same_value(3, 3)
    assert same_value(None, None)
    assert not same_value([1], [1])
    assert not same_value({"a": 1}, {"a": 1})
    marker = object()
    assert same_value(marker, marker)


def test_same_value_does_not_equate_bools_and_ints():
    assert not same_value(True, 1)
    assert not same_value(0, False)
    assert same_value(True, True)


def test_shallow_equal_lengths_and_positions():
    deps = ["x", 2]
    assert shallow_equal(deps, ("x", 2))
    assert not shallow_equal(deps, ["x"])
    assert not shallow_equal(deps, [2, "x"])
    assert shallow_equal([], ())
