from conftest import make_items

from selector_provider.models import Item
from selector_provider.provider import ChangeDetector


def test_length_difference_is_a_change():
    detector = ChangeDetector()
    assert detector.has_changed(make_items("a", "b"), make_items("a", "b", "c"))


def test_endpoint_id_difference_is_a_change():
    detector = ChangeDetector()
    assert detector.has_changed(make_items("a", "b", "c"), make_items("x", "b", "c"))
    assert detector.has_changed(make_items("a", "b", "c"), make_items("a", "b", "x"))


def test_same_length_and_endpoints_is_unchanged():
    detector = ChangeDetector()
    assert not detector.has_changed(make_items("a", "b", "c"), make_items("a", "b", "c"))
    assert not detector.has_changed([], [])


def test_interior_reorder_goes_undetected():
    # Accepted trade-off of the length + endpoint heuristic
    detector = ChangeDetector()
    before = make_items("a", "b", "c", "d")
    after = make_items("a", "c", "b", "d")
    assert not detector.has_changed(before, after)


def test_interior_content_change_goes_undetected():
    detector = ChangeDetector()
    before = [Item(id="a"), Item(id="b", content=1), Item(id="c")]
    after = [Item(id="a"), Item(id="b", content=2), Item(id="c")]
    assert not detector.has_changed(before, after)


def test_disabled_detector_always_reports_change():
    detector = ChangeDetector(enabled=False)
    items = make_items("a", "b")
    assert detector.has_changed(items, items)
    assert detector.has_changed([], [])
