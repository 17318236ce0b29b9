from types import SimpleNamespace

from selector_provider import selectors
from selector_provider.models import Item
from selector_provider.provider import SelectorDataProvider


def make_catalog():
    return [
        Item(id="a1", content={"title": "Quiet River", "name": "quiet-river"}, type="article"),
        Item(id="v1", content={"title": "Rapid Signal", "description": "fast"}, type="video"),
        Item(id="a2", content=SimpleNamespace(title="Open Archive", name=None), type="article"),
        Item(id="x1", content={"title": "Untyped"}),
    ]


def test_filter_by_types():
    items = make_catalog()
    out = selectors.filter_by_types(["article"])(items)
    assert [i.id for i in out] == ["a1", "a2"]


def test_filter_by_types_empty_returns_input():
    items = make_catalog()
    assert selectors.filter_by_types([])(items) is items


def test_search_text_matches_fields_and_id_case_insensitively():
    items = make_catalog()
    assert [i.id for i in selectors.search_text("RIVER")(items)] == ["a1"]
    assert [i.id for i in selectors.search_text("archive")(items)] == ["a2"]
    assert [i.id for i in selectors.search_text("FAST")(items)] == ["v1"]
    assert [i.id for i in selectors.search_text("x1")(items)] == ["x1"]


def test_search_text_custom_fields():
    items = make_catalog()
    out = selectors.search_text("quiet-river", fields=["name"])(items)
    assert [i.id for i in out] == ["a1"]
    assert selectors.search_text("fast", fields=["title"])(items) == []


def test_search_text_blank_returns_input():
    items = make_catalog()
    assert selectors.search_text("   ")(items) is items


def test_combine_is_and_composition():
    items = make_catalog()
    sel = selectors.combine(
        selectors.filter_by_types(["article", "video"]),
        selectors.search_text("r"),
    )
    assert [i.id for i in sel(items)] == ["a1", "v1", "a2"]
    sel = selectors.combine(selectors.filter_by_types(["video"]), selectors.search_text("quiet"))
    assert sel(items) == []


def test_combine_forwards_dependencies():
    seen = []

    def record(items, *deps):
        seen.append(deps)
        return items

    selectors.combine(record, record)(make_catalog(), "dep")
    assert seen == [("dep",), ("dep",)]


def test_sort_by_returns_new_list():
    items = make_catalog()
    out = selectors.sort_by(lambda i: i.id, reverse=True)(items)
    assert [i.id for i in out] == ["x1", "v1", "a2", "a1"]
    assert [i.id for i in items] == ["a1", "v1", "a2", "x1"]


def test_combinator_drives_provider():
    provider = SelectorDataProvider()
    provider.update_raw_data(make_catalog(), False, None)
    provider.update_selector(selectors.filter_by_types(["video"]))
    assert [i.id for i in provider.get_data(0, 10)] == ["v1"]
