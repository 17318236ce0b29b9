from selector_provider.config import ProviderOptions
from selector_provider.models import ErrorContent, PlaceholderContent
from selector_provider.provider import SentinelSynthesizer


def test_placeholders_are_offset_and_capped():
    synth = SentinelSynthesizer(ProviderOptions(placeholder_count=4))
    rows = synth.synthesize(10, 30, is_loading=True, error=None, derived_count=0)
    assert [r.id for r in rows] == [f"__placeholder-{i}" for i in range(10, 14)]
    assert rows[0].content == PlaceholderContent(index=10)
    assert rows[0].content.is_placeholder is True


def test_placeholder_ids_are_reproducible():
    synth = SentinelSynthesizer(ProviderOptions())
    first = synth.synthesize(0, 2, True, None, 0)
    second = synth.synthesize(0, 2, True, None, 0)
    assert first == second


def test_inverted_range_yields_no_placeholders():
    synth = SentinelSynthesizer(ProviderOptions())
    assert synth.synthesize(5, 1, True, None, 0) == []


def test_error_item_regardless_of_range():
    synth = SentinelSynthesizer(ProviderOptions())
    err = RuntimeError("offline")
    rows = synth.synthesize(0, 99, is_loading=False, error=err, derived_count=0)
    assert len(rows) == 1
    assert rows[0].id == "__error-item"
    assert isinstance(rows[0].content, ErrorContent)
    assert rows[0].content.message == "offline"
    assert rows[0].content.original_error is err


def test_loading_wins_over_error():
    synth = SentinelSynthesizer(ProviderOptions(placeholder_count=2))
    rows = synth.synthesize(0, 5, True, RuntimeError("x"), 0)
    assert [r.id for r in rows] == ["__placeholder-0", "__placeholder-1"]
    assert synth.total_count(True, RuntimeError("x"), 0) == 2


def test_error_shown_when_placeholders_disabled():
    synth = SentinelSynthesizer(ProviderOptions(show_placeholders_while_loading=False))
    rows = synth.synthesize(0, 5, True, RuntimeError("x"), 0)
    assert [r.id for r in rows] == ["__error-item"]
    assert synth.total_count(True, RuntimeError("x"), 0) == 1


def test_no_sentinels_when_data_present_or_disabled():
    synth = SentinelSynthesizer(ProviderOptions(show_error_item=False))
    assert synth.synthesize(0, 5, True, None, derived_count=3) is None
    assert synth.synthesize(0, 5, False, RuntimeError("x"), derived_count=0) is None
    assert synth.total_count(False, RuntimeError("x"), 0) is None
    assert synth.total_count(False, None, 0) is None
