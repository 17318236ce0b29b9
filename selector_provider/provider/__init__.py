"""Provider package: the windowed selector data provider and its parts.

Public exports:
- WindowedDataProvider protocol, Selector alias
- SelectorDataProvider
- SubscriberRegistry, ChangeDetector, SelectorPipeline, SentinelSynthesizer
"""
from .base import Selector, WindowedDataProvider
from .change_detection import ChangeDetector
from .core import SelectorDataProvider
from .pipeline import Derivation, Failed, Passthrough, Selected, SelectorPipeline
from .sentinels import SentinelSynthesizer
from .subscribers import SubscriberRegistry

__all__ = [
    "Selector",
    "WindowedDataProvider",
    "ChangeDetector",
    "SelectorDataProvider",
    "Derivation",
    "Failed",
    "Passthrough",
    "Selected",
    "SelectorPipeline",
    "SentinelSynthesizer",
    "SubscriberRegistry",
]
