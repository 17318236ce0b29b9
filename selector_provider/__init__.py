"""Windowed selector data provider.

Bridges an asynchronous, possibly-caching item source to a windowed
(virtualized) consumer that reads by index range.
"""
from .binding import QueryBinding
from .config import ProviderOptions, Settings, get_settings
from .errors import ProviderError, SelectorError, SourceError, TransformError
from .logging_config import configure_logging
from .models import ErrorContent, Item, PlaceholderContent, ProviderState
from .provider import SelectorDataProvider, WindowedDataProvider
from .transform import default_transformer
from . import selectors

__all__ = [
    "QueryBinding",
    "ProviderOptions",
    "Settings",
    "get_settings",
    "ProviderError",
    "SelectorError",
    "SourceError",
    "TransformError",
    "configure_logging",
    "ErrorContent",
    "Item",
    "PlaceholderContent",
    "ProviderState",
    "SelectorDataProvider",
    "WindowedDataProvider",
    "default_transformer",
    "selectors",
]
