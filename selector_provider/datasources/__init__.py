"""Source layer package: item sources, cache facade, and repository.

Public exports:
- ItemSource protocol
- SyntheticSource, RestSource, SqlSource
- CacheFacade, create_cache
- SourceRepository
"""
from .base import ItemSource
from .synthetic import SyntheticSource
from .rest import RestSource
from .sql import SqlSource
from .cache import CacheFacade, create_cache
from .repository import SourceRepository

__all__ = [
    "ItemSource",
    "SyntheticSource",
    "RestSource",
    "SqlSource",
    "CacheFacade",
    "create_cache",
    "SourceRepository",
]
