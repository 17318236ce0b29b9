from __future__ import annotations

from typing import Optional


class ProviderError(Exception):
    """Base exception for all selector_provider errors"""
    pass


class SourceError(ProviderError):
    """The external data source failed to produce records"""
    pass


class _WrappedError(ProviderError):
    prefix = ""

    def __init__(self, message: str, original_error: Optional[BaseException] = None):
        super().__init__(message)
        self.original_error = original_error

    @classmethod
    def wrap(cls, exc: BaseException):
        err = cls(f"{cls.prefix}{exc}", original_error=exc)
        err.__cause__ = exc
        return err


class SelectorError(_WrappedError):
    """
    A derived-view function raised during recomputation.
    Never escapes update_raw_data / update_selector.
    """
    prefix = "Selector error: "


class TransformError(_WrappedError):
    """Raw records could not be converted into Items"""
    prefix = "Data transformation failed: "
