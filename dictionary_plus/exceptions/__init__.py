"""Custom exceptions for Dictionary Plus."""

from .api import DictionaryAPIError, EmptyResultsError, InvalidRequestError, RequestFailedError
from .base import DictionaryPlusException
from .preferences import PreferenceStoreError

__all__ = [
    "DictionaryPlusException",
    "DictionaryAPIError",
    "InvalidRequestError",
    "RequestFailedError",
    "EmptyResultsError",
    "PreferenceStoreError",
]
