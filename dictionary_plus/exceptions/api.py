"""Dictionary lookup exceptions."""

from .base import DictionaryPlusException


class DictionaryAPIError(DictionaryPlusException):
    """Base class for failures of a dictionary lookup.

    Each subclass carries the short message shown in place of results.
    """

    user_message = "Request failed."


class InvalidRequestError(DictionaryAPIError):
    """Raised when the inputs cannot be formed into a valid request."""

    user_message = "Invalid URL."


class RequestFailedError(DictionaryAPIError):
    """Raised on transport failure or a non-2xx status other than 404."""

    user_message = "Request failed."


class EmptyResultsError(DictionaryAPIError):
    """Raised when the service has no entry for the word (404 or empty list)."""

    user_message = "No results found."
