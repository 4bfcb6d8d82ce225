"""Base exception classes for Dictionary Plus."""


class DictionaryPlusException(Exception):
    """Base exception for all Dictionary Plus errors.

    All custom exceptions in the dictionary_plus package should inherit
    from this base class for consistent error handling.
    """

    pass
