"""Default configuration values for Dictionary Plus."""

from .config import DictionaryPlusConfig


def create_default_config(**overrides) -> DictionaryPlusConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        DictionaryPlusConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            request_timeout=5.0,
            suggestion_debounce=0.3
        )
    """
    return DictionaryPlusConfig(**overrides)
