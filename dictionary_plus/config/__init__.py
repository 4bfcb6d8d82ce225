"""Configuration management for Dictionary Plus."""

from .config import DictionaryPlusConfig
from .defaults import create_default_config

__all__ = ["DictionaryPlusConfig", "create_default_config"]
