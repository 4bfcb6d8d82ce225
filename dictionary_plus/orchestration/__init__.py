"""Orchestration layer for coordinating the search workflow."""

from .search_controller import SearchController

__all__ = ["SearchController"]
