"""Client for the public word-suggestion API."""

import logging

import requests

from dictionary_plus.config import DictionaryPlusConfig

logger = logging.getLogger(__name__)


class SuggestionClient:
    """Fetch completion candidates for a typed prefix.

    Implements SuggestionLookup protocol. Suggestions are a non-critical
    enhancement, so every failure degrades to an empty list.
    """

    def __init__(self, config: DictionaryPlusConfig):
        """Initialize the suggestion client.

        Args:
            config: Configuration with the service URL and request timeout
        """
        self.config = config

    def fetch_suggestions(self, prefix: str, limit: int = 10) -> list[str]:
        """Fetch suggestions for a prefix.

        Args:
            prefix: Text typed so far
            limit: Maximum number of suggestions to return

        Returns:
            Candidate words in server relevance order, or [] on any failure
        """
        if not prefix.strip() or limit <= 0:
            return []

        try:
            response = requests.get(
                self.config.suggestion_api_url,
                params={"s": prefix, "max": limit},
                headers={"Accept": "application/json", "User-Agent": self.config.user_agent},
                timeout=self.config.request_timeout,
            )

            if not 200 <= response.status_code <= 299:
                logger.debug(f"Suggestion service returned HTTP {response.status_code}")
                return []

            data = response.json()

        except requests.exceptions.Timeout:
            logger.debug(f"Suggestion request for '{prefix}' timed out")
            return []
        except (requests.RequestException, ValueError):
            logger.debug(f"Suggestion request for '{prefix}' failed", exc_info=True)
            return []

        if not isinstance(data, list):
            return []

        words = [
            item["word"]
            for item in data
            if isinstance(item, dict) and isinstance(item.get("word"), str)
        ]
        return words[:limit]
