"""Client for the public dictionary lookup API."""

import logging
from urllib.parse import quote, urlparse

import requests

from dictionary_plus.config import DictionaryPlusConfig
from dictionary_plus.exceptions import EmptyResultsError, InvalidRequestError, RequestFailedError
from dictionary_plus.models import LookupResult

logger = logging.getLogger(__name__)


class DictionaryClient:
    """Fetch dictionary entries from the remote service (stateless service).

    Implements DictionaryLookup protocol.
    """

    def __init__(self, config: DictionaryPlusConfig):
        """Initialize the dictionary client.

        Args:
            config: Configuration with the service URL and request timeout
        """
        self.config = config

    def build_url(self, word: str, language_code: str = "en") -> str:
        """Build the lookup URL for a word.

        Args:
            word: Word to look up (percent-encoded into the path)
            language_code: Dictionary language code

        Returns:
            Absolute URL of the form {base}/{language_code}/{word}

        Raises:
            InvalidRequestError: If the word, language code or base URL is unusable
        """
        word = word.strip()
        if not word:
            raise InvalidRequestError("Cannot look up an empty word")
        if not language_code or not language_code.replace("-", "").isalnum():
            raise InvalidRequestError(f"Invalid language code: {language_code!r}")

        base = self.config.dictionary_api_url.rstrip("/")
        parsed = urlparse(base)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise InvalidRequestError(f"Invalid dictionary service URL: {base!r}")

        return f"{base}/{language_code}/{quote(word, safe='')}"

    def fetch_entry(self, word: str, language_code: str = "en") -> LookupResult:
        """Look up a single word.

        Args:
            word: Trimmed, non-empty word to look up
            language_code: Dictionary language code

        Returns:
            The first entry in the service's response

        Raises:
            InvalidRequestError: If no request can be built from the inputs
            RequestFailedError: On transport failure, a non-2xx status other
                than 404, or a body that cannot be decoded
            EmptyResultsError: On HTTP 404 or an empty entry list
        """
        url = self.build_url(word, language_code)
        logger.debug(f"GET {url}")

        try:
            response = requests.get(
                url,
                headers={"Accept": "application/json", "User-Agent": self.config.user_agent},
                timeout=self.config.request_timeout,
            )
        except requests.RequestException as e:
            raise RequestFailedError(f"Request for '{word}' failed: {e}") from e

        if response.status_code == 404:
            raise EmptyResultsError(f"No entry for '{word}' ({language_code})")
        if not 200 <= response.status_code <= 299:
            raise RequestFailedError(
                f"Dictionary service returned HTTP {response.status_code} for '{word}'"
            )

        try:
            entries = response.json()
        except ValueError as e:
            raise RequestFailedError(f"Undecodable response for '{word}': {e}") from e

        if not isinstance(entries, list):
            raise RequestFailedError(f"Unexpected response format for '{word}'")
        if not entries:
            raise EmptyResultsError(f"No entry for '{word}' ({language_code})")

        try:
            result = LookupResult.from_api(entries[0])
        except (KeyError, TypeError) as e:
            raise RequestFailedError(f"Malformed entry for '{word}': {e}") from e

        logger.debug(f"Found '{result.word}' with {len(result.meanings)} meanings")
        return result
