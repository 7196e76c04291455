"""Service for building Datamuse requests and decoding their responses."""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

import requests

from nerdbook.config import NerdBookConfig
from nerdbook.exceptions import DecodeError, TransportError, UrlConstructionError
from nerdbook.models import SuggestionEntry, WordRecord

logger = logging.getLogger(__name__)

T = TypeVar("T")


def extract_gloss(records: list[WordRecord]) -> str | None:
    """Pull the display text out of a definition lookup.

    Datamuse encodes each definition as ``"<part-of-speech>\\t<gloss>"``;
    only the gloss of the first record's first definition is shown.

    Args:
        records: Decoded records from a ``sp=<word>&md=d`` request

    Returns:
        Gloss text, or None if no definition is present
    """
    if not records:
        return None

    definitions = records[0].definitions
    if not definitions:
        return None

    return definitions[0].split("\t")[-1]


class DatamuseService:
    """Build Datamuse URLs and fetch decoded results (stateless service)."""

    WORDS_PATH = "/words"
    SUGGEST_PATH = "/sug"

    def __init__(self, config: NerdBookConfig):
        """Initialize the Datamuse service.

        Args:
            config: Configuration for API access
        """
        self.config = config

    def build_synonyms_url(self, query: str) -> str:
        """Build a synonym-of lookup with syllable and frequency metadata.

        Raises:
            UrlConstructionError: If the query cannot be encoded
        """
        return self._build_url(self.WORDS_PATH, {"rel_syn": query, "md": "sf"})

    def build_definition_url(self, query: str) -> str:
        """Build an exact-spelling lookup with definition metadata.

        Raises:
            UrlConstructionError: If the query cannot be encoded
        """
        return self._build_url(self.WORDS_PATH, {"sp": query, "md": "d"})

    def build_suggestions_url(self, text: str) -> str:
        """Build an autocomplete lookup for partial input.

        Raises:
            UrlConstructionError: If the text cannot be encoded
        """
        return self._build_url(self.SUGGEST_PATH, {"s": text})

    def fetch_word_records(self, url: str) -> list[WordRecord]:
        """Fetch and decode a ``/words`` response.

        Args:
            url: URL from build_synonyms_url or build_definition_url

        Returns:
            Word records in service order

        Raises:
            TransportError: If the request fails
            DecodeError: If the body is not an array of word objects
        """
        return self._fetch_array(url, WordRecord.from_json)

    def fetch_suggestions(self, url: str) -> list[SuggestionEntry]:
        """Fetch and decode a ``/sug`` response.

        Args:
            url: URL from build_suggestions_url

        Returns:
            Suggestions in service order

        Raises:
            TransportError: If the request fails
            DecodeError: If the body is not an array of suggestion objects
        """
        return self._fetch_array(url, SuggestionEntry.from_json)

    def _build_url(self, path: str, params: dict[str, Any]) -> str:
        """Encode query parameters onto an endpoint URL.

        Args:
            path: Endpoint path relative to the API base URL
            params: Query parameters

        Returns:
            Fully encoded URL

        Raises:
            UrlConstructionError: If the base URL is malformed or a parameter
                cannot be UTF-8 encoded
        """
        if self.config.max_results is not None:
            params = {**params, "max": self.config.max_results}

        prepared = requests.PreparedRequest()
        try:
            prepared.prepare_url(f"{self.config.api_base_url}{path}", params)
        except (UnicodeError, ValueError, requests.RequestException) as e:
            raise UrlConstructionError(f"Cannot build URL for {params!r}: {e}") from e

        return prepared.url

    def _fetch_array(self, url: str, decode: Callable[[Any], T]) -> list[T]:
        """GET a URL and decode each element of its JSON array body.

        Raises:
            TransportError: On connection errors, timeouts and non-2xx statuses
            DecodeError: If the body is not a JSON array or an element is malformed
        """
        logger.debug(f"GET {url}")

        try:
            response = requests.get(
                url,
                headers={"Accept": "application/json"},
                timeout=self.config.request_timeout,
            )
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            raise TransportError(f"Request timed out: {url}") from e
        except requests.RequestException as e:
            raise TransportError(f"Request failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError(f"Response is not valid JSON: {url}") from e

        if not isinstance(data, list):
            raise DecodeError(f"Expected a JSON array, got {type(data).__name__}")

        return [decode(item) for item in data]
