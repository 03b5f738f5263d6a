"""HTTP client for the Scryfall card API."""

from __future__ import annotations

import json
from typing import Any, Callable, TypeVar
from urllib.parse import quote_plus

import requests

from ravnica.models import ScryfallCard, ScryfallErrorResponse, ScryfallSearchResponse

DEFAULT_BASE_URL = "https://api.scryfall.com"
DEFAULT_TIMEOUT = 10.0

_T = TypeVar("_T")


class ScryfallError(Exception):
    """A request to Scryfall failed or returned something unusable."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ScryfallClient:
    """Talks to the Scryfall API."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def search_cards(self, query: str) -> ScryfallSearchResponse:
        """Search for cards; a query with no matches gives an empty list."""
        response = self._get(f"{self.base_url}/cards/search?q={quote_plus(query)}")
        status = response.status_code
        if status != 200:
            if status == 404:
                return ScryfallSearchResponse(
                    object="list", total_cards=0, has_more=False, data=[]
                )
            try:
                error = ScryfallErrorResponse.from_dict(json.loads(response.content))
            except ValueError:
                pass
            else:
                raise ScryfallError(f"scryfall API error: {error.details}", status)
            raise ScryfallError(
                f"received non-200 response from Scryfall API: {status}", status
            )
        return self._decode(response.content, ScryfallSearchResponse.from_dict)

    def get_card_by_id(self, card_id: str) -> ScryfallCard:
        """Fetch one card by its Scryfall ID."""
        response = self._get(f"{self.base_url}/cards/{card_id}")
        status = response.status_code
        if status != 200:
            raise ScryfallError(
                f"received non-200 response from Scryfall API: {status}", status
            )
        return self._decode(response.content, ScryfallCard.from_dict)

    def _get(self, url: str) -> requests.Response:
        try:
            return self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise ScryfallError(f"error making request to Scryfall API: {exc}") from exc

    @staticmethod
    def _decode(body: bytes, build: Callable[[Any], _T]) -> _T:
        try:
            return build(json.loads(body))
        except ValueError as exc:
            raise ScryfallError(f"error parsing JSON response: {exc}") from exc