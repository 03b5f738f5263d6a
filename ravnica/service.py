"""Card lookups built on the Scryfall client."""

from __future__ import annotations

from ravnica.models import ScryfallCard, SearchResult
from ravnica.scryfall import ScryfallClient, ScryfallError


class CardServiceError(Exception):
    """A card request could not be served."""


class CardService:
    """Searches and fetches cards through a Scryfall client."""

    def __init__(self, client: ScryfallClient | None = None) -> None:
        self.client = client if client is not None else ScryfallClient()

    def search_cards(self, query: str) -> SearchResult:
        """Search for cards matching ``query``."""
        if not query:
            raise CardServiceError("search query cannot be empty")
        try:
            response = self.client.search_cards(query)
        except ScryfallError as exc:
            raise CardServiceError(f"failed to search cards: {exc}") from exc
        return SearchResult(
            cards=response.data,
            total_cards=response.total_cards,
            has_more=response.has_more,
        )

    def get_card_by_id(self, card_id: str) -> ScryfallCard:
        """Fetch one card by its Scryfall ID."""
        if not card_id:
            raise CardServiceError("card ID cannot be empty")
        return self.client.get_card_by_id(card_id)