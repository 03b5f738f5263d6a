"""HTTP endpoints for card search and lookup."""

from __future__ import annotations

import json
from typing import Any

from flask import Flask, Response, request

from ravnica.scryfall import ScryfallError
from ravnica.service import CardService, CardServiceError

_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _error(message: str, status: int) -> Response:
    return Response(
        message + "\n",
        status=status,
        content_type="text/plain; charset=utf-8",
        headers={"X-Content-Type-Options": "nosniff"},
    )


def _json(payload: Any) -> Response:
    body = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
    for char, escape in _JSON_ESCAPES.items():
        body = body.replace(char, escape)
    return Response(
        body + "\n",
        status=200,
        content_type="application/json",
        headers=_CORS_HEADERS,
    )


def _preflight() -> Response:
    return Response("", status=200, headers=_CORS_HEADERS)


class CardHandler:
    """Serves the card endpoints from a card service."""

    def __init__(self, service: CardService | None = None) -> None:
        self.service = service if service is not None else CardService()

    def register_routes(self, app: Flask) -> None:
        """Attach the card endpoints to ``app``."""
        app.add_url_rule(
            "/api/cards/search",
            "search_cards",
            self.search_cards,
            methods=["GET", "OPTIONS"],
            provide_automatic_options=False,
        )
        app.add_url_rule(
            "/api/cards/<card_id>",
            "get_card_by_id",
            self.get_card_by_id,
            methods=["GET", "OPTIONS"],
            provide_automatic_options=False,
        )

    def search_cards(self) -> Response:
        """Handle ``GET /api/cards/search?q=...``."""
        if request.method == "OPTIONS":
            return _preflight()

        query = request.args.get("q", "")
        if not query:
            return _error("Missing required 'q' parameter", 400)

        try:
            result = self.service.search_cards(query)
        except (CardServiceError, ScryfallError) as exc:
            return _error(str(exc), 500)

        return _json(result.to_dict())

    def get_card_by_id(self, card_id: str = "") -> Response:
        """Handle ``GET /api/cards/<card_id>``."""
        if request.method == "OPTIONS":
            return _preflight()

        if not card_id:
            return _error("Card ID is required", 400)

        try:
            card = self.service.get_card_by_id(card_id)
        except (CardServiceError, ScryfallError) as exc:
            if "not found" in str(exc):
                return _error("Card not found", 404)
            return _error(str(exc), 500)

        return _json(card.to_dict())