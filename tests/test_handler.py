import json

import pytest
from flask import Flask

from ravnica.handler import CardHandler
from ravnica.models import ScryfallCard, ScryfallSearchResponse
from ravnica.scryfall import ScryfallError
from ravnica.service import CardService


class FakeClient:
    def __init__(self, search=None, card=None):
        self.search = search
        self.card = card
        self.search_calls = []
        self.card_calls = []

    def search_cards(self, query):
        self.search_calls.append(query)
        if isinstance(self.search, Exception):
            raise self.search
        return self.search

    def get_card_by_id(self, card_id):
        self.card_calls.append(card_id)
        if isinstance(self.card, Exception):
            raise self.card
        return self.card


def make_client(fake):
    app = Flask(__name__)
    CardHandler(CardService(fake)).register_routes(app)
    return app.test_client()


def bolt_response():
    return ScryfallSearchResponse(
        object="list",
        total_cards=1,
        has_more=False,
        data=[ScryfallCard(id="1", name="Lightning Bolt")],
    )


def test_successful_search():
    fake = FakeClient(search=bolt_response())
    resp = make_client(fake).get("/api/cards/search?q=lightning%20bolt")
    assert resp.status_code == 200
    assert fake.search_calls == ["lightning bolt"]
    body = json.loads(resp.data)
    assert len(body["cards"]) == 1
    assert body["cards"][0]["name"] == "Lightning Bolt"


def test_search_empty_query_is_bad_request():
    fake = FakeClient()
    resp = make_client(fake).get("/api/cards/search")
    assert resp.status_code == 400
    assert resp.data == b"Missing required 'q' parameter\n"
    assert fake.search_calls == []


def test_search_sets_json_and_cors_headers():
    fake = FakeClient(search=bolt_response())
    resp = make_client(fake).get("/api/cards/search?q=bolt")
    assert resp.headers["Content-Type"] == "application/json"
    assert resp.headers["Access-Control-Allow-Origin"] == "*"
    assert resp.headers["Access-Control-Allow-Methods"] == "GET, OPTIONS"
    assert resp.headers["Access-Control-Allow-Headers"] == "Content-Type"
    assert resp.data.endswith(b"\n")


def test_search_api_error_is_server_error():
    fake = FakeClient(search=ScryfallError("API error"))
    resp = make_client(fake).get("/api/cards/search?q=error")
    assert resp.status_code == 500
    assert b"API error" in resp.data
    assert fake.search_calls == ["error"]


def test_search_preflight():
    fake = FakeClient()
    resp = make_client(fake).open("/api/cards/search", method="OPTIONS")
    assert resp.status_code == 200
    assert resp.headers["Access-Control-Allow-Origin"] == "*"
    assert resp.data == b""
    assert fake.search_calls == []


def test_search_result_round_trips():
    fake = FakeClient(search=bolt_response())
    resp = make_client(fake).get("/api/cards/search?q=bolt")
    body = json.loads(resp.data)
    assert body == {
        "cards": [{"id": "1", "name": "Lightning Bolt"}],
        "total_cards": 1,
        "has_more": False,
    }


def test_get_card_by_id():
    fake = FakeClient(card=ScryfallCard(id="abc", name="Lightning Bolt"))
    resp = make_client(fake).get("/api/cards/abc")
    assert resp.status_code == 200
    assert fake.card_calls == ["abc"]
    assert json.loads(resp.data)["name"] == "Lightning Bolt"
    assert resp.headers["Access-Control-Allow-Origin"] == "*"


def test_get_card_not_found():
    fake = FakeClient(card=ScryfallError("card not found"))
    resp = make_client(fake).get("/api/cards/missing")
    assert resp.status_code == 404
    assert resp.data == b"Card not found\n"


@pytest.mark.parametrize(
    "message", ["received non-200 response from Scryfall API: 500", "boom"]
)
def test_get_card_other_error_is_server_error(message):
    fake = FakeClient(card=ScryfallError(message))
    resp = make_client(fake).get("/api/cards/xyz")
    assert resp.status_code == 500
    assert resp.data == (message + "\n").encode()


def test_get_card_preflight():
    fake = FakeClient()
    resp = make_client(fake).open("/api/cards/xyz", method="OPTIONS")
    assert resp.status_code == 200
    assert resp.headers["Access-Control-Allow-Methods"] == "GET, OPTIONS"
    assert fake.card_calls == []


def test_html_characters_are_escaped_in_json():
    fake = FakeClient(card=ScryfallCard(id="1", name="A<B>&C"))
    resp = make_client(fake).get("/api/cards/1")
    assert b"<" not in resp.data
    assert json.loads(resp.data)["name"] == "A<B>&C"


def test_post_is_not_allowed():
    fake = FakeClient(search=bolt_response())
    resp = make_client(fake).post("/api/cards/search?q=bolt")
    assert resp.status_code == 405
    assert fake.search_calls == []