# ravnica

A small JSON HTTP API for looking up Magic: The Gathering cards. Requests
are passed on to the public Scryfall API and the results come back in a
compact form, with permissive CORS headers so a browser front end can call
it directly.

## Installing

```
pip install .
```

## Running the server

```
ravnica
```

The server listens on the port named by the `PORT` environment variable,
or on 8080 when it is unset:

```
PORT=9000 ravnica
```

It stops cleanly on Ctrl-C or SIGTERM. Every request is logged at INFO
level with its method and path. If the server cannot start (for example,
`PORT` is not a number or the port is in use), it logs the reason and
exits with status 1.

## Endpoints

### `GET /api/cards/search?q=<query>`

Searches cards using Scryfall's query syntax. The `q` parameter is
required; without it the server answers `400` with a plain-text message.

```json
{"cards":[{"id":"...","name":"Lightning Bolt"}],"total_cards":1,"has_more":false}
```

A search that matches nothing returns an empty `cards` list rather than
an error. Any other failure talking to Scryfall gives `500` with the
error text as a plain-text body.

### `GET /api/cards/<id>`

Returns a single card by its Scryfall ID. When Scryfall answers with
anything other than `200` (an unknown ID included) the server answers
`500` with the error text, for example
`received non-200 response from Scryfall API: 404`.

Both endpoints answer `OPTIONS` preflight requests with an empty `200`
response carrying CORS headers that allow any origin, the `GET` and
`OPTIONS` methods, and the `Content-Type` header.

## Using it from Python

`ravnica.scryfall.ScryfallClient` talks to Scryfall directly. It takes an
optional `base_url`, `timeout` (seconds, default 10) and a
`requests.Session`, and raises `ScryfallError` on failure.

`ravnica.service.CardService` wraps a client, rejects empty queries and
IDs with `CardServiceError`, and turns search responses into a
`SearchResult`:

```python
from ravnica.scryfall import ScryfallClient
from ravnica.service import CardService

service = CardService(ScryfallClient())
result = service.search_cards("lightning bolt")
for card in result.cards:
    print(card.name, card.mana_cost)
```

The card data classes in `ravnica.models` (`ScryfallCard`, `CardFace`,
`ImageURI`, `Prices`, `ScryfallSearchResponse`, `ScryfallErrorResponse`,
`SearchResult`) each have `from_dict` and `to_dict`; `to_dict` leaves out
empty optional fields.

To embed the API in your own process, build the Flask application:

```python
from ravnica.handler import CardHandler
from ravnica.server import create_app

app = create_app(CardHandler(service))
```

`ravnica.server.Server(port, handler)` serves such an application with
the standard library's WSGI server until interrupted.

## What it does not do

Nothing is cached or stored: every request goes to Scryfall. Only the
first page of search results is returned; `has_more` says whether more
exist, but there is no endpoint for fetching the next page.

## Tests

```
pip install ".[test]"
pytest
```