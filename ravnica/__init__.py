"""HTTP API for searching and fetching Magic: The Gathering cards through Scryfall."""

__version__ = "0.1.0"