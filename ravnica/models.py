"""Card data as exchanged with the Scryfall API and served by this service."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import MISSING, dataclass, field, fields
from typing import Any, TypeVar

_T = TypeVar("_T")

# Fields marked "always" are written even when empty; the rest are omitted.
_ALWAYS = {"always": True}


def _one(model: type) -> Any:
    return field(default=None, metadata={"model": model})


def _many(model: type, *, always: bool = False) -> Any:
    return field(default_factory=list, metadata={"model": model, "many": True, "always": always})


def _decode(cls: type[_T], data: Any) -> _T:
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{cls.__name__} must be a JSON object, got {type(data).__name__}")
    kwargs: dict[str, Any] = {}
    for f in fields(cls):
        value = data.get(f.name)
        if value is None:
            continue
        model = f.metadata.get("model")
        if model is None:
            expected = type(f.default) if f.default is not MISSING else str
            if type(value) is not expected:
                raise ValueError(
                    f"field {f.name!r} must be {expected.__name__}, got {type(value).__name__}"
                )
        elif f.metadata.get("many"):
            if not isinstance(value, list):
                raise ValueError(f"field {f.name!r} must be a list, got {type(value).__name__}")
            value = [model.from_dict(item) for item in value]
        else:
            value = model.from_dict(value)
        kwargs[f.name] = value
    return cls(**kwargs)


def _encode(obj: Any) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if not f.metadata.get("always") and (value is None or value in ("", [])):
            continue
        if f.metadata.get("model") is not None:
            value = [item.to_dict() for item in value] if f.metadata.get("many") else value.to_dict()
        out[f.name] = value
    return out


@dataclass
class ImageURI:
    """URLs of a card's images in different sizes."""

    small: str = ""
    normal: str = ""
    large: str = ""
    png: str = ""
    art_crop: str = ""
    border_crop: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> ImageURI:
        return _decode(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _encode(self)


@dataclass
class CardFace:
    """One face of a double-faced card."""

    name: str = ""
    type_line: str = ""
    oracle_text: str = ""
    mana_cost: str = ""
    image_uris: ImageURI | None = _one(ImageURI)
    power: str = ""
    toughness: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> CardFace:
        return _decode(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _encode(self)


@dataclass
class Prices:
    """Pricing information for a card."""

    usd: str = ""
    usd_foil: str = ""
    eur: str = ""
    eur_foil: str = ""
    tix: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Prices:
        return _decode(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _encode(self)


@dataclass
class ScryfallCard:
    """A card as returned by Scryfall."""

    id: str = field(default="", metadata=_ALWAYS)
    name: str = field(default="", metadata=_ALWAYS)
    image_uris: ImageURI | None = _one(ImageURI)
    mana_cost: str = ""
    type_line: str = ""
    oracle_text: str = ""
    power: str = ""
    toughness: str = ""
    rarity: str = ""
    set: str = ""
    set_name: str = ""
    prices: Prices | None = _one(Prices)
    card_faces: list[CardFace] = _many(CardFace)

    @classmethod
    def from_dict(cls, data: Any) -> ScryfallCard:
        return _decode(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _encode(self)


@dataclass
class ScryfallSearchResponse:
    """The list Scryfall returns for a search query."""

    object: str = field(default="", metadata=_ALWAYS)
    total_cards: int = field(default=0, metadata=_ALWAYS)
    has_more: bool = field(default=False, metadata=_ALWAYS)
    next_page: str = ""
    data: list[ScryfallCard] = _many(ScryfallCard, always=True)

    @classmethod
    def from_dict(cls, data: Any) -> ScryfallSearchResponse:
        return _decode(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _encode(self)


@dataclass
class ScryfallErrorResponse:
    """An error object returned by Scryfall."""

    object: str = field(default="", metadata=_ALWAYS)
    code: str = field(default="", metadata=_ALWAYS)
    status: int = field(default=0, metadata=_ALWAYS)
    details: str = field(default="", metadata=_ALWAYS)

    @classmethod
    def from_dict(cls, data: Any) -> ScryfallErrorResponse:
        return _decode(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _encode(self)


@dataclass
class SearchResult:
    """The search response served by this API."""

    cards: list[ScryfallCard] = _many(ScryfallCard, always=True)
    total_cards: int = field(default=0, metadata=_ALWAYS)
    has_more: bool = field(default=False, metadata=_ALWAYS)

    @classmethod
    def from_dict(cls, data: Any) -> SearchResult:
        return _decode(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _encode(self)