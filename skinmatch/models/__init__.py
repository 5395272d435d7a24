from skinmatch.models.card import GameCard
from skinmatch.models.failure import (
    CatalogFetchError,
    FailureKind,
    KnownError,
    MethodNotAllowedError,
    ParseError,
    TransportError,
)
from skinmatch.models.skin import ImageReference, Rarity, Reference, Skin

__all__ = [
    "CatalogFetchError",
    "FailureKind",
    "GameCard",
    "ImageReference",
    "KnownError",
    "MethodNotAllowedError",
    "ParseError",
    "Rarity",
    "Reference",
    "Skin",
    "TransportError",
]
