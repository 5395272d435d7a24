"""
Skin catalog records.

Mirrors the shape of the public CS:GO skins catalog. Only the fields the
game needs are modelled; anything else upstream sends is ignored.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Reference(BaseModel):
    """An (id, name) pointer to another catalog object."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""


class Rarity(BaseModel):
    """Rarity tier with its display color (hex string)."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    color: str = ""


class ImageReference(BaseModel):
    """A crate or collection the skin drops from."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    image: str | None = None


class Skin(BaseModel):
    """
    A single weapon skin.

    Attributes:
        id: Catalog identifier (e.g., "skin-65604")
        name: Display name (e.g., "AK-47 | Redline")
        weapon: Weapon this skin applies to; weapon.id groups skins for diversity
        min_float: Lowest wear value the skin can drop with
        max_float: Highest wear value the skin can drop with
        image: Image URL; a skin without one cannot be shown on a card
        crates: Cases that contain the skin, in catalog order
        collections: Collections that contain the skin, in catalog order
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str | None = ""
    weapon: Reference
    category: Reference | None = None
    pattern: Reference | None = None
    min_float: float | None = None
    max_float: float | None = None
    rarity: Rarity | None = None
    stattrak: bool = False
    souvenir: bool = False
    image: str | None = None
    team: Reference | None = None
    crates: list[ImageReference] = Field(default_factory=list)
    collections: list[ImageReference] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_float_bounds(self) -> "Skin":
        if (
            self.min_float is not None
            and self.max_float is not None
            and self.min_float > self.max_float
        ):
            raise ValueError(
                f"min_float {self.min_float} exceeds max_float {self.max_float} for {self.id}"
            )
        return self

    @property
    def weapon_id(self) -> str:
        """Grouping key used by the diversity sampler."""
        return self.weapon.id

    @property
    def has_image(self) -> bool:
        """True if the skin can be rendered on a card."""
        return bool(self.image)
