from dataclasses import dataclass
from typing import Any

from skinmatch.models.skin import Skin


@dataclass(slots=True)
class GameCard:
    """
    One face-down card in a matching round.

    Attributes:
        id: Position of the card before the round was shuffled
        value: Text shown on the card face (the skin name)
        image: Image URL shown on the card face
        skin: Skin this card was dealt from; exactly two cards share it
        is_flipped: Card is currently face up
        is_matched: Card has been paired with its twin
    """

    id: int
    value: str
    image: str | None
    skin: Skin
    is_flipped: bool = False
    is_matched: bool = False

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation."""
        return {
            "id": self.id,
            "value": self.value,
            "image": self.image,
            "skin": self.skin.model_dump(mode="json"),
            "is_flipped": self.is_flipped,
            "is_matched": self.is_matched,
        }
