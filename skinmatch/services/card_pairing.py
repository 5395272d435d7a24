"""
Card layout for a matching round.

Turns sampled skins into a shuffled deck of face-down cards where every
skin appears exactly twice.
"""

import random

from skinmatch.models.card import GameCard
from skinmatch.models.skin import Skin
from skinmatch.services.sampler import get_rng

DEFAULT_PAIR_COUNT = 8


def build_cards(
    skins: list[Skin],
    pair_count: int = DEFAULT_PAIR_COUNT,
    rng: random.Random | None = None,
) -> list[GameCard]:
    """
    Deal a round of paired cards.

    Takes the first `pair_count` skins in the order given, doubles them, and
    shuffles the result. Card ids are assigned before the shuffle, so they
    form a permutation of 0..2n-1 that does not match list position.

    Args:
        skins: Skins to deal from, usually a sample_skins() result
        pair_count: Number of pairs in the round
        rng: Random source. Defaults to the shared generator.

    Returns:
        2 * min(pair_count, len(skins)) cards with is_flipped/is_matched unset
    """
    rng = rng or get_rng()

    selected = skins[: max(pair_count, 0)]
    pairs = selected + selected

    cards = [
        GameCard(id=index, value=skin.name, image=skin.image, skin=skin)
        for index, skin in enumerate(pairs)
    ]
    rng.shuffle(cards)
    return cards
