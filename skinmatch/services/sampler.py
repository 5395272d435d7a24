"""
Weapon-diverse skin sampling.

Picks the skins for a round so that no weapon shows up twice while there
are still unused weapons to draw from. Only when the catalog runs out of
distinct weapons are repeats allowed.
"""

import random
from collections import defaultdict
from functools import lru_cache

from skinmatch.config import settings
from skinmatch.models.skin import Skin


def sample_skins(
    skins: list[Skin],
    count: int,
    rng: random.Random | None = None,
) -> list[Skin]:
    """
    Randomly select up to `count` skins, one per weapon where possible.

    Skins without an image are never selected.

    Args:
        skins: Full catalog
        count: Number of skins wanted. Zero or negative yields no skins.
        rng: Random source. Defaults to the shared generator.

    Returns:
        min(count, number of skins with images) distinct skins, in random order
    """
    if count <= 0:
        return []

    rng = rng or get_rng()

    valid = [skin for skin in skins if skin.has_image]
    if not valid:
        return []

    by_weapon: dict[str, list[Skin]] = defaultdict(list)
    for skin in valid:
        by_weapon[skin.weapon_id].append(skin)

    weapon_ids = list(by_weapon)
    rng.shuffle(weapon_ids)

    selected: list[Skin] = []
    for weapon_id in weapon_ids:
        if len(selected) >= count:
            break
        selected.append(rng.choice(by_weapon[weapon_id]))

    if len(selected) < count:
        # Out of distinct weapons: top up from skins not yet picked
        picked = {id(skin) for skin in selected}
        remaining = [skin for skin in valid if id(skin) not in picked]
        rng.shuffle(remaining)
        selected.extend(remaining[: count - len(selected)])

    return selected[:count]


@lru_cache(maxsize=1)
def get_rng() -> random.Random:
    """
    Get the shared random generator.

    Seeded from settings.random_seed when set, so rounds are reproducible.
    """
    return random.Random(settings.random_seed)
