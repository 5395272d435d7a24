"""
Deal a matching round from the live catalog.

Fetches the skins catalog directly (no server, no cache), samples a
weapon-diverse set and prints the shuffled cards as JSON. Handy for
checking the upstream catalog and the dealing logic by hand.
"""

import argparse
import asyncio
import json
import logging
import random
import sys

from skinmatch.clients.skins_api import SkinsCatalogClient
from skinmatch.config import settings
from skinmatch.models.card import GameCard
from skinmatch.models.failure import CatalogFetchError
from skinmatch.services.card_pairing import build_cards
from skinmatch.services.sampler import sample_skins

logger = logging.getLogger(__name__)


async def deal_round(
    pair_count: int,
    rng: random.Random,
    client: SkinsCatalogClient | None = None,
) -> list[GameCard]:
    """Fetch the catalog and deal `pair_count` pairs."""
    client = client or SkinsCatalogClient()

    logger.info("Loading skins catalog...")
    skins = await client.fetch_all()

    selected = sample_skins(skins, pair_count, rng=rng)
    logger.info("Sampled %d of %d skins", len(selected), len(skins))

    return build_cards(selected, pair_count, rng=rng)


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Deal a SkinMatch round")
    parser.add_argument(
        "--pairs",
        type=int,
        default=settings.default_pair_count,
        help=f"Number of card pairs (default: {settings.default_pair_count})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=settings.random_seed,
        help="Seed for a reproducible round",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        cards = asyncio.run(deal_round(args.pairs, random.Random(args.seed)))
    except CatalogFetchError as e:
        logger.error("Failed to deal round: %s", e.message)
        sys.exit(1)

    json.dump([card.to_dict() for card in cards], sys.stdout, indent=2)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
