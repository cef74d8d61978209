import argparse
import logging
import random
from typing import Optional

from config import CONTAINERS, SIDES, settings
from schemas.product import ProductForm
from utils.product_store import ProductStore

logger = logging.getLogger(__name__)

# Configuration
DEFAULT_COUNT = 40
MAX_SHELF = 6
MAX_QUANTITY = 25
DEMO_NAMES = [
    "Tent pegs", "Camping stove", "Sleeping bag", "Head torch", "Rain poncho",
    "Water filter", "Trekking poles", "Dry bag", "Carabiner", "Gas canister",
    "First aid kit", "Fleece jacket", "Bivvy bag", "Compass", "Mess tin",
]
# End Configuration


def seed_products(store: ProductStore, count: int = DEFAULT_COUNT, rng: Optional[random.Random] = None) -> int:
    """Insert `count` random demo products spread over the default containers and sides."""
    rng = rng or random.Random()
    for _ in range(count):
        store.insert(ProductForm(
            name=rng.choice(DEMO_NAMES),
            container=rng.choice(CONTAINERS),
            side=rng.choice(SIDES),
            shelf=rng.randint(1, MAX_SHELF),
            quantity=rng.randint(0, MAX_QUANTITY),
        ))
    return count


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Fill the inventory database with demo products.")
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT)
    parser.add_argument("--reset", action="store_true", help="delete existing products first")
    parser.add_argument("--seed", type=int, default=None, help="random seed for repeatable data")
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.LOG_LEVEL.upper())

    store = ProductStore.from_url(settings.DATABASE_URL)
    if not store.ensure_schema():
        raise SystemExit(1)

    try:
        if args.reset:
            removed = store.clear()
            logger.info("Removed %d existing products", removed)

        inserted = seed_products(store, args.count, random.Random(args.seed))
        logger.info("Inserted %d demo products into %s", inserted, settings.DATABASE_URL)
    finally:
        store.dispose()


if __name__ == "__main__":
    main()
