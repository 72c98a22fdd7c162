#!/usr/bin/env python3
"""
Load meals from a JSON file into the configured record store.
The file holds a list of {"title", "description", "chef"} objects.

Usage:
    python scripts/seed_meals.py meals.json          # Add meals
    python scripts/seed_meals.py meals.json --drop   # Clear existing meals first
"""

import sys
import json
import logging
import argparse
from pathlib import Path

import anyio

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from adapters import build_store  # noqa: E402
from app.config import settings  # noqa: E402
from app.exceptions import StoreError, StoreValidationError  # noqa: E402
from repositories.base import MealStore  # noqa: E402

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("seed_meals")


async def drop_meals(store: MealStore) -> int:
    """Delete every meal currently in the store. Returns how many were removed."""
    removed = 0
    for meal in await store.find_all():
        if await store.delete_by_id(meal.id) is not None:
            removed += 1
    return removed


async def seed_meals(store: MealStore, meals: list, drop: bool = False) -> tuple[int, int]:
    """Insert ``meals`` into ``store``. Returns (inserted, skipped)."""
    await store.connect()
    try:
        if drop:
            removed = await drop_meals(store)
            logger.info(f"Dropped {removed} existing meals")

        inserted = skipped = 0
        for entry in meals:
            if not isinstance(entry, dict):
                logger.warning(f"Skipping non-object entry {entry!r}")
                skipped += 1
                continue
            try:
                meal = await store.insert(entry)
            except StoreValidationError as e:
                logger.warning(f"Skipping invalid meal {entry!r}: {e.details}")
                skipped += 1
                continue
            inserted += 1
            logger.debug(f"Inserted {meal.id} ({meal.title})")

        return inserted, skipped
    finally:
        await store.close()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Seed the meals collection")
    parser.add_argument("file", type=Path, help="JSON file with a list of meals")
    parser.add_argument(
        "--drop", action="store_true", help="Remove existing meals before inserting"
    )
    args = parser.parse_args(argv)

    if not args.file.exists():
        logger.error(f"Meal file not found: {args.file}")
        return 1

    with open(args.file, "r", encoding="utf-8") as f:
        meals = json.load(f)

    if not isinstance(meals, list):
        logger.error("Meal file must contain a JSON list")
        return 1

    logger.info(f"Loaded {len(meals)} meals from {args.file}")

    try:
        inserted, skipped = anyio.run(seed_meals, build_store(settings), meals, args.drop)
    except StoreError as e:
        logger.error(f"Seeding failed: {e}")
        return 1

    logger.info(f"Inserted {inserted} meals, skipped {skipped}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
