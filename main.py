"""Simple entrypoint to compose outfits from the local catalog."""

import argparse
import json
import random

from evaluation.scenarios import catalog_fixtures
from models.product import from_raw_metadata
from stylist_app.app import StylistApp


def main() -> None:
    parser = argparse.ArgumentParser(description="Compose ranked outfits for a palette and occasion.")
    parser.add_argument("--occasion", default=None)
    parser.add_argument("--palette", default="", help="Comma-separated #RRGGBB colors")
    parser.add_argument("--user-id", default=None)
    parser.add_argument("--max", type=int, default=None, dest="max_combinations")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--seed-demo-catalog", action="store_true")
    args = parser.parse_args()

    app = StylistApp()
    if args.seed_demo_catalog and not app.catalog_store.fetch_products():
        for row in catalog_fixtures():
            app.catalog_store.create_product(from_raw_metadata(row))

    palette = [color.strip() for color in args.palette.split(",") if color.strip()]
    response = app.recommend_outfits(
        user_id=args.user_id,
        occasion=args.occasion,
        max_combinations=args.max_combinations,
        palette=palette or None,
        rng=random.Random(args.seed) if args.seed is not None else None,
    )
    print(json.dumps(response, indent=2))


if __name__ == "__main__":
    main()
