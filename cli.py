import argparse
import logging
import sys

import constants as const
from catalog_loader import CatalogLoader, CatalogLoadError, LoadPolicy
from search import filter_pokemon

# --- Basic Logging Setup ---
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger("CLI")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Load the Pokédex once and print the Pokémon matching a query."
    )
    parser.add_argument(
        "query",
        type=str,
        nargs="?",
        default="",
        help="Text matched against name, number and type (e.g., pika, 25, grass).",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=const.POKEMON_LIMIT,
        help=f"How many Pokémon to load (default: {const.POKEMON_LIMIT}).",
    )
    parser.add_argument(
        "--best-effort",
        action="store_true",
        help="Skip Pokémon whose details fail to load instead of failing the whole load.",
    )
    return parser


def main(argv=None):
    """Main function for the CLI tool."""
    args = build_parser().parse_args(argv)
    policy = LoadPolicy.BEST_EFFORT if args.best_effort else LoadPolicy.ALL_OR_NOTHING

    try:
        pokemon = CatalogLoader(limit=args.limit, policy=policy).load()
    except CatalogLoadError as e:
        logger.error(f"Error fetching Pokémon: {e}", exc_info=True)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("\nProcess interrupted by user. Exiting.")
        sys.exit(0)

    matches = filter_pokemon(pokemon, args.query)
    for p in matches:
        print(f"{p.display_number} {p.display_name} [{', '.join(p.types)}]")
    logger.info(f"Found {len(matches)} of {len(pokemon)} Pokémon.")
    sys.exit(0)


if __name__ == "__main__":
    main()
