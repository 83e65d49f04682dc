import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from enum import Enum
from typing import List, Optional

import constants as const
from adapters.catalog_source import CatalogLoadError, CatalogSource
from adapters.pokeapi.pokeapi_api import PokeApi
from models.pokemon import Pokemon

logger = logging.getLogger(__name__)

__all__ = ["CatalogLoadError", "CatalogLoader", "LoadPolicy"]


class LoadPolicy(str, Enum):
    """What a failed detail fetch does to the rest of the load."""

    ALL_OR_NOTHING = "all_or_nothing"
    BEST_EFFORT = "best_effort"


class CatalogLoader:
    """
    Fetches the reference list, then every detail concurrently, and
    reassembles the results in reference order.
    """

    def __init__(
        self,
        source: Optional[CatalogSource] = None,
        limit: int = const.POKEMON_LIMIT,
        policy: LoadPolicy = LoadPolicy.ALL_OR_NOTHING,
        max_workers: Optional[int] = const.MAX_CONCURRENT_FETCHES,
    ):
        self.source = source if source is not None else PokeApi()
        self.limit = limit
        self.policy = policy
        self.max_workers = max_workers

    def load(self) -> List[Pokemon]:
        try:
            references = self.source.list_references(self.limit)
        except CatalogLoadError:
            raise
        except Exception as e:
            raise CatalogLoadError(f"Failed to list Pokémon: {e}") from e

        if not references:
            return []

        logger.info(
            f"Fetching {len(references)} Pokémon details with policy {self.policy.value}..."
        )
        # Each slot is written once, by this thread, at its reference index.
        results: List[Optional[Pokemon]] = [None] * len(references)
        executor = ThreadPoolExecutor(
            max_workers=self.max_workers or len(references),
            thread_name_prefix="pokemon-detail",
        )
        try:
            futures = {
                executor.submit(self.source.get_pokemon, url): index
                for index, url in enumerate(references)
            }
            for future in as_completed(futures):
                index = futures[future]
                try:
                    results[index] = future.result()
                except Exception as e:
                    if self.policy is LoadPolicy.ALL_OR_NOTHING:
                        raise CatalogLoadError(
                            f"Failed to fetch {references[index]}: {e}"
                        ) from e
                    logger.warning(f"Skipping {references[index]}: {e}")
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        pokemon = [p for p in results if p is not None]
        if len(pokemon) < len(references):
            logger.warning(
                f"Loaded {len(pokemon)} of {len(references)} Pokémon; the rest failed."
            )
        return pokemon
