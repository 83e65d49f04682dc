import logging
from typing import List, Optional

import requests
from first import first
from pydantic import ValidationError

import constants as const
from adapters.catalog_source import CatalogLoadError, CatalogSource
from models.pokemon import Pokemon

logger = logging.getLogger(__name__)

LIST_ENDPOINT = const.POKEMON_LIST_ENDPOINT
OFFICIAL_ARTWORK = "official-artwork"


class PokeApi(CatalogSource):
    def __init__(self) -> None:
        super().__init__()
        self.headers = {
            "Accept": "application/json",
            "User-Agent": const.USER_AGENT,
        }

    def _get_json(self, url: str, params: Optional[dict] = None) -> dict:
        try:
            r = requests.get(
                url=url,
                params=params,
                headers=self.headers,
                timeout=const.REQUEST_TIMEOUT,
            )
        except requests.exceptions.RequestException as e:
            raise CatalogLoadError(f"Request to {url} failed: {e}") from e
        if r.status_code != requests.codes.ok:
            raise CatalogLoadError(f"Request to {url} returned HTTP {r.status_code}")
        try:
            return r.json()
        except ValueError as e:
            raise CatalogLoadError(f"Response from {url} is not valid JSON") from e

    def list_references(self, limit: int) -> List[str]:
        data = self._get_json(LIST_ENDPOINT, params={"limit": limit})
        try:
            references = [result["url"] for result in data["results"]]
        except (KeyError, TypeError) as e:
            raise CatalogLoadError(f"Malformed Pokémon list response: {e}") from e
        logger.info(f"Listed {len(references)} Pokémon references.")
        return references

    def get_pokemon(self, detail_url: str) -> Pokemon:
        return self.parse_pokemon(self._get_json(detail_url))

    @staticmethod
    def parse_pokemon(detail: dict) -> Pokemon:
        """
        Normalizes a PokéAPI detail payload. The official artwork is preferred;
        the default front sprite is the fallback.
        """
        try:
            sprites = detail.get("sprites") or {}
            artwork = (sprites.get("other") or {}).get(OFFICIAL_ARTWORK) or {}
            return Pokemon(
                id=detail["id"],
                name=detail["name"],
                types=[t["type"]["name"] for t in detail["types"]],
                sprite=first(
                    [artwork.get("front_default"), sprites.get("front_default")]
                ),
                height=detail["height"],
                weight=detail["weight"],
            )
        except (AttributeError, KeyError, TypeError, ValidationError) as e:
            raise CatalogLoadError(f"Malformed Pokémon payload: {e}") from e
