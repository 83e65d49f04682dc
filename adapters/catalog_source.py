import hashlib
import logging
from abc import ABC, abstractmethod
from pathlib import Path, PurePosixPath
from typing import List, Optional, Tuple
from urllib.parse import urlparse

import requests

from models.pokemon import Pokemon
from constants import CACHE_DIR, REQUEST_TIMEOUT, USER_AGENT

logger = logging.getLogger(__name__)


class CatalogLoadError(Exception):
    """Raised when the catalog, or any entry of it, cannot be fetched."""


class CatalogSource(ABC):
    """
    Where Pokémon come from. Subclasses fetch the catalog; sprites are
    shared and kept on disk under CACHE_DIR, keyed by a hash of their URL.
    """

    @abstractmethod
    def list_references(self, limit: int) -> List[str]:
        """Return the detail URLs of the first `limit` catalog entries, in order."""
        pass

    @abstractmethod
    def get_pokemon(self, detail_url: str) -> Pokemon:
        """Fetch and normalize one catalog entry."""
        pass

    def fetch_sprite(self, sprite_url: Optional[str]) -> Optional[Tuple[bytes, str]]:
        """Returns (image bytes, cache file path), or None if the sprite is unavailable."""
        if not sprite_url:
            return None
        sprite_path = self.sprite_cache_path(sprite_url)
        if sprite_path.is_file():
            return sprite_path.read_bytes(), str(sprite_path.resolve())

        try:
            r = requests.get(
                url=sprite_url,
                headers={"User-Agent": USER_AGENT},
                timeout=REQUEST_TIMEOUT,
            )
        except requests.exceptions.RequestException as e:
            logger.warning(f"Sprite download failed for {sprite_url}: {e}")
            return None
        if r.status_code != requests.codes.ok:
            logger.warning(f"Sprite request for {sprite_url} returned {r.status_code}")
            return None

        self._cache_sprite(sprite_path, r.content)
        return r.content, str(sprite_path.resolve())

    def sprite_cache_path(self, sprite_url: str) -> Path:
        # PokéAPI sprites are PNGs; keep whatever suffix the URL carries.
        suffix = PurePosixPath(urlparse(sprite_url).path).suffix or ".png"
        return CACHE_DIR / (hashlib.md5(sprite_url.encode()).hexdigest() + suffix)

    def _cache_sprite(self, sprite_path: Path, data: bytes):
        sprite_path.parent.mkdir(parents=True, exist_ok=True)
        sprite_path.write_bytes(data)
