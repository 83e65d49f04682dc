import os
import threading

import pytest

# Widgets are created without a display during tests.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from adapters.catalog_source import CatalogLoadError, CatalogSource
from models.pokemon import Pokemon


def make_pokemon(id, name, types, height=7, weight=69, sprite=None):
    return Pokemon(
        id=id,
        name=name,
        types=types,
        sprite=sprite or f"https://img.example/{id}.png",
        height=height,
        weight=weight,
    )


@pytest.fixture
def bulbasaur() -> Pokemon:
    return make_pokemon(1, "bulbasaur", ["grass", "poison"], height=7, weight=69)


@pytest.fixture
def ivysaur() -> Pokemon:
    return make_pokemon(2, "ivysaur", ["grass", "poison"], height=10, weight=130)


@pytest.fixture
def pikachu() -> Pokemon:
    return make_pokemon(25, "pikachu", ["electric"], height=4, weight=60)


@pytest.fixture
def catalog(bulbasaur, ivysaur, pikachu):
    return [bulbasaur, ivysaur, pikachu]


def detail_payload(id, name, types, artwork=None, front=None, height=7, weight=69):
    """A PokéAPI detail response body."""
    return {
        "id": id,
        "name": name,
        "types": [{"slot": i + 1, "type": {"name": t}} for i, t in enumerate(types)],
        "sprites": {
            "front_default": front,
            "other": {"official-artwork": {"front_default": artwork}},
        },
        "height": height,
        "weight": weight,
    }


class FakeSource(CatalogSource):
    """
    An in-memory catalog. Detail fetches finish in `completion_order`
    (default: reference order) and the URLs in `failing` raise.
    """

    def __init__(self, pokemon, completion_order=None, failing=()):
        self.entries = {f"https://pokeapi.test/pokemon/{p.id}/": p for p in pokemon}
        self.references = list(self.entries)
        self.completion_order = completion_order or self.references
        self.failing = set(failing)
        self.completed = []
        self._done = {url: threading.Event() for url in self.references}
        self._lock = threading.Lock()

    def list_references(self, limit):
        return self.references[:limit]

    def get_pokemon(self, detail_url):
        position = self.completion_order.index(detail_url)
        if position > 0:
            previous = self.completion_order[position - 1]
            if not self._done[previous].wait(timeout=5):
                raise TimeoutError(f"{previous} never completed")
        try:
            with self._lock:
                self.completed.append(detail_url)
            if detail_url in self.failing:
                raise CatalogLoadError(f"Request to {detail_url} returned HTTP 500")
            return self.entries[detail_url]
        finally:
            self._done[detail_url].set()

    def fetch_sprite(self, sprite_url):
        return None


def url_for(pokemon):
    return f"https://pokeapi.test/pokemon/{pokemon.id}/"
