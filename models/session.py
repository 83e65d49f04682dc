import logging
from typing import Iterable, List, Tuple

from search import filter_pokemon

from .pokemon import Pokemon
from .selection import Selection

logger = logging.getLogger(__name__)


class CatalogSession:
    """
    All state for one browsing session. Only the GUI thread touches it.
    """

    def __init__(self):
        self.pokemon: Tuple[Pokemon, ...] = ()
        self.query = ""
        self.loading = True
        self.selection = Selection.closed()

    def finish_load(self, pokemon: Iterable[Pokemon]):
        self.pokemon = tuple(pokemon)
        self.loading = False
        self.selection = self.selection.retain(self.pokemon)
        logger.info(f"Catalog loaded with {len(self.pokemon)} Pokémon.")

    def fail_load(self):
        self.loading = False

    def set_query(self, query: str):
        self.query = query

    def filtered(self) -> List[Pokemon]:
        return filter_pokemon(self.pokemon, self.query)

    @property
    def result_count_visible(self) -> bool:
        return self.query != ""

    @property
    def empty_state_visible(self) -> bool:
        return not self.loading and self.query != "" and not self.filtered()

    def select(self, pokemon: Pokemon) -> Selection:
        self.selection = self.selection.select(pokemon)
        return self.selection

    def dismiss(self) -> Selection:
        self.selection = self.selection.dismiss()
        return self.selection
