# models/selection.py
from enum import Enum
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict

from .pokemon import Pokemon


class SelectionState(str, Enum):
    """Whether the detail overlay is showing a Pokémon."""

    CLOSED = "closed"
    OPEN = "open"


class Selection(BaseModel):
    """
    The single active selection. Transitions return a new Selection;
    an open selection only references an entry of the canonical list.
    """

    model_config = ConfigDict(frozen=True)

    state: SelectionState = SelectionState.CLOSED
    pokemon: Optional[Pokemon] = None

    @classmethod
    def closed(cls) -> "Selection":
        return cls()

    @property
    def is_open(self) -> bool:
        return self.state is SelectionState.OPEN

    def select(self, pokemon: Pokemon) -> "Selection":
        return Selection(state=SelectionState.OPEN, pokemon=pokemon)

    def dismiss(self) -> "Selection":
        return Selection.closed()

    def retain(self, available: Iterable[Pokemon]) -> "Selection":
        """Closes the selection if its Pokémon is no longer in `available`."""
        if not self.is_open:
            return self
        if any(p.id == self.pokemon.id for p in available):
            return self
        return Selection.closed()
