from typing import Iterable, List

from models.pokemon import Pokemon


def matches(pokemon: Pokemon, query: str) -> bool:
    """
    Case-insensitive substring match against name, number and each type.
    """
    needle = query.lower()
    if needle in pokemon.name.lower():
        return True
    if needle in str(pokemon.id):
        return True
    return any(needle in type_name.lower() for type_name in pokemon.types)


def filter_pokemon(pokemon: Iterable[Pokemon], query: str) -> List[Pokemon]:
    """
    Returns the Pokémon matching `query`, in their original order.
    An empty query matches everything. Whitespace is not trimmed.
    """
    if not query:
        return list(pokemon)
    return [p for p in pokemon if matches(p, query)]
