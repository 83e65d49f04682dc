"""
Defines the canonical data model for a single Pokémon in the catalog.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


def format_tenths(raw: int) -> str:
    """Renders a value stored in tenths, e.g. 7 -> "0.7" and 690 -> "69"."""
    whole, tenth = divmod(raw, 10)
    if tenth == 0:
        return str(whole)
    return f"{whole}.{tenth}"


class Pokemon(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Core identifying information
    id: int = Field(..., gt=0)
    name: str
    types: List[str] = Field(..., min_length=1)

    # Official artwork when available, otherwise the default sprite
    sprite: Optional[str] = None

    # Raw PokéAPI units: decimetres and hectograms
    height: int = Field(..., ge=0)
    weight: int = Field(..., ge=0)

    @property
    def display_number(self) -> str:
        return f"#{self.id:03d}"

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @property
    def display_height(self) -> str:
        return format_tenths(self.height)

    @property
    def display_weight(self) -> str:
        return format_tenths(self.weight)
