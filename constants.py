from enum import Enum
from pathlib import Path
from types import MappingProxyType

# --- Local Storage ---
CACHE_DIR = Path("image_cache")


# --- API & Network ---
USER_AGENT = "Pokedex v0.1"
POKEAPI_BASE_URL = "https://pokeapi.co/api/v2"
POKEMON_LIST_ENDPOINT = POKEAPI_BASE_URL + "/pokemon"
POKEMON_LIMIT = 151
# None issues every detail request at once; set an int to cap the pool.
MAX_CONCURRENT_FETCHES = None
REQUEST_TIMEOUT = 30


# --- UI Text ---
class UIText(Enum):
    TITLE = "Pokédex"
    SUBTITLE = "Search and discover Pokémon"
    SEARCH_PLACEHOLDER = "Search by name, number, or type..."
    LOADING = "Loading..."
    LOADING_POKEMON = "Loading Pokémon..."
    FOUND_COUNT = "Found {count} Pokémon"
    NO_MATCHES = 'No Pokémon found matching "{query}"'
    NO_IMAGE = "No Image"
    IMAGE_NOT_AVAILABLE = "Image Not Available"
    HEIGHT = "Height"
    WEIGHT = "Weight"
    CLOSE = "×"


# --- Type Badges ---
DEFAULT_TYPE_COLOR = "#9ca3af"

TYPE_COLORS = MappingProxyType(
    {
        "normal": "#9ca3af",
        "fire": "#ef4444",
        "water": "#3b82f6",
        "electric": "#facc15",
        "grass": "#22c55e",
        "ice": "#bfdbfe",
        "fighting": "#b91c1c",
        "poison": "#a855f7",
        "ground": "#ca8a04",
        "flying": "#818cf8",
        "psychic": "#ec4899",
        "bug": "#4ade80",
        "rock": "#854d0e",
        "ghost": "#7e22ce",
        "dragon": "#4338ca",
        "dark": "#1f2937",
        "steel": "#6b7280",
        "fairy": "#f9a8d4",
    }
)


def type_color(type_name: str) -> str:
    return TYPE_COLORS.get(type_name, DEFAULT_TYPE_COLOR)


# --- Layout ---
GRID_COLUMNS = 5
CARD_IMAGE_SIZE = 150
DETAIL_IMAGE_SIZE = 200
