from unittest.mock import Mock, patch

import pytest
import requests

from adapters.catalog_source import CatalogLoadError
from adapters.pokeapi.pokeapi_api import LIST_ENDPOINT, PokeApi
from conftest import detail_payload

ARTWORK = "https://img.example/artwork/25.png"
FRONT = "https://img.example/front/25.png"


@pytest.fixture
def api(tmp_path):
    with patch("adapters.catalog_source.CACHE_DIR", tmp_path):
        yield PokeApi()


def json_response(body, status_code=200):
    response = Mock()
    response.status_code = status_code
    response.json.return_value = body
    return response


class TestParsePokemon:
    def test_normalizes_detail(self):
        pokemon = PokeApi.parse_pokemon(
            detail_payload(25, "pikachu", ["electric"], artwork=ARTWORK, front=FRONT, height=4, weight=60)
        )
        assert pokemon.id == 25
        assert pokemon.name == "pikachu"
        assert pokemon.types == ["electric"]
        assert pokemon.height == 4
        assert pokemon.weight == 60

    def test_flattens_types_in_order(self):
        pokemon = PokeApi.parse_pokemon(detail_payload(1, "bulbasaur", ["grass", "poison"]))
        assert pokemon.types == ["grass", "poison"]

    def test_prefers_official_artwork(self):
        pokemon = PokeApi.parse_pokemon(
            detail_payload(25, "pikachu", ["electric"], artwork=ARTWORK, front=FRONT)
        )
        assert pokemon.sprite == ARTWORK

    def test_falls_back_to_front_default(self):
        pokemon = PokeApi.parse_pokemon(
            detail_payload(25, "pikachu", ["electric"], artwork=None, front=FRONT)
        )
        assert pokemon.sprite == FRONT

    def test_no_sprite_at_all(self):
        payload = detail_payload(25, "pikachu", ["electric"])
        del payload["sprites"]["other"]
        assert PokeApi.parse_pokemon(payload).sprite is None

    @pytest.mark.parametrize("missing", ["id", "name", "types", "height", "weight"])
    def test_missing_field_is_a_load_error(self, missing):
        payload = detail_payload(25, "pikachu", ["electric"])
        del payload[missing]
        with pytest.raises(CatalogLoadError):
            PokeApi.parse_pokemon(payload)

    def test_no_types_is_a_load_error(self):
        with pytest.raises(CatalogLoadError):
            PokeApi.parse_pokemon(detail_payload(25, "pikachu", []))


class TestRequests:
    @patch("adapters.pokeapi.pokeapi_api.requests.get")
    def test_list_references(self, mock_get, api):
        mock_get.return_value = json_response(
            {"count": 2, "results": [{"name": "a", "url": "u1"}, {"name": "b", "url": "u2"}]}
        )

        assert api.list_references(151) == ["u1", "u2"]
        _, kwargs = mock_get.call_args
        assert kwargs["url"] == LIST_ENDPOINT
        assert kwargs["params"] == {"limit": 151}

    @patch("adapters.pokeapi.pokeapi_api.requests.get")
    def test_list_http_error(self, mock_get, api):
        mock_get.return_value = json_response({}, status_code=500)
        with pytest.raises(CatalogLoadError):
            api.list_references(151)

    @patch("adapters.pokeapi.pokeapi_api.requests.get")
    def test_list_malformed(self, mock_get, api):
        mock_get.return_value = json_response({"detail": "nope"})
        with pytest.raises(CatalogLoadError):
            api.list_references(151)

    @patch("adapters.pokeapi.pokeapi_api.requests.get")
    def test_network_failure(self, mock_get, api):
        mock_get.side_effect = requests.exceptions.ConnectionError("offline")
        with pytest.raises(CatalogLoadError) as excinfo:
            api.get_pokemon("https://pokeapi.co/api/v2/pokemon/25/")
        assert isinstance(excinfo.value.__cause__, requests.exceptions.ConnectionError)

    @patch("adapters.pokeapi.pokeapi_api.requests.get")
    def test_invalid_json(self, mock_get, api):
        response = json_response(None)
        response.json.side_effect = ValueError("not json")
        mock_get.return_value = response
        with pytest.raises(CatalogLoadError):
            api.get_pokemon("https://pokeapi.co/api/v2/pokemon/25/")

    @patch("adapters.pokeapi.pokeapi_api.requests.get")
    def test_get_pokemon(self, mock_get, api):
        mock_get.return_value = json_response(
            detail_payload(25, "pikachu", ["electric"], artwork=ARTWORK)
        )
        pokemon = api.get_pokemon("https://pokeapi.co/api/v2/pokemon/25/")
        assert pokemon.id == 25
        assert pokemon.sprite == ARTWORK
