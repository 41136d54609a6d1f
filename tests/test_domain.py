import pytest

from boardgames.config import Settings
from boardgames.domain.entities.game import Game
from boardgames.domain.entities.game_input import GameInput
from boardgames.domain.entities.paged_list import PagedList
from boardgames.domain.entities.principal import Principal
from boardgames.domain.id_generator import SequentialIdGenerator, generate_game_id


def test_map_to_game_keeps_id_and_unset_fields():
    game = Game(title="Catan", publisher="Kosmos", year=1995, id="g1")

    GameInput(title="Catan 2", minPlayers=3).map_to_game(game)

    assert game.id == "g1"
    assert game.title == "Catan 2"
    assert game.min_players == 3
    assert game.publisher == "Kosmos"
    assert game.year == 1995


def test_game_input_accepts_field_names_and_strips_title():
    model = GameInput.model_validate({"title": "  Azul ", "min_players": 2})
    assert model.title == "Azul"
    assert model.min_players == 2


def test_game_from_dict_ignores_unknown_keys():
    game = Game.from_dict({"id": "g1", "title": "Catan", "rating": 9})
    assert game == Game(title="Catan", id="g1")


@pytest.mark.parametrize("total,size,pages", [(0, 10, 0), (10, 10, 1), (11, 10, 2), (1, 1, 1)])
def test_total_pages(total, size, pages):
    assert PagedList(page=1, size=size, total_count=total).total_pages == pages


def test_principal_roles():
    principal = Principal.of("alice", ["admin"])
    assert principal.has_role("admin")
    assert not principal.has_role("player")


def test_sequential_ids():
    ids = SequentialIdGenerator("g")
    assert [ids(), ids(), ids()] == ["g1", "g2", "g3"]


def test_generated_ids_are_slugs():
    adjective, noun, suffix = generate_game_id().split("-")
    assert adjective and noun
    assert len(suffix) == 4 and suffix.isdigit()


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("BOARDGAMES_STORAGE_BACKEND", "json")
    monkeypatch.setenv("BOARDGAMES_TITLE_MAX_LENGTH", "50")

    settings = Settings(_env_file=None)

    assert settings.storage_backend == "json"
    assert settings.validation_policy().title_max_length == 50
