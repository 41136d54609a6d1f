import json
import os

import pytest

from boardgames.domain.entities.game import Game
from boardgames.domain.errors import RecordNotFoundError, StoreError
from boardgames.domain.id_generator import SequentialIdGenerator
from boardgames.infrastructure.persistence.json_game_repository import JsonFileGameRepository


@pytest.fixture
def store_path(tmp_path):
    return str(tmp_path / "data" / "games.json")


@pytest.fixture
def json_repository(store_path):
    return JsonFileGameRepository(store_path, id_factory=SequentialIdGenerator())


def test_missing_file_starts_empty(json_repository, store_path):
    assert json_repository.get_page(1, 10).total_count == 0
    assert not os.path.exists(store_path)


def test_create_writes_document(json_repository, store_path):
    game = Game(title="Catan", min_players=3, max_players=4)
    json_repository.create(game)

    with open(store_path, encoding="utf-8") as fh:
        document = json.load(fh)
    assert document["games"][0]["id"] == game.id
    assert document["games"][0]["title"] == "Catan"


def test_games_survive_reload(json_repository, store_path):
    catan = Game(title="Catan")
    azul = Game(title="Azul")
    json_repository.create(catan)
    json_repository.create(azul)
    catan.title = "Catan 2"
    json_repository.update(catan)

    reloaded = JsonFileGameRepository(store_path)
    assert [game.title for game in reloaded.get_page(1, 10).items] == ["Catan 2", "Azul"]
    assert reloaded.get_by_id(azul.id) == azul


def test_deleted_ids_stay_retired_after_reload(json_repository, store_path):
    game = Game(title="Catan")
    json_repository.create(game)
    json_repository.delete(game.id)

    reloaded = JsonFileGameRepository(store_path, id_factory=SequentialIdGenerator())
    fresh = Game(title="Azul")
    reloaded.create(fresh)
    assert fresh.id != game.id


def test_update_of_vanished_record_raises(json_repository):
    with pytest.raises(RecordNotFoundError):
        json_repository.update(Game(title="Ghost", id="g9"))


def test_delete_absent_is_noop(json_repository, store_path):
    json_repository.delete("missing")
    assert not os.path.exists(store_path)


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[]",
        json.dumps({"games": ["oops"]}),
        json.dumps({"games": {"a": 1}}),
        json.dumps({"games": [{"title": "No id"}]}),
        json.dumps({"games": [{"id": 7, "title": "Numeric id"}]}),
        json.dumps({"games": [{"id": "g1"}]}),
        json.dumps({"games": [{"id": "g1", "title": "A"}, {"id": "g1", "title": "B"}]}),
        json.dumps({"retired_ids": 5}),
        json.dumps({"retired_ids": [1, 2]}),
    ],
)
def test_corrupt_document_is_a_store_error(store_path, content):
    os.makedirs(os.path.dirname(store_path))
    with open(store_path, "w", encoding="utf-8") as fh:
        fh.write(content)

    with pytest.raises(StoreError):
        JsonFileGameRepository(store_path)


def test_failed_write_rolls_back(json_repository, monkeypatch):
    kept = Game(title="Kept")
    json_repository.create(kept)

    def broken_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(os, "replace", broken_replace)

    with pytest.raises(StoreError):
        json_repository.create(Game(title="Lost"))
    changed = json_repository.get_by_id(kept.id)
    changed.title = "Changed"
    with pytest.raises(StoreError):
        json_repository.update(changed)
    with pytest.raises(StoreError):
        json_repository.delete(kept.id)

    paged = json_repository.get_page(1, 10)
    assert [game.title for game in paged.items] == ["Kept"]
