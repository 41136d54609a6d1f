from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import replace
from threading import Lock
from typing import Any, Dict, List, NoReturn, Optional

from boardgames.application.ports.game_repository import GameRepository, normalize_page
from boardgames.domain.entities.game import Game
from boardgames.domain.entities.paged_list import PagedList
from boardgames.domain.errors import RecordNotFoundError, StoreError
from boardgames.domain.id_generator import IdFactory, allocate_unique_id, generate_game_id

logger = logging.getLogger(__name__)


class JsonFileGameRepository(GameRepository):
    """Persists games to a single JSON document.

    Schema::

        {
            "games": [{"id": "...", "title": "...", ...}, ...],
            "retired_ids": ["...", ...]
        }

    ``games`` is kept in creation order. The whole document is rewritten
    atomically (write to a temp file, then rename) after every mutation; if
    the write fails the in-memory view is restored and ``StoreError`` raised.
    """

    def __init__(self, file_path: str, id_factory: IdFactory = generate_game_id) -> None:
        self._path = file_path
        self._id_factory = id_factory
        self._lock = Lock()
        self._games: Dict[str, Game] = {}
        self._retired: List[str] = []
        self._read_document(self._load())

    def get_by_id(self, game_id: str) -> Optional[Game]:
        with self._lock:
            game = self._games.get(game_id)
            return replace(game) if game is not None else None

    def get_page(self, page: int, size: int) -> PagedList[Game]:
        page, size = normalize_page(page, size)
        offset = (page - 1) * size
        with self._lock:
            games = list(self._games.values())
            return PagedList(
                page=page,
                size=size,
                total_count=len(games),
                items=[replace(game) for game in games[offset : offset + size]],
            )

    def create(self, game: Game) -> None:
        with self._lock:
            if game.id is None:
                game_id = allocate_unique_id(self._id_factory, self._is_taken)
            elif self._is_taken(game.id):
                raise StoreError(f"Game id {game.id} is already in use.")
            else:
                game_id = game.id
            self._games[game_id] = replace(game, id=game_id)
            try:
                self._flush()
            except StoreError:
                del self._games[game_id]
                raise
            game.id = game_id

    def update(self, game: Game) -> None:
        with self._lock:
            stored = self._games.get(game.id) if game.id is not None else None
            if stored is None:
                raise RecordNotFoundError(f"Game {game.id} not found.")
            previous = replace(stored)
            stored.copy_fields_from(game)
            try:
                self._flush()
            except StoreError:
                stored.copy_fields_from(previous)
                raise

    def delete(self, game_id: str) -> None:
        with self._lock:
            if game_id not in self._games:
                return
            snapshot = dict(self._games)
            del self._games[game_id]
            self._retired.append(game_id)
            try:
                self._flush()
            except StoreError:
                self._games = snapshot
                self._retired.pop()
                raise

    def _is_taken(self, game_id: str) -> bool:
        return game_id in self._games or game_id in self._retired

    def _load(self) -> Dict[str, Any]:
        if not os.path.exists(self._path):
            return {}
        try:
            with open(self._path, "r", encoding="utf-8") as fh:
                document = json.load(fh)
        except (OSError, ValueError) as exc:
            logger.error("Could not load %s: %s", self._path, exc)
            raise StoreError(f"Could not load game store {self._path}.") from exc
        if not isinstance(document, dict):
            self._corrupt("top level is not a JSON object")
        return document

    def _read_document(self, document: Dict[str, Any]) -> None:
        games = document.get("games", [])
        if not isinstance(games, list):
            self._corrupt("'games' is not a list")
        for position, raw in enumerate(games):
            if not isinstance(raw, dict):
                self._corrupt(f"game #{position} is not an object")
            game_id, title = raw.get("id"), raw.get("title")
            if not isinstance(game_id, str) or not game_id:
                self._corrupt(f"game #{position} has no id")
            if not isinstance(title, str):
                self._corrupt(f"game {game_id} has no title")
            if game_id in self._games:
                self._corrupt(f"game {game_id} appears twice")
            self._games[game_id] = Game.from_dict(raw)

        retired = document.get("retired_ids", [])
        if not isinstance(retired, list) or not all(isinstance(i, str) for i in retired):
            self._corrupt("'retired_ids' is not a list of strings")
        self._retired = list(retired)

    def _corrupt(self, problem: str) -> NoReturn:
        logger.error("Game store %s is corrupt: %s", self._path, problem)
        raise StoreError(f"Game store {self._path} is corrupt: {problem}.")

    def _flush(self) -> None:
        document = {
            "games": [game.to_dict() for game in self._games.values()],
            "retired_ids": self._retired,
        }
        dir_name = os.path.dirname(os.path.abspath(self._path))
        try:
            os.makedirs(dir_name, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=dir_name, suffix=".tmp")
        except OSError as exc:
            logger.error("Could not write %s: %s", self._path, exc)
            raise StoreError(f"Could not write game store {self._path}.") from exc
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(document, fh, indent=2)
            os.replace(tmp_path, self._path)
        except OSError as exc:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            logger.error("Could not write %s: %s", self._path, exc)
            raise StoreError(f"Could not write game store {self._path}.") from exc
