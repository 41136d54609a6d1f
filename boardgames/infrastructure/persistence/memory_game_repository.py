from __future__ import annotations

import logging
from dataclasses import replace
from threading import Lock
from typing import Dict, Optional, Set

from boardgames.application.ports.game_repository import GameRepository, normalize_page
from boardgames.domain.entities.game import Game
from boardgames.domain.entities.paged_list import PagedList
from boardgames.domain.errors import RecordNotFoundError, StoreError
from boardgames.domain.id_generator import IdFactory, allocate_unique_id, generate_game_id

logger = logging.getLogger(__name__)


class InMemoryGameRepository(GameRepository):
    """Thread-safe in-memory storage for games."""

    def __init__(self, id_factory: IdFactory = generate_game_id) -> None:
        # dicts keep insertion order, which is the enumeration order
        self._games: Dict[str, Game] = {}
        self._retired: Set[str] = set()
        self._id_factory = id_factory
        self._lock = Lock()

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
                game.id = allocate_unique_id(self._id_factory, self._is_taken)
            elif self._is_taken(game.id):
                raise StoreError(f"Game id {game.id} is already in use.")
            self._games[game.id] = replace(game)
        logger.debug("Stored game %s", game.id)

    def update(self, game: Game) -> None:
        with self._lock:
            stored = self._games.get(game.id) if game.id is not None else None
            if stored is None:
                raise RecordNotFoundError(f"Game {game.id} not found.")
            stored.copy_fields_from(game)

    def delete(self, game_id: str) -> None:
        with self._lock:
            if self._games.pop(game_id, None) is not None:
                self._retired.add(game_id)

    def _is_taken(self, game_id: str) -> bool:
        return game_id in self._games or game_id in self._retired
