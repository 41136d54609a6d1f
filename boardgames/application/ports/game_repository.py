from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from boardgames.domain.entities.game import Game
from boardgames.domain.entities.paged_list import PagedList


class GameRepository(ABC):
    """Storage boundary for board games.

    Records are enumerated in ascending creation order. Implementations must
    be safe to call from several threads at once.
    """

    @abstractmethod
    def get_by_id(self, game_id: str) -> Optional[Game]:
        """Return the game with ``game_id``, or ``None`` if there is none."""

    @abstractmethod
    def get_page(self, page: int, size: int) -> PagedList[Game]:
        """Return one page of games; ``page`` is 1-based."""

    @abstractmethod
    def create(self, game: Game) -> None:
        """Persist a new game, assigning ``game.id`` when it is unset."""

    @abstractmethod
    def update(self, game: Game) -> None:
        """Overwrite the stored game with the same id.

        Raises ``RecordNotFoundError`` if that id no longer exists.
        """

    @abstractmethod
    def delete(self, game_id: str) -> None:
        """Remove the game if present; absent ids are ignored."""


def normalize_page(page: int, size: int) -> Tuple[int, int]:
    return max(page, 1), max(size, 1)
