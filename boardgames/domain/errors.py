from __future__ import annotations

from typing import Iterable, List


class GameError(Exception):
    """Base class for game-related domain errors."""


class ForbiddenError(GameError):
    """Raised when the caller lacks the role an operation requires."""


class GameNotFoundError(GameError):
    """Raised when the requested game does not exist."""


class InvalidGameInputError(GameError):
    """Raised when a game input model fails validation."""

    def __init__(self, problems: Iterable[str]) -> None:
        self.problems: List[str] = list(problems)
        super().__init__("; ".join(self.problems) or "Invalid game input.")


class StoreError(GameError):
    """Raised when the persistence layer cannot complete an operation."""


class RecordNotFoundError(StoreError):
    """Raised by a repository update when the stored record has vanished."""
