from __future__ import annotations

import logging

from boardgames.application.ports.game_repository import GameRepository
from boardgames.domain.entities.game import Game
from boardgames.domain.entities.principal import Principal
from boardgames.domain.errors import ForbiddenError, GameNotFoundError

logger = logging.getLogger(__name__)


def require_role(principal: Principal, role: str) -> None:
    """Reject callers without ``role`` before anything else is looked at."""
    if not principal.has_role(role):
        logger.warning("User %s lacks role %s", principal.name, role)
        raise ForbiddenError(f"Role '{role}' is required.")


def load_existing(repository: GameRepository, game_id: str) -> Game:
    if not game_id or not game_id.strip():
        raise GameNotFoundError("Game id must not be empty.")
    game = repository.get_by_id(game_id)
    if game is None:
        raise GameNotFoundError(f"Game {game_id} not found.")
    return game
