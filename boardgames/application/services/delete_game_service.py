from __future__ import annotations

import logging

from boardgames.application.guards import load_existing, require_role
from boardgames.application.ports.game_repository import GameRepository
from boardgames.domain.entities.principal import Principal

logger = logging.getLogger(__name__)


class DeleteGameService:
    """Deletes a game, reporting ``GameNotFoundError`` for unknown ids.

    The repository tolerates deleting an absent id; the existence check here
    is what lets callers tell a missing game from a successful delete.
    """

    def __init__(self, repository: GameRepository, admin_role: str = "admin") -> None:
        self._repository = repository
        self._admin_role = admin_role

    def execute(self, principal: Principal, game_id: str) -> None:
        require_role(principal, self._admin_role)
        logger.debug("Deleting game %r", game_id)

        load_existing(self._repository, game_id)
        self._repository.delete(game_id)

        logger.info("User %s deleted game %s", principal.name, game_id)
