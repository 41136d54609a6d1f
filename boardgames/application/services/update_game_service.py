from __future__ import annotations

import logging

from boardgames.application.guards import load_existing, require_role
from boardgames.application.ports.game_repository import GameRepository
from boardgames.application.validation import GameValidationPolicy, RawGameInput, parse_game_input
from boardgames.domain.entities.game import Game
from boardgames.domain.entities.principal import Principal
from boardgames.domain.errors import RecordNotFoundError

logger = logging.getLogger(__name__)


class UpdateGameService:
    def __init__(
        self,
        repository: GameRepository,
        policy: GameValidationPolicy = GameValidationPolicy(),
        admin_role: str = "admin",
    ) -> None:
        self._repository = repository
        self._policy = policy
        self._admin_role = admin_role

    def execute(self, principal: Principal, game_id: str, model: RawGameInput) -> Game:
        require_role(principal, self._admin_role)
        game_input = parse_game_input(model, self._policy)
        logger.debug("Updating game %r", game_id)

        game = load_existing(self._repository, game_id)
        game_input.map_to_game(game)
        try:
            self._repository.update(game)
        except RecordNotFoundError:
            logger.error("Game %s disappeared between lookup and update", game_id)
            raise

        logger.info("User %s updated game %s", principal.name, game.id)
        return game
