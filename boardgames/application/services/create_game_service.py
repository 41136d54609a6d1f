from __future__ import annotations

import logging
from dataclasses import dataclass

from boardgames.application.guards import require_role
from boardgames.application.ports.game_repository import GameRepository
from boardgames.application.validation import GameValidationPolicy, RawGameInput, parse_game_input
from boardgames.domain.entities.game import Game
from boardgames.domain.entities.principal import Principal

logger = logging.getLogger(__name__)


@dataclass
class CreateGameResult:
    game_id: str
    game: Game


class CreateGameService:
    def __init__(
        self,
        repository: GameRepository,
        policy: GameValidationPolicy = GameValidationPolicy(),
        admin_role: str = "admin",
    ) -> None:
        self._repository = repository
        self._policy = policy
        self._admin_role = admin_role

    def execute(self, principal: Principal, model: RawGameInput) -> CreateGameResult:
        require_role(principal, self._admin_role)
        game_input = parse_game_input(model, self._policy)
        logger.debug("Creating a new game with title %r", game_input.title)

        game = game_input.map_to_game(Game())
        self._repository.create(game)

        logger.info("User %s created game %s", principal.name, game.id)
        return CreateGameResult(game_id=game.id, game=game)
