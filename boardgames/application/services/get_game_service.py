from __future__ import annotations

import logging

from boardgames.application.guards import load_existing
from boardgames.application.ports.game_repository import GameRepository
from boardgames.domain.entities.game import Game
from boardgames.domain.entities.principal import Principal

logger = logging.getLogger(__name__)


class GetGameService:
    def __init__(self, repository: GameRepository) -> None:
        self._repository = repository

    def execute(self, principal: Principal, game_id: str) -> Game:
        logger.debug("Getting game %r for %s", game_id, principal.name)
        return load_existing(self._repository, game_id)
