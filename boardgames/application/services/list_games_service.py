from __future__ import annotations

import logging

from boardgames.application.ports.game_repository import GameRepository
from boardgames.domain.entities.game import Game
from boardgames.domain.entities.paged_list import PagedList
from boardgames.domain.entities.principal import Principal

logger = logging.getLogger(__name__)


class ListGamesService:
    def __init__(self, repository: GameRepository) -> None:
        self._repository = repository

    def execute(self, principal: Principal, page: int = 1, size: int = 10) -> PagedList[Game]:
        logger.debug("Getting page %s (size %s) of games for %s", page, size, principal.name)
        return self._repository.get_page(page, size)
