from __future__ import annotations

from dataclasses import dataclass

from boardgames.application.ports.game_repository import GameRepository
from boardgames.application.services.create_game_service import CreateGameService
from boardgames.application.services.delete_game_service import DeleteGameService
from boardgames.application.services.get_game_service import GetGameService
from boardgames.application.services.list_games_service import ListGamesService
from boardgames.application.services.update_game_service import UpdateGameService
from boardgames.application.validation import GameValidationPolicy


@dataclass
class GameServices:
    list_games: ListGamesService
    get_game: GetGameService
    create_game: CreateGameService
    update_game: UpdateGameService
    delete_game: DeleteGameService

    @classmethod
    def build(
        cls,
        repository: GameRepository,
        policy: GameValidationPolicy = GameValidationPolicy(),
        admin_role: str = "admin",
    ) -> "GameServices":
        return cls(
            list_games=ListGamesService(repository),
            get_game=GetGameService(repository),
            create_game=CreateGameService(repository, policy, admin_role),
            update_game=UpdateGameService(repository, policy, admin_role),
            delete_game=DeleteGameService(repository, admin_role),
        )
