from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from boardgames.domain.entities.game import Game
from boardgames.domain.entities.paged_list import PagedList


class GameResponse(BaseModel):
    id: str
    title: str
    publisher: Optional[str] = None
    year: Optional[int] = None
    min_players: Optional[int] = Field(None, alias="minPlayers")
    max_players: Optional[int] = Field(None, alias="maxPlayers")
    min_age: Optional[int] = Field(None, alias="minAge")
    playing_time: Optional[int] = Field(None, alias="playingTime")
    description: Optional[str] = None

    class Config:
        populate_by_name = True

    @classmethod
    def from_game(cls, game: Game) -> "GameResponse":
        return cls(**game.to_dict())


class GamePageResponse(BaseModel):
    items: List[GameResponse]
    page: int
    size: int
    total_count: int = Field(..., alias="totalCount")
    total_pages: int = Field(..., alias="totalPages")

    class Config:
        populate_by_name = True

    @classmethod
    def from_paged_list(cls, paged: PagedList[Game]) -> "GamePageResponse":
        return cls(
            items=[GameResponse.from_game(game) for game in paged.items],
            page=paged.page,
            size=paged.size,
            total_count=paged.total_count,
            total_pages=paged.total_pages,
        )


class DeleteGameResponse(BaseModel):
    id: str
    deleted: bool = True
