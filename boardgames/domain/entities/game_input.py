from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from boardgames.domain.entities.game import Game


class GameInput(BaseModel):
    """Write-side shape of a game: every mutable field, never the id."""

    title: str = Field(..., min_length=1)
    publisher: Optional[str] = None
    year: Optional[int] = Field(None, ge=0)
    min_players: Optional[int] = Field(None, alias="minPlayers", ge=0)
    max_players: Optional[int] = Field(None, alias="maxPlayers", ge=0)
    min_age: Optional[int] = Field(None, alias="minAge", ge=0)
    playing_time: Optional[int] = Field(None, alias="playingTime", ge=0)
    description: Optional[str] = None

    class Config:
        populate_by_name = True
        extra = "forbid"

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be blank")
        return value

    @model_validator(mode="after")
    def _player_range(self) -> "GameInput":
        if (
            self.min_players is not None
            and self.max_players is not None
            and self.min_players > self.max_players
        ):
            raise ValueError("minPlayers must not exceed maxPlayers")
        return self

    def map_to_game(self, game: Game) -> Game:
        """Copy the fields the client supplied onto ``game``, leaving its id alone."""
        for name, value in self.model_dump(exclude_unset=True).items():
            setattr(game, name, value)
        return game
