from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Union

from pydantic import ValidationError

from boardgames.domain.entities.game_input import GameInput
from boardgames.domain.errors import InvalidGameInputError

RawGameInput = Union[GameInput, Mapping[str, Any], bytes, str]


@dataclass(frozen=True)
class GameValidationPolicy:
    """Limits applied on top of the structural checks of ``GameInput``."""

    title_max_length: int = 200
    publisher_max_length: int = 200
    description_max_length: int = 2000
    max_players_limit: int = 100

    def check(self, model: GameInput) -> List[str]:
        problems: List[str] = []
        _check_length(problems, "title", model.title, self.title_max_length)
        _check_length(problems, "publisher", model.publisher, self.publisher_max_length)
        _check_length(problems, "description", model.description, self.description_max_length)
        for name, value in (("minPlayers", model.min_players), ("maxPlayers", model.max_players)):
            if value is not None and value > self.max_players_limit:
                problems.append(f"{name}: must be at most {self.max_players_limit}")
        return problems


def _check_length(problems: List[str], name: str, value: Optional[str], limit: int) -> None:
    if value is not None and len(value) > limit:
        problems.append(f"{name}: must be at most {limit} characters")


def parse_game_input(raw: Any, policy: GameValidationPolicy) -> GameInput:
    """Turn a client payload into a validated ``GameInput``.

    ``raw`` may be an unparsed JSON request body. Raises
    ``InvalidGameInputError`` listing every problem found.
    """
    if isinstance(raw, (bytes, str)):
        raw = _decode_json(raw)

    if isinstance(raw, GameInput):
        model = raw
    elif isinstance(raw, Mapping):
        try:
            model = GameInput.model_validate(dict(raw))
        except ValidationError as exc:
            raise InvalidGameInputError(_describe(exc)) from exc
    else:
        raise InvalidGameInputError(["body: must be a JSON object"])

    problems = policy.check(model)
    if problems:
        raise InvalidGameInputError(problems)
    return model


def _decode_json(body: Union[bytes, str]) -> Any:
    if not body.strip():
        return None
    try:
        return json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise InvalidGameInputError([f"body: invalid JSON ({exc})"]) from exc


def _describe(exc: ValidationError) -> List[str]:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "body"
        problems.append(f"{location}: {error['msg']}")
    return problems
