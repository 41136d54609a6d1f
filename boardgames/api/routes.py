from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from boardgames.api.dependencies import principal_from_headers
from boardgames.api.schemas import DeleteGameResponse, GamePageResponse, GameResponse
from boardgames.application.services.registry import GameServices
from boardgames.domain.entities.principal import Principal
from boardgames.domain.errors import ForbiddenError, GameNotFoundError, InvalidGameInputError

router = APIRouter(prefix="/games", tags=["games"])


def get_services(request: Request) -> GameServices:
    return request.app.state.services


def get_principal(request: Request) -> Principal:
    return principal_from_headers(request, request.app.state.settings)


async def get_raw_body(request: Request) -> bytes:
    # decoded by the services, after the role check
    return await request.body()


@router.get("", response_model=GamePageResponse)
def list_games(
    page: int = 1,
    size: int = 10,
    principal: Principal = Depends(get_principal),
    services: GameServices = Depends(get_services),
) -> GamePageResponse:
    paged = services.list_games.execute(principal, page, size)
    return GamePageResponse.from_paged_list(paged)


@router.get("/{game_id}", response_model=GameResponse)
def get_game(
    game_id: str,
    principal: Principal = Depends(get_principal),
    services: GameServices = Depends(get_services),
) -> GameResponse:
    try:
        game = services.get_game.execute(principal, game_id)
    except GameNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return GameResponse.from_game(game)


@router.post("", response_model=GameResponse, status_code=status.HTTP_201_CREATED)
def create_game(
    request: Request,
    response: Response,
    principal: Principal = Depends(get_principal),
    payload: bytes = Depends(get_raw_body),
    services: GameServices = Depends(get_services),
) -> GameResponse:
    try:
        result = services.create_game.execute(principal, payload)
    except ForbiddenError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc
    except InvalidGameInputError as exc:
        raise HTTPException(status_code=400, detail=exc.problems) from exc

    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{result.game_id}"
    return GameResponse.from_game(result.game)


@router.put("/{game_id}", response_model=GameResponse)
def update_game(
    game_id: str,
    principal: Principal = Depends(get_principal),
    payload: bytes = Depends(get_raw_body),
    services: GameServices = Depends(get_services),
) -> GameResponse:
    try:
        game = services.update_game.execute(principal, game_id, payload)
    except ForbiddenError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc
    except InvalidGameInputError as exc:
        raise HTTPException(status_code=400, detail=exc.problems) from exc
    except GameNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return GameResponse.from_game(game)


@router.delete("/{game_id}", response_model=DeleteGameResponse)
def delete_game(
    game_id: str,
    principal: Principal = Depends(get_principal),
    services: GameServices = Depends(get_services),
) -> DeleteGameResponse:
    try:
        services.delete_game.execute(principal, game_id)
    except ForbiddenError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc
    except GameNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return DeleteGameResponse(id=game_id)
