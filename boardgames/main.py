from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from boardgames.api.routes import router as games_router
from boardgames.application.ports.game_repository import GameRepository
from boardgames.application.services.registry import GameServices
from boardgames.config import Settings, get_settings
from boardgames.domain.errors import StoreError
from boardgames.infrastructure.persistence.json_game_repository import JsonFileGameRepository
from boardgames.infrastructure.persistence.memory_game_repository import (
    InMemoryGameRepository,
)
from boardgames.logging_config import configure_logging

logger = logging.getLogger(__name__)


def build_repository(settings: Settings) -> GameRepository:
    if settings.storage_backend == "json":
        logger.info("Using JSON game store at %s", settings.data_file)
        return JsonFileGameRepository(settings.data_file)
    logger.info("Using in-memory game store")
    return InMemoryGameRepository()


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[GameRepository] = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Board Games API")
    app.state.settings = settings
    app.state.services = GameServices.build(
        repository or build_repository(settings),
        policy=settings.validation_policy(),
        admin_role=settings.admin_role,
    )

    @app.exception_handler(RequestValidationError)
    async def _bad_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        problems = [
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        ]
        return JSONResponse(status_code=400, content={"detail": problems})

    @app.exception_handler(StoreError)
    async def _store_failure(request: Request, exc: StoreError) -> JSONResponse:
        logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    @app.get("/health")
    async def health_check() -> dict:
        return {"status": "healthy"}

    # unversioned and v1 paths serve the same routes
    app.include_router(games_router, prefix="/api")
    app.include_router(games_router, prefix="/api/v1")
    return app


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "boardgames.main:create_app",
        factory=True,
        host=_settings.host,
        port=_settings.port,
        reload=False,
    )
