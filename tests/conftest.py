from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from boardgames.application.services.registry import GameServices
from boardgames.config import Settings
from boardgames.domain.entities.principal import Principal
from boardgames.domain.id_generator import SequentialIdGenerator
from boardgames.infrastructure.persistence.memory_game_repository import (
    InMemoryGameRepository,
)
from boardgames.main import create_app


@pytest.fixture
def repository() -> InMemoryGameRepository:
    return InMemoryGameRepository(id_factory=SequentialIdGenerator("g"))


@pytest.fixture
def services(repository) -> GameServices:
    return GameServices.build(repository)


@pytest.fixture
def admin() -> Principal:
    return Principal.of("alice", ["admin"])


@pytest.fixture
def player() -> Principal:
    return Principal.of("bob", ["player"])


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, storage_backend="memory", log_level="WARNING")


@pytest.fixture
def client(settings, repository) -> TestClient:
    return TestClient(create_app(settings, repository=repository))
