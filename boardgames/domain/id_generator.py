from __future__ import annotations

import itertools
import secrets
import string
from threading import Lock
from typing import Callable

from boardgames.domain.errors import StoreError

IdFactory = Callable[[], str]

_ADJECTIVES = [
    "bold",
    "clever",
    "cozy",
    "crafty",
    "eager",
    "lucky",
    "mighty",
    "quiet",
    "rapid",
    "sly",
    "steady",
    "witty",
]

_NOUNS = [
    "meeple",
    "dice",
    "token",
    "pawn",
    "tile",
    "card",
    "board",
    "spinner",
    "tower",
    "hex",
    "marker",
    "deck",
]


def generate_game_id() -> str:
    """Return a memorable slug composed of two words and a short number."""
    adjective = secrets.choice(_ADJECTIVES)
    noun = secrets.choice(_NOUNS)
    suffix = "".join(secrets.choice(string.digits) for _ in range(4))
    return f"{adjective}-{noun}-{suffix}"


class SequentialIdGenerator:
    """Hands out ``g1``, ``g2``, ... in order; never repeats a value."""

    def __init__(self, prefix: str = "g", start: int = 1) -> None:
        self._prefix = prefix
        self._counter = itertools.count(start)
        self._lock = Lock()

    def __call__(self) -> str:
        with self._lock:
            return f"{self._prefix}{next(self._counter)}"


def allocate_unique_id(
    factory: IdFactory, is_taken: Callable[[str], bool], attempts: int = 32
) -> str:
    for _ in range(attempts):
        candidate = factory()
        if not is_taken(candidate):
            return candidate
    raise StoreError("Unable to allocate unique game id.")
