from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Optional


@dataclass
class Game:
    title: str = ""
    publisher: Optional[str] = None
    year: Optional[int] = None
    min_players: Optional[int] = None
    max_players: Optional[int] = None
    min_age: Optional[int] = None
    playing_time: Optional[int] = None
    description: Optional[str] = None
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Game":
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def copy_fields_from(self, other: "Game") -> None:
        """Overwrite every mutable field with ``other``'s; ``id`` is kept."""
        for f in fields(self):
            if f.name != "id":
                setattr(self, f.name, getattr(other, f.name))
