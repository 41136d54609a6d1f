from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable


@dataclass(frozen=True)
class Principal:
    name: str
    roles: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def of(cls, name: str, roles: Iterable[str] = ()) -> "Principal":
        return cls(name=name, roles=frozenset(roles))

    def has_role(self, role: str) -> bool:
        return role in self.roles
