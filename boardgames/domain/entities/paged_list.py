from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, List, TypeVar

T = TypeVar("T")


@dataclass
class PagedList(Generic[T]):
    """One page of an ordered result set plus the size of the whole set."""

    page: int
    size: int
    total_count: int
    items: List[T] = field(default_factory=list)

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 0
        return math.ceil(self.total_count / self.size)
