"""Pagination state entity."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class PaginationState:
    """Accumulated result of walking a paginated upstream.

    Attributes:
        items: Items collected so far, in upstream order.
        cursor: Last page number or GraphQL end cursor.
        total_count: Total declared by the upstream, if any.
        incomplete: True when the collected items are known to be partial.
        cost: Accumulated GraphQL rate-limit cost.
        requests: Number of page requests issued.
        capped: True when the walk stopped at the upstream result ceiling.
    """

    items: list[Any] = field(default_factory=list)
    cursor: int | str | None = None
    total_count: int | None = None
    incomplete: bool = False
    cost: int = 0
    requests: int = 0
    capped: bool = False

    def __len__(self) -> int:
        return len(self.items)
