"""Main-list and queue placement.

Placement is derived on every read from registration order and the session's
capacity; nothing here is persisted. Entries must already be sorted by
registered_at ascending.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from scheduling.domain.value_objects import Capacity

T = TypeVar("T")


def queue_rank(position: int, places: int) -> int | None:
    """Return the 1-based queue rank for a 0-based position, or None if in the main list."""
    if position < places:
        return None
    return position - places + 1


@dataclass(frozen=True)
class Placement(Generic[T]):
    """One entry with its derived position."""

    entry: T
    position: int
    queue_rank: int | None

    @property
    def in_main_list(self) -> bool:
        return self.queue_rank is None


def place(entries: Sequence[T], capacity: Capacity) -> list[Placement[T]]:
    return [
        Placement(entry=entry, position=i, queue_rank=queue_rank(i, capacity.value))
        for i, entry in enumerate(entries)
    ]
