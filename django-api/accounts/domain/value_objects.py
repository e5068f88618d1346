"""Domain primitives for accounts."""

from dataclasses import dataclass
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class UserId:
    """Unique identifier for a user account."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class PersonName:
    """A first or last name, stripped and non-empty."""

    value: str

    def __post_init__(self) -> None:
        stripped = self.value.strip()
        if not stripped:
            raise ValueError("Name cannot be empty")
        object.__setattr__(self, "value", stripped)

    def __str__(self) -> str:
        return self.value
