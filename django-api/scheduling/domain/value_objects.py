"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Self
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import URLValidator

TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")

_url_validator = URLValidator(schemes=["http", "https"])


@dataclass(frozen=True)
class SessionId:
    """Unique identifier for a Session."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class RegistrationId:
    """Unique identifier for a Registration."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            try:
                object.__setattr__(self, "amount", Decimal(str(self.amount)))
            except InvalidOperation:
                raise ValueError("Money amount must be a decimal number") from None
        if not self.amount.is_finite():
            raise ValueError("Money amount must be a decimal number")
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class Capacity:
    """Number of main-list places in a session, at least one."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("Places must be at least 1")


@dataclass(frozen=True)
class Duration:
    """Session length in whole minutes."""

    minutes: int

    def __post_init__(self) -> None:
        if self.minutes <= 0:
            raise ValueError("Duration must be positive")


@dataclass(frozen=True)
class TimeOfDay:
    """Start time as an HH:MM string."""

    value: str

    def __post_init__(self) -> None:
        if not TIME_PATTERN.match(self.value):
            raise ValueError("Time must use the HH:MM format")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PaymentLink:
    """External URL where participants pay for a session."""

    url: str

    def __post_init__(self) -> None:
        try:
            _url_validator(self.url)
        except DjangoValidationError:
            raise ValueError("Payment link must be a valid URL") from None

    @classmethod
    def parse(cls, value: str | None) -> Self | None:
        """Empty input means no link."""
        if not value:
            return None
        return cls(url=value)

    def __str__(self) -> str:
        return self.url
