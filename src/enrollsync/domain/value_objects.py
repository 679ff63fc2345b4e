# SPDX-License-Identifier: Apache-2.0
"""Shared value objects and validation helpers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from uuid import UUID, uuid4

from .errors import DomainValidationError

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}$")


def is_valid_email(value: str) -> bool:
    """Check an address against the pragmatic email pattern used everywhere."""
    return bool(EMAIL_PATTERN.match(value))


def validate_text_length(value: str, label: str, minimum: int, maximum: int) -> None:
    """Validate a free-text attribute such as a name or title.

    Blank input is rejected first, then the raw length is checked against
    the inclusive bounds.

    Raises:
        DomainValidationError: If the value is blank, too short or too long
    """
    if not value or not value.strip():
        raise DomainValidationError(f"{label} cannot be empty")
    if len(value) < minimum:
        raise DomainValidationError(f"{label} must be at least {minimum} characters long")
    if len(value) > maximum:
        raise DomainValidationError(f"{label} cannot exceed {maximum} characters")


@dataclass(frozen=True)
class UuidIdentifier:
    """Identifier backed by a canonical, lower-case UUID string.

    Subclasses only change the name reported in validation errors; two
    identifiers of different subclasses never compare equal.
    """

    value: str

    def __post_init__(self):
        raw = self.value.strip() if isinstance(self.value, str) else ""
        try:
            canonical = str(UUID(raw))
        except ValueError as e:
            raise DomainValidationError(
                f"Invalid UUID format for {type(self).__name__}"
            ) from e
        object.__setattr__(self, "value", canonical)

    @classmethod
    def generate(cls):
        """Generate a new random identifier."""
        return cls(str(uuid4()))

    @classmethod
    def from_string(cls, value: str):
        return cls(value)

    def __str__(self) -> str:
        return self.value
