# SPDX-License-Identifier: Apache-2.0
"""Value objects for the tenancy context."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from uuid import uuid4

from enrollsync.domain.errors import DomainValidationError
from enrollsync.domain.value_objects import is_valid_email


@dataclass(frozen=True)
class TenantId:
    """Opaque tenant identifier, at most 36 characters."""

    value: str

    MAX_LENGTH = 36

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise DomainValidationError("Tenant ID cannot be empty")
        object.__setattr__(self, "value", self.value.strip())
        if len(self.value) > self.MAX_LENGTH:
            raise DomainValidationError(
                f"Tenant ID cannot exceed {self.MAX_LENGTH} characters"
            )

    @classmethod
    def generate(cls) -> TenantId:
        return cls(str(uuid4()))

    @classmethod
    def from_string(cls, value: str) -> TenantId:
        return cls(value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TenantSlug:
    """URL-safe tenant handle.

    Input is trimmed and lower-cased before validation, so ``" Acme-U "``
    and ``"acme-u"`` produce equal slugs.
    """

    value: str

    MIN_LENGTH = 3
    MAX_LENGTH = 50
    PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

    def __post_init__(self):
        normalized = self.value.strip().lower() if isinstance(self.value, str) else ""
        object.__setattr__(self, "value", normalized)

        if not normalized:
            raise DomainValidationError("Tenant slug cannot be empty")
        if len(normalized) < self.MIN_LENGTH:
            raise DomainValidationError(
                f"Tenant slug must be at least {self.MIN_LENGTH} characters long"
            )
        if len(normalized) > self.MAX_LENGTH:
            raise DomainValidationError(
                f"Tenant slug cannot exceed {self.MAX_LENGTH} characters"
            )
        if not self.PATTERN.match(normalized):
            raise DomainValidationError(
                "Tenant slug must contain only lowercase letters, numbers, and hyphens"
            )

    @classmethod
    def from_string(cls, value: str) -> TenantSlug:
        return cls(value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ContactEmail:
    """Tenant contact address, stored trimmed and lower-cased."""

    value: str

    def __post_init__(self):
        normalized = self.value.strip().lower() if isinstance(self.value, str) else ""
        object.__setattr__(self, "value", normalized)

        if not normalized:
            raise DomainValidationError("Contact email cannot be empty")
        if not is_valid_email(normalized):
            raise DomainValidationError(f"Invalid email format: {normalized}")

    @classmethod
    def from_string(cls, value: str) -> ContactEmail:
        return cls(value)

    @property
    def domain(self) -> str:
        return self.value.split("@", 1)[1]

    def __str__(self) -> str:
        return self.value


class TenantStatus(Enum):
    """Lifecycle status of a tenant."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"
    PENDING = "pending"

    @classmethod
    def from_string(cls, value: str) -> TenantStatus:
        try:
            return cls(value.strip().lower())
        except (ValueError, AttributeError) as e:
            raise DomainValidationError(f"Invalid tenant status: {value}") from e

    def is_active(self) -> bool:
        return self is TenantStatus.ACTIVE

    def can_access_platform(self) -> bool:
        return self is TenantStatus.ACTIVE

    def __str__(self) -> str:
        return self.value
