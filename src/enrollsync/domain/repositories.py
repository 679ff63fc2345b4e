# SPDX-License-Identifier: Apache-2.0
"""Repository error types shared by every bounded context.

Repository interfaces live next to the aggregates they persist
(``<context>.domain.repositories``); this module only defines the
failures any implementation may raise.
"""

from __future__ import annotations


class RepositoryError(Exception):
    """Base exception for repository errors."""

    ...


class ConcurrencyError(RepositoryError):
    """Raised when an aggregate was modified by someone else since it was loaded."""

    ...


class DuplicateKeyError(RepositoryError):
    """Raised when a save would violate a storage-level uniqueness constraint."""

    ...
