from __future__ import annotations


class DomainError(Exception):
    """Base class for pricing core errors."""


class SnapshotInputError(DomainError):
    """Snapshot record cannot be turned into a pool or token (missing identifiers)."""


class TokenStatsInputError(DomainError):
    """Invalid ordering parameters for token statistics."""


class SnapshotNotFoundError(DomainError):
    """No snapshot has been published yet."""


class PoolNotFoundError(DomainError):
    """Requested pool is not part of the snapshot."""
