"""
Typed errors for the recency cache.

Missing keys and empty evictions are normal outcomes and never raise. These
errors describe broken internal state, which is a programming defect.
"""


class CacheError(Exception):
    """Base class for all recency cache errors."""


class CacheInvariantError(CacheError):
    """The hash index and the recency chain disagree."""

    def __init__(self, invariant: str, detail: str) -> None:
        self.invariant = invariant
        self.detail = detail
        super().__init__(f"Cache invariant '{invariant}' violated: {detail}")
