"""Utility modules for the recency cache."""

from . import logging
from . import lru_cache

__all__ = ["logging", "lru_cache"]
