"""ORM models package."""

from loteria.db.models.cache_entry import CacheEntry

__all__ = [
    "CacheEntry",
]
