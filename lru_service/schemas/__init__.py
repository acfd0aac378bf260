from .cache import CacheEntry, CacheStatsRead

__all__ = [
    "CacheEntry",
    "CacheStatsRead",
]
