from fastapi import APIRouter, Depends

from ...dependencies import get_cache
from ...schemas import CacheEntry, CacheStatsRead
from ...services.cache import LRUCache

router = APIRouter()


@router.get("/stats", response_model=CacheStatsRead)
def cache_stats(cache: LRUCache = Depends(get_cache)):
    return CacheStatsRead.model_validate(cache.stats())


@router.get("/entries", response_model=list[CacheEntry])
def list_entries(cache: LRUCache = Depends(get_cache)):
    """Entries from most to least recently used; does not refresh recency."""

    return [CacheEntry(key=str(key), value=value) for key, value in cache.items()]
