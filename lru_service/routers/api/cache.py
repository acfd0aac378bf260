from fastapi import APIRouter, Depends, HTTPException

from ...dependencies import get_cache
from ...schemas import CacheEntry
from ...services.cache import MISSING, LRUCache

router = APIRouter()


@router.get("/{key}", response_model=CacheEntry)
def get_entry(key: str, cache: LRUCache = Depends(get_cache)):
    value = cache.get(key)
    if value is MISSING:
        raise HTTPException(status_code=404, detail="Key not found")
    return CacheEntry(key=key, value=value)


@router.put("/{value}", response_model=CacheEntry)
def put_entry(value: int, cache: LRUCache = Depends(get_cache)):
    # keys are the string form of the stored integer
    key = str(value)
    cache.put(key, value)
    return CacheEntry(key=key, value=value)
