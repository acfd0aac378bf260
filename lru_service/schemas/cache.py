from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CacheEntry(BaseModel):
    key: str
    value: Any


class CacheStatsRead(BaseModel):
    capacity: int = Field(..., ge=1)
    size: int
    hits: int
    misses: int
    evictions: int

    model_config = ConfigDict(from_attributes=True)
