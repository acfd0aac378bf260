from fastapi import Request

from .services.cache import LRUCache


def get_cache(request: Request) -> LRUCache:
    return request.app.state.cache
