from fastapi import APIRouter

from . import cache, diagnostics

api_router = APIRouter()
# diagnostics first so /_cache/* is not captured by /{key}
api_router.include_router(diagnostics.router, prefix="/_cache", tags=["diagnostics"])
api_router.include_router(cache.router, tags=["cache"])
