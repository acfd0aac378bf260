import logging
import os
import time
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, get_settings
from .routers.api import api_router
from .services.cache import LRUCache


def _configure_logging(log_level: str) -> None:
    """Ensure server + cache events emit structured logs."""

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        force=True,
    )
    logging.getLogger("uvicorn").setLevel(log_level)
    logging.getLogger("uvicorn.access").setLevel("WARNING")
    logging.getLogger("request").setLevel(log_level)
    logging.getLogger("lru_service.services.cache").setLevel(
        os.environ.get("CACHE_LOG_LEVEL", log_level).upper()
    )


def _allowed_origins(settings: Settings) -> list[str]:
    origin_candidates: list[str] = []
    if settings.cors_allow_origins:
        origin_candidates.extend(
            origin.strip()
            for origin in settings.cors_allow_origins.split(",")
            if origin.strip()
        )
    if settings.debug:
        origin_candidates.extend(
            [
                "http://localhost:3000",
                "http://localhost:5173",
                "http://127.0.0.1:3000",
                "http://127.0.0.1:5173",
            ]
        )
    if not origin_candidates:
        origin_candidates.append(settings.app_base_url)
    return list(dict.fromkeys(origin_candidates))


def create_app(settings: Optional[Settings] = None, cache: Optional[LRUCache] = None) -> FastAPI:
    settings = settings or get_settings()
    _configure_logging(settings.log_level)

    app = FastAPI(title="LRU Cache Service", debug=settings.debug)
    app.state.settings = settings
    app.state.cache = cache if cache is not None else LRUCache(settings.cache_capacity)
    logging.getLogger(__name__).info(
        "LRU cache ready with capacity %d", app.state.cache.capacity
    )

    @app.middleware("http")
    async def log_requests(request, call_next):
        logger = logging.getLogger("request")
        logger.info("--> %s %s from %s", request.method, request.url.path, request.client.host if request.client else "?")
        start = time.perf_counter()
        response = await call_next(request)
        duration = (time.perf_counter() - start) * 1000
        logger.info("<-- %s %s %s %.2fms", request.method, request.url.path, response.status_code, duration)
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_allowed_origins(settings),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/_health")
    async def health():
        return {"status": "ok"}

    app.include_router(api_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    reload_flag = os.environ.get("ENABLE_RELOAD", "0").lower() in {"1", "true", "yes"}
    uvicorn.run(
        "lru_service.main:app",
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", 8000)),
        reload=reload_flag,
    )
