"""Container/server entrypoint that starts Gunicorn with Uvicorn workers."""

from __future__ import annotations

import os
import subprocess
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]


def build_command(env: dict[str, str]) -> list[str]:
    # the cache lives in process memory, so extra workers mean separate caches
    workers = env.get("WORKERS", "1")
    host = env.get("HOST", "0.0.0.0")
    port = env.get("PORT", "8000")
    return [
        "gunicorn",
        "lru_service.main:app",
        "-k",
        "uvicorn.workers.UvicornWorker",
        "-w",
        workers,
        "-b",
        f"{host}:{port}",
    ]


def main() -> None:
    env = os.environ.copy()
    print("→ Starting Gunicorn")
    subprocess.run(build_command(env), check=True, cwd=str(ROOT_DIR), env=env)


if __name__ == "__main__":
    main()
