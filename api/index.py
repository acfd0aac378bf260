from __future__ import annotations

import sys
from pathlib import Path

from mangum import Mangum

# Ensure the project package is importable inside a serverless worker
ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.append(str(ROOT_DIR))

from lru_service.main import app as fastapi_app  # noqa: E402  (import after sys.path mutation)

app = fastapi_app

# Each warm instance keeps its own cache; cold starts begin empty.
handler = Mangum(fastapi_app, lifespan="off")
