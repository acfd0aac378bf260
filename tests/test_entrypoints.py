import importlib.util
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]


def _load(relative_path, name):
    spec = importlib.util.spec_from_file_location(name, ROOT_DIR / relative_path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_runserver_defaults_to_single_worker():
    runserver = _load("scripts/runserver.py", "runserver")

    command = runserver.build_command({})

    assert command[:2] == ["gunicorn", "lru_service.main:app"]
    assert command[command.index("-w") + 1] == "1"
    assert command[-1] == "0.0.0.0:8000"


def test_runserver_honours_environment():
    runserver = _load("scripts/runserver.py", "runserver")

    command = runserver.build_command({"WORKERS": "2", "HOST": "127.0.0.1", "PORT": "9000"})

    assert command[command.index("-w") + 1] == "2"
    assert command[-1] == "127.0.0.1:9000"


def test_serverless_handler_wraps_app():
    index = _load("api/index.py", "serverless_index")

    assert callable(index.handler)
    assert index.app.title == "LRU Cache Service"
