# backend/tests/conftest.py
import pathlib, sys, pytest
from fastapi.testclient import TestClient

BACKEND_DIR = pathlib.Path(__file__).resolve().parents[1]   # .../backend

# Make `from core.*`, `from services.*` importable
sys.path.insert(0, str(BACKEND_DIR))


@pytest.fixture()
def client():
    from main import app
    return TestClient(app)


@pytest.fixture()
def registry():
    from core.registry import build_registry
    return build_registry()
