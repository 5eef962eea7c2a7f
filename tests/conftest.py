import pytest
from fastapi.testclient import TestClient

from app.errors import AnalysisError
from app.main import app
from app.session import SessionStore
from tests.fakes import FakeAnalyzer, make_decompression_bomb, make_image_bytes


@pytest.fixture
def png_bytes():
    return make_image_bytes("PNG")


@pytest.fixture
def jpeg_bytes():
    return make_image_bytes("JPEG")


@pytest.fixture
def analyzer():
    return FakeAnalyzer()


@pytest.fixture
def failing_analyzer():
    return FakeAnalyzer(error=AnalysisError("Quota exceeded"))


@pytest.fixture
def client(analyzer):
    original = (app.state.analyzer, app.state.sessions)
    app.state.analyzer = analyzer
    app.state.sessions = SessionStore(analyzer)
    with TestClient(app) as c:
        yield c
    app.state.analyzer, app.state.sessions = original


@pytest.fixture(scope="session")
def bomb_png():
    return make_decompression_bomb()
