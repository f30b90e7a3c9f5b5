import httpx
import pytest
from httpx import ASGITransport


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "test-google-key")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")


@pytest.fixture
def no_key_env(monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "")


async def _app_client():
    from app.main import create_app, lifespan

    app = create_app()
    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c


@pytest.fixture
async def client(mock_env):
    async for c in _app_client():
        yield c


@pytest.fixture
async def unconfigured_client(no_key_env):
    async for c in _app_client():
        yield c
