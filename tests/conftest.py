import os

for _key in ("UUID_JSON", "UUIDS", "FALLBACK_HOST", "PAGE_TIMEZONE"):
    os.environ.pop(_key, None)

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from uuidsub.config import Settings
from uuidsub.main import create_app


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("UUID_JSON", raising=False)
    monkeypatch.delenv("UUIDS", raising=False)


@pytest_asyncio.fixture
async def make_client():
    clients = []

    async def _make(**kwargs):
        settings = Settings(**kwargs.pop("settings", {}))
        app = create_app(settings, **kwargs)
        ac = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
        clients.append(ac)
        return ac

    yield _make
    for ac in clients:
        await ac.aclose()
