"""Integration-test fixtures.

Runs against the real app and the process-wide IdWorker built from
settings, with the system clock. No dependency overrides.
"""

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.main import app


@pytest_asyncio.fixture(loop_scope="session", scope="session")
async def live_client() -> AsyncClient:
    """Session-scoped async HTTP client over the shared worker."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
