"""Shared test fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from src.main import app
from src.sf_idgen.application.service import get_id_worker
from src.sf_idgen.domain.builder import IdWorkerBuilder
from src.sf_idgen.engine.worker import IdWorker
from tests.fakes import FakeClock


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def worker(fake_clock: FakeClock) -> IdWorker:
    builder = IdWorkerBuilder.default().with_worker_id(7).with_datacenter_id(3)
    return builder.build(clock=fake_clock)


@pytest.fixture
async def client(worker: IdWorker) -> AsyncClient:
    """Async HTTP client bound to a worker driven by fake_clock."""
    app.dependency_overrides[get_id_worker] = lambda: worker
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
