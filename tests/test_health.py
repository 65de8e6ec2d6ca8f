"""Health endpoint tests."""

from unittest.mock import AsyncMock, MagicMock

import psycopg
import pytest
from falcon.asgi import App
from falcon.testing import TestClient

from pageaccess.interfaces.api.resources.health import HealthResource


def _client(health: HealthResource) -> TestClient:
    app = App()
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    return TestClient(app)


class _PoolStub:
    """Pool whose connection() yields a connection with a mocked execute."""

    def __init__(self, execute: AsyncMock) -> None:
        self.conn = MagicMock()
        self.conn.execute = execute

    def connection(self):
        pool = self

        class _Ctx:
            async def __aenter__(self):
                return pool.conn

            async def __aexit__(self, *exc):
                return False

        return _Ctx()


@pytest.fixture
def client() -> TestClient:
    """Create test client with health endpoints and no pool."""
    return _client(HealthResource())


def test_health_liveness(client: TestClient) -> None:
    """GET /v1/health returns 200."""
    result = client.simulate_get("/v1/health")
    assert result.status_code == 200
    assert result.json["status"] == "ok"


def test_health_ready(client: TestClient) -> None:
    """GET /v1/health/ready returns 200."""
    result = client.simulate_get("/v1/health/ready")
    assert result.status_code == 200
    assert result.json["status"] == "ready"


def test_health_ready_checks_database() -> None:
    """Readiness runs a query against the pool."""
    execute = AsyncMock()
    result = _client(HealthResource(_PoolStub(execute))).simulate_get("/v1/health/ready")
    assert result.status_code == 200
    execute.assert_awaited_once_with("SELECT 1")


def test_health_ready_database_down() -> None:
    """GET /v1/health/ready returns 503 when the database is unreachable."""
    execute = AsyncMock(side_effect=psycopg.OperationalError("connection refused"))
    result = _client(HealthResource(_PoolStub(execute))).simulate_get("/v1/health/ready")
    assert result.status_code == 503
    assert result.json["status"] == "unavailable"
