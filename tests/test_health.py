# ============================================================================
# HEALTH & APP TESTS
# ============================================================================
# EPOCH: 1 - SERVICE BINDING
# STATUS: Tests - Health endpoints and startup wiring
# PURPOSE: Verify /readyz reflects the resolution outcome
# CREATED: 19 OCT 2026
# ============================================================================
"""
Health & App Tests

Uses FastAPI TestClient for endpoint tests and asyncio.run for the
BindingsCheck plugin.

Run with:
    pytest tests/test_health.py -v
"""

import asyncio
import json
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

import health.checks  # noqa: F401 - registers built-in checks
from health import HealthStatus, health_router, get_registry
from health.checks import BindingsCheck, set_orchestrator
from core.contracts import ResolutionOutcome
from core.errors import MissingRequiredAliasError, UnsupportedServiceError
from core.namespace import Namespace
from handlers import HandlerRegistry, MySQLHandler, RedisHandler
from orchestrator import BindingOrchestrator


# ============================================================================
# HELPERS
# ============================================================================

MYSQL_SERVICES = {
    "mysql-5.5": [{
        "name": "orders",
        "label": "mysql-5.5",
        "credentials": {"host": "h", "port": 3306, "username": "u", "password": "p"},
    }],
}


def _orchestrator(catalog=None, mysql=None):
    registry = HandlerRegistry([
        MySQLHandler("5.5", connector=mysql or AsyncMock(return_value="mysql-handle")),
        RedisHandler("2.6", connector=AsyncMock(return_value="redis-handle")),
    ])
    return BindingOrchestrator(catalog or {}, registry, Namespace())


def _make_test_app():
    app = FastAPI()
    app.include_router(health_router)
    return app


@pytest.fixture(autouse=True)
def reset_orchestrator():
    yield
    set_orchestrator(None)


# ============================================================================
# STATUS MAPPING
# ============================================================================

class TestHealthStatus:
    """Tests for outcome-to-status mapping and aggregation."""

    def test_for_outcome(self):
        warning = UnsupportedServiceError("postgres-9.4", "postgres-9.4")
        assert HealthStatus.for_outcome(None) == HealthStatus.UNHEALTHY
        assert HealthStatus.for_outcome(ResolutionOutcome.ready_outcome()) == HealthStatus.HEALTHY
        assert HealthStatus.for_outcome(ResolutionOutcome.ready_outcome([warning])) == HealthStatus.DEGRADED
        failed = ResolutionOutcome.failed_outcome(MissingRequiredAliasError(["db"]), [warning])
        assert HealthStatus.for_outcome(failed) == HealthStatus.UNHEALTHY

    def test_aggregate_worst_wins(self):
        assert HealthStatus.aggregate([]) == HealthStatus.HEALTHY
        assert HealthStatus.aggregate([HealthStatus.HEALTHY, HealthStatus.DEGRADED]) == HealthStatus.DEGRADED
        assert HealthStatus.aggregate([HealthStatus.UNHEALTHY, HealthStatus.DEGRADED]) == HealthStatus.UNHEALTHY

    def test_http_status(self):
        assert HealthStatus.HEALTHY.http_status == 200
        assert HealthStatus.DEGRADED.http_status == 206
        assert HealthStatus.UNHEALTHY.http_status == 503


# ============================================================================
# BINDINGS CHECK
# ============================================================================

class TestBindingsCheck:
    """Tests for the BindingsCheck plugin."""

    def test_registered(self):
        assert "bindings" in get_registry()
        assert "process" in get_registry()

    def test_unset_orchestrator_unhealthy(self):
        result = asyncio.run(BindingsCheck().check())
        assert result.status == HealthStatus.UNHEALTHY

    def test_pending_run_unhealthy(self):
        set_orchestrator(_orchestrator())
        result = asyncio.run(BindingsCheck().check())
        assert result.status == HealthStatus.UNHEALTHY
        assert result.details["state"] == "idle"

    def test_ready_run_healthy(self):
        orchestrator = _orchestrator(MYSQL_SERVICES)
        asyncio.run(orchestrator.resolve(["db"]))
        set_orchestrator(orchestrator)

        result = asyncio.run(BindingsCheck().check())

        assert result.status == HealthStatus.HEALTHY
        assert result.details["aliases"] == ["db", "mysql"]
        assert result.details["bound"] == 1

    def test_failed_run_reports_error_code(self):
        orchestrator = _orchestrator(MYSQL_SERVICES, mysql=AsyncMock(side_effect=ConnectionError("refused")))
        asyncio.run(orchestrator.resolve())
        set_orchestrator(orchestrator)

        result = asyncio.run(BindingsCheck().check())

        assert result.status == HealthStatus.UNHEALTHY
        assert result.message == "refused"
        assert result.details["error_code"] == "connection_error"

    def test_ready_with_unsupported_services_degraded(self):
        catalog = dict(MYSQL_SERVICES)
        catalog["postgres-9.4"] = [{"name": "pg", "label": "postgres-9.4", "credentials": {"uri": "x"}}]
        orchestrator = _orchestrator(catalog)
        asyncio.run(orchestrator.resolve())
        set_orchestrator(orchestrator)

        result = asyncio.run(BindingsCheck().check())

        assert result.status == HealthStatus.DEGRADED
        assert result.blocks_readiness is False
        assert result.details["warnings"] == ["Unsupported service postgres-9.4/postgres-9.4"]


# ============================================================================
# ROUTER
# ============================================================================

class TestHealthRouter:
    """Tests for /livez, /readyz and /health."""

    def test_livez(self):
        client = TestClient(_make_test_app())
        response = client.get("/livez")
        assert response.status_code == 200
        assert response.json()["status"] == "alive"

    def test_readyz_ready(self):
        orchestrator = _orchestrator(MYSQL_SERVICES)
        asyncio.run(orchestrator.resolve())
        set_orchestrator(orchestrator)

        response = TestClient(_make_test_app()).get("/readyz")

        assert response.status_code == 200
        assert response.json()["status"] == "ready"

    def test_readyz_not_ready(self):
        orchestrator = _orchestrator({})
        asyncio.run(orchestrator.resolve(["mongodb"]))
        set_orchestrator(orchestrator)

        response = TestClient(_make_test_app()).get("/readyz")

        assert response.status_code == 503
        body = response.json()
        assert body["status"] == "not_ready"
        assert body["checks"]["bindings"]["details"]["error_code"] == "missing_required_alias"

    def test_health_includes_all_checks(self):
        orchestrator = _orchestrator({})
        asyncio.run(orchestrator.resolve())
        set_orchestrator(orchestrator)

        response = TestClient(_make_test_app()).get("/health")

        assert response.status_code == 200
        assert set(response.json()["checks"]) >= {"process", "bindings"}

    def test_unsupported_services_ready_but_degraded(self):
        orchestrator = _orchestrator({
            "postgres-9.4": [{"name": "pg", "label": "postgres-9.4", "credentials": {"uri": "x"}}],
        })
        asyncio.run(orchestrator.resolve())
        set_orchestrator(orchestrator)
        client = TestClient(_make_test_app())

        assert client.get("/readyz").status_code == 200
        response = client.get("/health")
        assert response.status_code == 206
        assert response.json()["status"] == "degraded"


# ============================================================================
# APPLICATION STARTUP
# ============================================================================

class TestApplication:
    """Startup resolution through the FastAPI lifespan."""

    def _registry(self, mysql):
        return HandlerRegistry([MySQLHandler("5.5", connector=mysql)])

    def test_startup_binds_services(self, monkeypatch):
        from main import create_app

        monkeypatch.setenv("VCAP_SERVICES", json.dumps(MYSQL_SERVICES))
        monkeypatch.setenv("BINDINGS_REQUIRED", "db")
        app = create_app(self._registry(AsyncMock(return_value="mysql-handle")))

        with TestClient(app) as client:
            assert app.state.services.db == "mysql-handle"
            assert app.state.services["mysql-5.5"]["orders"] == "mysql-handle"
            assert client.get("/readyz").status_code == 200
            assert client.get("/").json()["bindings"] == {"state": "ready"}

    def test_startup_failure_keeps_serving(self, monkeypatch):
        from main import create_app

        monkeypatch.setenv("VCAP_SERVICES", json.dumps(MYSQL_SERVICES))
        monkeypatch.delenv("BINDINGS_REQUIRED", raising=False)
        app = create_app(self._registry(AsyncMock(side_effect=ConnectionError("refused"))))

        with TestClient(app) as client:
            assert app.state.outcome.failed is True
            assert client.get("/livez").status_code == 200
            assert client.get("/readyz").status_code == 503

    def test_malformed_credentials_reported_not_ready(self, monkeypatch):
        from main import create_app

        services = {"mysql-5.5": [{"name": "orders", "label": "mysql-5.5", "credentials": "oops"}]}
        monkeypatch.setenv("VCAP_SERVICES", json.dumps(services))
        monkeypatch.delenv("BINDINGS_REQUIRED", raising=False)
        connector = AsyncMock(return_value="mysql-handle")
        app = create_app(self._registry(connector))

        with TestClient(app) as client:
            response = client.get("/readyz")
            assert response.status_code == 503
            details = response.json()["checks"]["bindings"]["details"]
            assert details["error_code"] == "invalid_service"
        connector.assert_not_called()
