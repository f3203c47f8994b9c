# ============================================================================
# SERVICEBIND - MAIN APPLICATION
# ============================================================================
# EPOCH: 1 - SERVICE BINDING
# STATUS: Core - FastAPI application entry point
# PURPOSE: Resolve platform service bindings at startup, expose probes
# CREATED: 19 OCT 2026
# ============================================================================
"""
Servicebind Main Application

FastAPI application that:
1. Reads VCAP_SERVICES / VCAP_APPLICATION from the environment
2. Resolves every bound service into a live handle at startup
3. Reports readiness through /readyz

Handles are available to route code as request.app.state.services
(the Namespace), e.g. request.app.state.services.db

Usage:
    uvicorn main:app --host $VCAP_APP_HOST --port $VCAP_APP_PORT
"""

import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from __version__ import __version__, BUILD_DATE, EPOCH
from core.config import PlatformConfig
from core.logging import configure_logging, get_logger
from core.namespace import Namespace
from handlers import HandlerRegistry, default_registry
from orchestrator import BindingOrchestrator, ServiceCatalog

# Health check system
from health import health_router, get_registry
from health.checks import set_orchestrator

configure_logging(
    level=os.environ.get("LOG_LEVEL", "INFO"),
    json_output=os.environ.get("LOG_FORMAT", "").lower() == "json",
)
logger = get_logger(__name__)


def create_app(registry: Optional[HandlerRegistry] = None) -> FastAPI:
    """
    Build the application.

    Args:
        registry: Binding handlers to use (built-ins if None)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Resolve bindings on startup."""
        logger.info(f"Starting servicebind v{__version__} (Epoch {EPOCH}, Build {BUILD_DATE})")

        config = PlatformConfig.from_env()
        catalog = ServiceCatalog.from_mapping(config.services)
        namespace = Namespace()

        orchestrator = BindingOrchestrator(
            catalog,
            registry if registry is not None else default_registry(),
            namespace,
        )
        set_orchestrator(orchestrator)

        outcome = await orchestrator.resolve(config.required_services)
        if outcome.ready:
            logger.info(f"Bindings ready: {sorted(namespace.aliases)}")
        else:
            # Keep serving so /readyz can report the failure
            logger.error(f"Bindings failed: {outcome.error}")

        app.state.config = config
        app.state.catalog = catalog
        app.state.services = namespace
        app.state.outcome = outcome

        logger.info(f"Health checks initialized ({len(get_registry())} checks registered)")

        yield

        logger.info("servicebind stopped")

    app = FastAPI(
        title="servicebind",
        description="Binds platform backing services at startup",
        version=__version__,
        lifespan=lifespan,
    )

    # Include health check routes (no prefix - /livez, /readyz, /health)
    app.include_router(health_router)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "service": "servicebind",
            "version": __version__,
            "epoch": EPOCH,
            "build_date": BUILD_DATE,
            "bindings": app.state.outcome.to_dict() if hasattr(app.state, "outcome") else None,
        }

    return app


app = create_app()


# ============================================================================
# MAIN ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    platform = PlatformConfig.from_env()

    uvicorn.run(
        "main:app",
        host=platform.host,
        port=platform.port,
        reload=os.environ.get("RELOAD", "false").lower() == "true",
    )
