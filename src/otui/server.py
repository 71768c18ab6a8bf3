"""
OTUI Service
HTTP layer around the OTUI parser and exporter.
"""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST

from otui import __version__
from otui.core import Settings, ValidationError, configure_logging, get_logger, get_settings, init_tracer
from otui.handlers import OTUIHandler
from otui.monitoring import metrics_collector

logger = get_logger(__name__)


async def _read_json(request: Request) -> Any:
    """Request body as JSON; an empty or unreadable body counts as ``{}``."""
    try:
        return await request.json()
    except ValueError:
        return {}


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Configure logging and tracing on startup"""
        configure_logging(settings.log_level, settings.json_logs)
        if settings.enable_tracing:
            init_tracer(settings.service_name)
        logger.info("service_starting", service=settings.service_name, port=settings.port)
        yield
        logger.info("service_stopped", service=settings.service_name)

    app = FastAPI(
        title="OTUI Service",
        description="Parses OTUI source into widget trees and exports them back",
        version=__version__,
        lifespan=lifespan,
    )

    # Editors run on a different origin during development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.handler = OTUIHandler(settings)

    @app.get("/health")
    async def health():
        """Health check endpoint"""
        return {"status": "healthy", "service": settings.service_name, "version": __version__}

    @app.get("/metrics")
    async def metrics():
        """Prometheus metrics"""
        return Response(content=metrics_collector.get_metrics(), media_type=CONTENT_TYPE_LATEST)

    @app.post("/api/otui/parse")
    async def parse(request: Request):
        """Parse ``{code}`` into a ParseResult"""
        payload = await _read_json(request)
        try:
            result = await run_in_threadpool(app.state.handler.parse, payload)
        except ValidationError as e:
            return JSONResponse(status_code=400, content={"error": str(e)})
        except Exception as e:
            return JSONResponse(
                status_code=500,
                content={"error": "Failed to parse OTUI", "details": str(e)},
            )
        return result.to_json_dict()

    @app.post("/api/otui/export")
    async def export(request: Request):
        """Export ``{widgets}`` to ``{code}``"""
        payload = await _read_json(request)
        try:
            code = await run_in_threadpool(app.state.handler.export, payload)
        except ValidationError as e:
            return JSONResponse(status_code=400, content={"error": str(e)})
        except Exception as e:
            return JSONResponse(
                status_code=500,
                content={"error": "Failed to export OTUI", "details": str(e)},
            )
        return {"code": code}

    return app


app = create_app()
