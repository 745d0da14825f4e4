"""
ZeroHour Demo Backend: FastAPI application.

Wires the state engine and scenario catalog into HTTP routes, and renders
every error as the same JSON shape.

Usage:
    uvicorn zerohour.server.api:app --reload
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

import zerohour
from zerohour.base.config import ZeroHourConfig, get_config, setup_logging
from zerohour.catalog.service import ScenarioCatalog
from zerohour.engine.state_engine import StateEngine
from zerohour.errors import ZeroHourError, ErrorCode, handle_error
from zerohour.server.routers import admin, exposure, scenario, system, target
from zerohour.server.state import ApplicationState

logger = logging.getLogger(__name__)

CORS_HEADERS = ["Origin", "X-Requested-With", "Content-Type", "Accept", "Authorization"]


def _error_response(exc: ZeroHourError) -> JSONResponse:
    return JSONResponse(status_code=exc.http_status, content=exc.to_dict())


# ============================================================================
# Exception Handlers
# ============================================================================

async def zerohour_error_handler(request: Request, exc: ZeroHourError):
    logger.error(f"[API] {exc.code.value}: {exc.message}", extra={"path": request.url.path})
    return _error_response(exc)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    first = errors[0]["msg"] if errors else "malformed body"
    logger.warning(f"[API] Rejected request body on {request.url.path}: {first}")
    return _error_response(
        ZeroHourError(
            ErrorCode.REQUEST_INVALID,
            f"Invalid request body: {first}",
            details={"errors": errors},
        )
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code in (404, 405):
        return _error_response(
            ZeroHourError(
                ErrorCode.ROUTE_NOT_FOUND,
                f"Route not found: {request.method} {request.url.path}",
            )
        )
    return _error_response(
        ZeroHourError(ErrorCode.SYSTEM_INTERNAL_ERROR, str(exc.detail), http_status=exc.status_code)
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    error = handle_error(exc, context=f"{request.method} {request.url.path}")
    logger.exception(f"[API] Unhandled error: {error.message}")
    return _error_response(error)


# ============================================================================
# App Factory
# ============================================================================

def create_app(
    config: Optional[ZeroHourConfig] = None,
    engine: Optional[StateEngine] = None,
    catalog: Optional[ScenarioCatalog] = None,
    clock: Optional[Callable[[], datetime]] = None,
) -> FastAPI:
    """
    Build a fully wired application.

    Each call gets its own ApplicationState, so the engine's current
    scenario is scoped to the app instance rather than the module.
    """
    config = config or get_config()
    app_state = ApplicationState.build(config, engine=engine, catalog=catalog, clock=clock)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        current = app_state.engine.get_current()
        logger.info(
            f"[*] ZeroHour backend ready on {config.api_host}:{config.api_port} "
            f"(scenario={current['scenario']}, state={current['state']})"
        )
        yield
        logger.info("[*] ZeroHour backend shutting down")

    app = FastAPI(
        title="ZeroHour Demo Backend",
        description="Exposure-risk dashboard demo with scripted escalation scenarios",
        version=zerohour.__version__,
        lifespan=lifespan,
    )
    app.state.zerohour = app_state

    app.add_exception_handler(ZeroHourError, zerohour_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    skip_suffixes = config.log.skip_static_suffixes

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        if not request.url.path.endswith(skip_suffixes):
            logger.info(f"{request.method} {request.url.path}")
        return await call_next(request)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.security.allowed_origins),
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=CORS_HEADERS,
    )

    app.include_router(system.router)
    app.include_router(scenario.router)
    app.include_router(exposure.router)
    app.include_router(target.router)
    app.include_router(admin.router)

    # Mounted last so API routes win over files
    static_dir = Path(config.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
        logger.info(f"Serving static frontend from {static_dir.resolve()}")

    return app


app = create_app()


def serve(port: Optional[int] = None, host: Optional[str] = None):
    """Run the API with uvicorn using the global config."""
    config = get_config()
    setup_logging(config)
    uvicorn.run(
        app,
        host=host or config.api_host,
        port=port or config.api_port,
        log_level="debug" if config.debug else "info",
    )


if __name__ == "__main__":
    serve()
