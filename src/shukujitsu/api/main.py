"""
Shukujitsu API

Read-only HTTP service answering Japanese national holiday queries.

Endpoints:
    GET /health                          - Liveness probe
    GET /rules                           - Named holiday rules
    GET /holidays/{date}                 - Look up one date
    GET /holidays/year/{year}            - Holidays of a year
    GET /holidays/month/{year}/{month}   - Holidays of a month
    GET /holidays?start=&end=&inclusive= - Holidays in an interval
"""
from __future__ import annotations

import logging
import time
import uuid
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..calendars import HOLIDAY_RULES
from ..config import Settings, load_settings
from ..exceptions import ShukujitsuError
from ..logging_config import configure_logging
from . import routes
from .schemas import ErrorResponse, HealthResponse

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API application."""
    settings = settings or load_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Shukujitsu API",
        description="""
**Japanese national holiday (祝日) lookups.**

Every amendment of the National Holidays Act since 1948, including
substitute holidays (振替休日) and citizen's holidays (国民の休日).

## Quick Start

1. `GET /holidays/2024-01-01` - Is this date a holiday?
2. `GET /holidays/year/2024` - All holidays of 2024
3. `GET /holidays?start=2024-04-27&end=2024-05-06` - Golden Week
        """,
        version=__version__,
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url="/redoc" if settings.docs_enabled else None,
        openapi_url="/openapi.json" if settings.docs_enabled else None,
    )
    app.state.settings = settings

    @app.middleware("http")
    async def add_request_id(request: Request, call_next):
        """Add request ID to all requests and log the outcome."""
        request_id = str(uuid.uuid4())[:8]
        request.state.request_id = request_id
        start_time = time.time()

        response = await call_next(request)

        duration_ms = round((time.time() - start_time) * 1000, 2)
        response.headers["X-Request-ID"] = request_id
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code}",
            extra={
                "request_id": request_id,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return response

    @app.exception_handler(ShukujitsuError)
    async def handle_domain_error(request: Request, exc: ShukujitsuError):
        request_id = getattr(request.state, "request_id", None)
        logger.warning(f"Rejected request: {exc}", extra={"request_id": request_id})
        error = ErrorResponse(**exc.to_dict(), request_id=request_id)
        return JSONResponse(status_code=422, content=error.model_dump(exclude_none=True))

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        """Health check endpoint."""
        return HealthResponse(
            healthy=True,
            version=__version__,
            rules_loaded=len(HOLIDAY_RULES),
        )

    app.include_router(routes.router)

    logger.info(f"Shukujitsu API v{__version__} ready ({len(HOLIDAY_RULES)} rules)")
    return app


def run(settings: Optional[Settings] = None) -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    settings = settings or load_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
