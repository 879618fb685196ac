"""FastAPI application entry point."""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sopassist.core.config import settings
from sopassist.core.exceptions import SopAssistError
from sopassist.core.schemas import ErrorResponse

logger = structlog.get_logger()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -- Exception handlers --
    @app.exception_handler(SopAssistError)
    async def sopassist_error_handler(_request: Request, exc: SopAssistError) -> JSONResponse:
        logger.info("request_failed", code=exc.code, status_code=exc.status_code)
        body = ErrorResponse(code=exc.code, message=exc.message, detail=exc.detail)
        return JSONResponse(status_code=exc.status_code, content=body.model_dump())

    # -- Routes --
    from sopassist.api.routes.catalog import router as catalog_router
    from sopassist.api.routes.health import router as health_router
    from sopassist.api.routes.queries import router as queries_router

    app.include_router(health_router)
    app.include_router(catalog_router)
    app.include_router(queries_router)

    return app


app = create_app()
