"""FastAPI application entry point."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.routes import delivery, health
from .config import settings
from .schemas.delivery import ErrorResponse


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    message = first.get("msg", "invalid value")
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    if field:
        return f"Invalid request: {field}: {message}"
    return f"Invalid request: {message}"


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _validation_message(exc)
    logging.info(f"Rejected request to {request.url.path}: {message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error=message).model_dump(),
    )


def create_app() -> FastAPI:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = FastAPI(title=settings.app_name)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    if settings.frontend_allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.frontend_allowed_origins),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Root endpoint for diagnostics
    @app.get("/")
    def root():
        return {
            "service": settings.app_name,
            "status": "running",
            "api_prefix": settings.api_prefix,
            "health": f"{settings.api_prefix}/health",
            "docs": "/docs",
        }

    app.include_router(health.router, prefix=settings.api_prefix)
    app.include_router(delivery.router, prefix=settings.api_prefix)
    return app


app = create_app()
