"""Main FastAPI application."""

from __future__ import annotations

import json

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.types import DispatchError

from .config import get_settings
from .logging_config import configure_logging, logger
from .routes import api_router


# Register global exception handlers for consistent error responses across the API
def register_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers for 422, dispatch, HTTP, and 500 errors."""

    @app.exception_handler(RequestValidationError)
    async def _validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.debug("validation error", extra={"errors": exc.errors(), "path": str(request.url)})
        return JSONResponse(
            {"ok": False, "error": "Invalid request", "detail": _jsonable_errors(exc)},
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    @app.exception_handler(DispatchError)
    async def _dispatch_exception_handler(request: Request, exc: DispatchError):
        logger.info(
            "dispatch error",
            extra={"code": exc.code, "status": exc.http_status, "path": str(request.url)},
        )
        return JSONResponse({"ok": False, **exc.to_dict()}, status_code=exc.http_status)

    @app.exception_handler(HTTPException)
    async def _http_exception_handler(request: Request, exc: HTTPException):
        logger.debug(
            "http error",
            extra={"detail": exc.detail, "status": exc.status_code, "path": str(request.url)},
        )
        detail = exc.detail
        if not isinstance(detail, str):
            detail = json.dumps(detail)
        return JSONResponse({"ok": False, "error": detail}, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error", extra={"path": str(request.url)})
        return JSONResponse(
            {"ok": False, "error": "Internal server error"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def _jsonable_errors(exc: RequestValidationError) -> list:
    # Pydantic puts the raised ValueError in ctx, which is not JSON serializable
    errors = []
    for error in exc.errors():
        error = dict(error)
        if "ctx" in error:
            error["ctx"] = {key: str(value) for key, value in error["ctx"].items()}
        errors.append(error)
    return errors


# Configure logging early
configure_logging()
_settings = get_settings()

# Create FastAPI app
app = FastAPI(
    title=_settings.app_name,
    version=_settings.app_version,
    docs_url=_settings.resolved_docs_url,
    redoc_url=None,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.cors_allow_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register exception handlers
register_exception_handlers(app)

# Include aggregated router
app.include_router(api_router)


@app.on_event("startup")
async def _startup() -> None:
    settings = get_settings()
    logger.info(
        "Starting dispatch server",
        extra={
            "version": settings.app_version,
            "provider": settings.messaging_provider,
            "gateway_configured": bool(settings.digitalsac_host and settings.digitalsac_token),
        },
    )


@app.on_event("shutdown")
async def _shutdown() -> None:
    logger.info("Dispatch server shutdown complete")


__all__ = ["app"]
