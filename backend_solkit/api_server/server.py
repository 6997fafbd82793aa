"""
FastAPI server: stateless Solana key, signing and instruction-building API.

Every response uses the envelope {"success": bool, "data"?: ..., "error"?: str}.
Client errors (typed SolkitError, undecodable bodies) are answered with 400.
Nothing is persisted and nothing is sent to a cluster.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend_solkit import __version__
from backend_solkit.api_server.routes import router
from backend_solkit.config import get_settings
from backend_solkit.core.exceptions import KeyGenerationError, SolkitError
from backend_solkit.solkit_logging import get_logger

logger = get_logger(__name__)

INVALID_BODY_MESSAGE = "Invalid request body"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log effective settings on startup; nothing to tear down."""
    settings = get_settings()
    logger.info(
        "api_started",
        version=__version__,
        allow_zero_token_transfer=settings.allow_zero_token_transfer,
    )
    yield
    logger.info("api_stopped")


app = FastAPI(
    title="Backend Solkit API",
    description="Keypair generation, message signing and unsigned Solana instruction building.",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(router)


@app.get("/health")
def health() -> dict[str, str]:
    """Liveness probe: API is up."""
    return {"status": "ok"}


@app.exception_handler(SolkitError)
def solkit_error_handler(request: Request, exc: SolkitError) -> JSONResponse:
    """Typed client errors: one reason per failed request."""
    if isinstance(exc, KeyGenerationError):
        logger.error("request_failed", path=request.url.path, error=exc.message)
    else:
        logger.info(
            "request_rejected",
            path=request.url.path,
            error=exc.message,
            field=getattr(exc, "field", None),
        )
    return error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed JSON or wrongly typed fields."""
    logger.info("request_body_invalid", path=request.url.path, errors=len(exc.errors()))
    return error_response(400, INVALID_BODY_MESSAGE)


@app.exception_handler(StarletteHTTPException)
def http_exception_handler(request: Any, exc: StarletteHTTPException) -> JSONResponse:
    """Consistent JSON envelope for HTTP errors (404, 405, ...)."""
    return error_response(exc.status_code, str(exc.detail))
