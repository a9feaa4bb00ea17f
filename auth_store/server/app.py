"""
FastAPI application exposing key validation.

``GET /v1/validate?accountName=...&apiKey=...`` answers 204 for a valid key and
404 for an invalid one. Other methods get 405 and missing parameters get 400,
both with a JSON ``{"message": ...}`` body.
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from .. import AuthStore, __version__
from ..models.config import ValidationResult

logger = logging.getLogger(__name__)

VALIDATE_PATH = "/v1/validate"

_ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def error_response(status_code: int, user_message: str, log_message: str = "") -> JSONResponse:
    """Log an API error and build its JSON response."""
    logger.info(log_message or user_message, extra={"status_code": status_code})
    return JSONResponse(status_code=status_code, content={"message": user_message})


def create_app(store: AuthStore) -> FastAPI:
    """
    Build the FastAPI application bound to an AuthStore.

    Args:
        store: AuthStore instance owning the key cache and identity oracle

    Returns:
        FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        await store.initialize()
        logger.info("auth-store ready.", extra={"cache_size": store.cache.capacity})
        yield
        await store.close()
        logger.info("Shutting down auth-store.")

    app = FastAPI(
        title="auth-store",
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.store = store

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.debug(
            "HTTP %s %s",
            request.method,
            request.url.path,
            extra={"status_code": response.status_code, "elapsed_ms": round(elapsed_ms, 1)},
        )
        return response

    @app.api_route(VALIDATE_PATH, methods=_ALL_METHODS)
    async def validate(request: Request) -> Response:
        """Determine whether an API key is valid for a specific account."""
        if request.method != "GET":
            return error_response(
                405,
                "Method not allowed.",
                f"Unsupported method {request.method} on {VALIDATE_PATH}.",
            )

        account_name = request.query_params.get("accountName", "")
        api_key = request.query_params.get("apiKey", "")
        if not account_name or not api_key:
            return error_response(
                400,
                'Missing required query parameters "accountName" and "apiKey".',
                "Key validation request missing required query parameters.",
            )

        result = await store.validate(account_name, api_key)
        if result is ValidationResult.VALID:
            return Response(status_code=204)
        return Response(status_code=404)

    return app
