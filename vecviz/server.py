"""HTTP surface for vecviz.

GET /api/vectors?limit=<int>&dimensions=<int>
    -> {"data": [VectorItem...], "total": <int>}

Malformed or non-positive query values fall back to the configured defaults
instead of producing a 4xx.
"""

from __future__ import annotations

import sys
import time
from typing import Optional

import uvicorn
from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse, Response
from loguru import logger

from .config import Settings
from .generator import generate


class EmptyPreflightCORSMiddleware(CORSMiddleware):
    """CORSMiddleware whose preflight replies carry no body."""

    def preflight_response(self, request_headers) -> Response:
        response = super().preflight_response(request_headers)
        headers = {
            k: v for k, v in response.headers.items()
            if k not in ("content-length", "content-type")
        }
        return Response(status_code=response.status_code, headers=headers)


def parse_positive(raw: Optional[str], default: int, maximum: int) -> int:
    """Parse a positive integer query value, falling back to ``default``.

    Values above ``maximum`` are clamped to it.
    """
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    if value <= 0:
        return default
    return min(value, maximum)


async def _internal_error(request: Request, call_next) -> Response:
    try:
        return await call_next(request)
    except Exception as exc:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return JSONResponse({"error": "Internal server error"}, status_code=500)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application serving generated vector data."""
    settings = settings or Settings()

    app = FastAPI(title="vecviz")
    app.state.settings = settings

    # Middleware added later wraps earlier ones; errors are turned into
    # 500s inside CORS so they still carry the CORS headers.
    app.middleware("http")(_internal_error)
    app.add_middleware(
        EmptyPreflightCORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    api_router = APIRouter(prefix="/api")

    @api_router.get("/vectors")
    def vectors(limit: Optional[str] = None, dimensions: Optional[str] = None):
        start_time = time.time()
        n = parse_positive(limit, settings.default_limit, settings.max_limit)
        dims = parse_positive(dimensions, settings.default_dimensions, settings.max_dimensions)

        data = [item.to_dict() for item in generate(n, dims)]

        logger.info(f"Served {len(data)} vectors (dimensions={dims}) in {time.time() - start_time:.2f}s")
        return JSONResponse({"data": data, "total": len(data)})

    @api_router.options("/vectors")
    def vectors_options():
        return Response(status_code=200)

    app.include_router(api_router)
    return app


def main() -> None:
    """Run the server with settings taken from the environment."""
    settings = Settings.from_env()

    logger.remove()
    logger.add(sys.stderr, level=settings.log_level)
    logger.enable("vecviz")

    logger.info(f"Server starting on {settings.host}:{settings.port}...")
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)
