"""FastAPI application factory and app instance."""

from __future__ import annotations

from collections.abc import Callable
from uuid import uuid4

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from apps.api.app.api.routers.comparison import router as comparison_router
from apps.api.app.api.routers.system import router as system_router
from apps.api.app.core.config import get_settings
from apps.api.app.core.ops import validate_runtime_configuration


class RequestIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Response],
    ) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid4())
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


def create_app() -> FastAPI:
    """Create FastAPI app with configuration wiring."""
    settings = get_settings()
    validate_runtime_configuration(settings)
    app = FastAPI(title=settings.app_name, version=settings.app_version)
    allowed_origins = [
        origin.strip()
        for origin in settings.cors_allowed_origins.split(",")
        if origin.strip()
    ]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIdMiddleware)
    app.include_router(system_router)
    app.include_router(comparison_router)
    return app


app = create_app()
