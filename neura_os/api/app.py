#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
NEURA OS - FastAPI Application
Energy engine, tasks, focus sessions and the adaptive coach over HTTP

Version: 1.0.0
"""

import time
from contextlib import asynccontextmanager
from typing import List, Optional
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from neura_os import __version__
from neura_os.api.routes import energy, focus, psychologist, system, tasks
from neura_os.config import Settings, get_settings
from neura_os.core.ai_service import AdaptiveCoach, ChatClient, create_chat_client
from neura_os.core.models import NotFoundError, ValidationError
from neura_os.services.state_store import StateStore

logger = logging.getLogger(__name__)

_UNSET = object()

def _format_validation_errors(errors: List[dict]) -> str:
    """'field: message' pairs from pydantic errors"""
    parts = []
    for error in errors:
        loc = [str(item) for item in error.get("loc", ()) if item != "body"]
        msg = str(error.get("msg", "invalid value")).replace("Value error, ", "")
        parts.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request"

def create_app(settings: Optional[Settings] = None, chat_client=_UNSET) -> FastAPI:
    """
    Application factory.

    ``chat_client`` overrides the language-model client; pass None to force
    fallback-only mode. By default the client is built from settings.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        logger.info(f"🚀 Starting {settings.APP_NAME}...")
        logger.info(f"⚙️ Configuration: {settings.to_dict()}")
        client: Optional[ChatClient] = (
            create_chat_client(settings) if chat_client is _UNSET else chat_client
        )

        app.state.settings = settings
        app.state.store = StateStore()
        app.state.coach = AdaptiveCoach(client=client)
        app.state.started_at = time.time()

        logger.info(f"🌐 {settings.APP_NAME} listening on port {settings.PORT}")
        if not app.state.coach.llm_configured:
            logger.warning("⚠️ No language model configured - the coach will answer from the fallback only")
        logger.info("✅ Ready")

        yield

        # Shutdown
        logger.info(f"🛑 Stopping {settings.APP_NAME}...")
        try:
            await app.state.coach.aclose()
        except Exception as e:
            logger.error(f"❌ Error closing the language model client: {e}")
        app.state.store.clear()
        logger.info("✅ Resources released")

    app = FastAPI(
        title=settings.APP_NAME,
        description="Energy scoring, tasks, focus sessions and adaptive coaching",
        version=__version__,
        docs_url=None if settings.is_production() else "/docs",
        redoc_url=None if settings.is_production() else "/redoc",
        lifespan=lifespan
    )

    # ===== MIDDLEWARE =====

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Log each request; unexpected errors become a generic 500"""
        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception:
            process_time = time.time() - start_time
            logger.exception(f"❌ Error handling {request.method} {request.url.path} ({process_time:.3f}s)")
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal server error", "status_code": 500}
            )

        process_time = time.time() - start_time
        logger.info(
            f"{request.method} {request.url.path} "
            f"- {response.status_code} "
            f"- {process_time:.3f}s"
        )
        response.headers["X-Process-Time"] = f"{process_time:.6f}"
        return response

    # ===== ROUTERS =====

    app.include_router(system.router)
    app.include_router(energy.router)
    app.include_router(tasks.router)
    app.include_router(focus.router)
    app.include_router(psychologist.router)

    # ===== ERROR HANDLERS =====

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return JSONResponse(status_code=400, content={"detail": str(exc), "status_code": 400})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"detail": _format_validation_errors(exc.errors()), "status_code": 400}
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"detail": str(exc), "status_code": 404})

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail, "status_code": exc.status_code}
        )

    return app
