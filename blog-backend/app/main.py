# app/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from app.core.config import settings
from app.core.exceptions import AuthError, BlogError, InputValidationError
from app.core.logging import configure_logging
from app.api.v1.api import api_router
from app.db.init_db import init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("%s %s started", settings.PROJECT_NAME, settings.VERSION)
    yield
    logger.info("%s shutting down", settings.PROJECT_NAME)


async def input_validation_error_handler(request: Request, exc: InputValidationError):
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def auth_error_handler(request: Request, exc: AuthError):
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
        headers={"WWW-Authenticate": "Bearer"},
    )


async def blog_error_handler(request: Request, exc: BlogError):
    if exc.status_code >= 500:
        logger.error("Unhandled %s on %s %s: %s", exc.code, request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"message": "Internal server error"})
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def create_application() -> FastAPI:
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # ---------- CORS ----------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.backend_cors_origins or ["*"],
        allow_credentials=bool(settings.backend_cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---------- ERRORS ----------
    app.add_exception_handler(InputValidationError, input_validation_error_handler)
    app.add_exception_handler(AuthError, auth_error_handler)
    app.add_exception_handler(BlogError, blog_error_handler)

    # ---------- ROUTERS ----------
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    @app.get("/healthz", tags=["health"])
    def healthz():
        return {"status": "ok"}

    return app


app = create_application()
