"""FastAPI application factory."""

import logging
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel

import src.domain  # noqa: F401  registers table models on SQLModel.metadata
from src.api.error import (
    ClientError,
    client_error_handler,
    validation_error_handler,
)
from src.api.routes.clients import router as clients_router
from src.api.routes.companies import router as companies_router
from src.api.routes.dashboard import router as dashboard_router
from src.api.routes.invoices import router as invoices_router

logger = logging.getLogger(__name__)


def create_app(config) -> FastAPI:
    logging.basicConfig(
        level=getattr(logging, str(config.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if config.CREATE_TABLES_ON_STARTUP:
            from src.depends import engine

            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
            logger.info("Database tables ensured")
        yield

    app = FastAPI(
        title="Invoicing Service",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if config.ENABLE_LOGGING_MIDDLEWARE:
        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            start_time = time.time()
            response = await call_next(request)
            elapsed_ms = int((time.time() - start_time) * 1000)
            logger.info(
                f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms}ms)"
            )
            return response

    app.add_exception_handler(ClientError, client_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(companies_router, prefix=config.API_PREFIX)
    app.include_router(clients_router, prefix=config.API_PREFIX)
    app.include_router(invoices_router, prefix=config.API_PREFIX)
    app.include_router(dashboard_router, prefix=config.API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check():
        return {"status": "ok"}

    return app
