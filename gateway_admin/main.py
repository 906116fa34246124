from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from gateway_admin.config import settings
from gateway_admin.logging_config import setup_logging
from gateway_admin.routers import selectors, health
from gateway_admin.routers.selectors import OPERATION_LABELS
from gateway_admin.application.event_handlers import register_event_handlers
from gateway_admin.application.selector_access_service import error_message
from gateway_admin.schemas.envelope import AdminResult

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="Gateway Admin API",
        description="Management API for gateway selectors",
        version=settings.VERSION,
    )

    # Register domain event handlers on startup
    @app.on_event("startup")
    async def startup_event():
        register_event_handlers()
        if settings.SELECTOR_STORE == "database":
            from gateway_admin.db import init_db
            init_db()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Allows all origins
        allow_credentials=True,
        allow_methods=["*"],  # Allows all methods
        allow_headers=["*"],  # Allows all headers
    )

    # Malformed selector requests answer with the operation's error envelope, not a 422
    @app.exception_handler(RequestValidationError)
    async def selector_validation_handler(request: Request, exc: RequestValidationError):
        endpoint = request.scope.get("endpoint")
        label = OPERATION_LABELS.get(getattr(endpoint, "__name__", None))
        if label is None:
            return await request_validation_exception_handler(request, exc)
        logger.warning("%s rejected (validation): %s", label, exc.errors())
        return JSONResponse(status_code=200, content=AdminResult.error(error_message(label)).model_dump())

    # Include routers
    app.include_router(health.router, tags=["Health"])  # Health check endpoints first
    app.include_router(selectors.router, tags=["Selectors"])

    @app.get("/")
    async def root():
        return {"message": "Welcome to Gateway Admin API. See /docs for API documentation"}

    return app


app = create_app()
