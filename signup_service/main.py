"""
Sign-Up Service — FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() builds the MongoConnection and the sign-up controller
       graph, then registers middleware, exception handlers and routes.
Who:   Called by uvicorn to start the server (uvicorn signup_service.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌──────────────┐ ┌──────┐             │
    │  │  Req ID  │→│ Content Type │→│ CORS │             │
    │  └──────────┘ └──────────────┘ └──────┘             │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────────┐ ┌─────────────┐               │
    │  │ POST /api/signup │ │ GET /health │               │
    │  └──────────────────┘ └─────────────┘               │
    │                                                     │
    │  Exception Handlers (errors outside controllers):   │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ SignUpServiceError→500 │ Exception→500        │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Ping MongoDB with retries (failure is logged; the connection
       reconnects lazily on the first request)

    Shutdown:
    1. Close the MongoDB client
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from signup_service import __version__
from signup_service.config import settings
from signup_service.exceptions import DatabaseError, ServerError, SignUpServiceError
from signup_service.factories import make_signup_controller
from signup_service.infra.db import MongoConnection
from signup_service.middleware.content_type import ContentTypeMiddleware
from signup_service.middleware.request_id import RequestIDLogFilter, RequestIDMiddleware
from signup_service.presentation.protocols import Controller
from signup_service.routes import health, signup

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(request_id)s] %(name)s: %(message)s"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] [%(request_id)s] %(name)s: %(message)s
    Output: stdout (container runtimes collect it)

    The request id comes from RequestIDLogFilter, so every line written while
    handling a request carries that request's correlation id.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIDLogFilter())

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[handler],
        force=True,
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("Sign-Up Service %s starting up...", __version__)

    connection: MongoConnection = app.state.mongo
    try:
        await connection.wait_until_ready()
    except DatabaseError as e:
        logger.error("MongoDB not ready: %s | Context: %s", e.message, e.context)
        logger.error("Requests will reconnect lazily once MongoDB is reachable.")

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Sign-Up Service shutting down...")
    await connection.disconnect()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Last-resort handlers for errors raised outside a controller.

    Controllers turn their own failures into responses, so these only fire
    for bugs in routes, adapters or middleware. Both answer with the same
    envelope a controller would use for a ServerError; details stay in the
    server log.
    """

    @app.exception_handler(SignUpServiceError)
    async def handle_service_error(request: Request, exc: SignUpServiceError):
        logger.error("%s: %s | Context: %s", exc.name, exc.message, exc.context)
        return JSONResponse(status_code=500, content=ServerError().to_dict())

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error("Unexpected error: %s", str(exc), exc_info=exc)
        return JSONResponse(status_code=500, content=ServerError().to_dict())


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    connection: Optional[MongoConnection] = None,
    signup_controller: Optional[Controller] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        connection:        MongoDB connection; built from settings when omitted.
        signup_controller: Controller behind POST /api/signup; built by
                           make_signup_controller when omitted.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    if connection is None:
        connection = MongoConnection(
            url=settings.mongo_url,
            database_name=settings.mongo_database,
            timeout_ms=settings.mongo_timeout_ms,
            connect_attempts=settings.mongo_connect_attempts,
            retry_min_wait=settings.mongo_retry_min_wait,
            retry_max_wait=settings.mongo_retry_max_wait,
        )
    if signup_controller is None:
        signup_controller = make_signup_controller(connection, settings)

    app = FastAPI(
        title="Sign-Up Service API",
        description="Account registration backed by bcrypt and MongoDB.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.mongo = connection
    app.state.signup_controller = signup_controller

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → ContentType → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(ContentTypeMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(signup.build_router(signup_controller))
    app.include_router(health.router)

    return app


def run() -> None:
    """Console entry point: serve the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "signup_service.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `signup_service.main:app` to be importable
app = create_app()
