# vanfleet/main.py
"""
FastAPI application entry point.
create_app() wires middleware, error handlers, routers and the database
session factory. Tests pass their own session factory; otherwise one is
built from DATABASE_URL.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from vanfleet.routers import auth, vans, averias, metrics, health
from vanfleet.database import build_engine, build_session_factory, create_tables
from vanfleet.exceptions import register_exception_handlers
from vanfleet.config import settings
from vanfleet.utils.logger import get_logger
import time

logger = get_logger(__name__)


def create_app(session_factory: sessionmaker = None, create_schema: bool = True) -> FastAPI:
    app = FastAPI(
        title="Van Fleet API",
        description="Fleet vans, breakdown history and dashboard metrics.",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.session_factory = session_factory or build_session_factory(build_engine())

    # ── CORS (the dashboard sends the session cookie cross-origin) ───────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Request Timing Middleware ────────────────────────────────────────────
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.time()
        response = await call_next(request)
        duration = round((time.time() - start) * 1000, 2)
        logger.debug(f"{request.method} {request.url.path} → {response.status_code} ({duration}ms)")
        return response

    register_exception_handlers(app)

    # ── Routers ──────────────────────────────────────────────────────────────
    app.include_router(auth.router,    prefix="/api/v1", tags=["Auth"])
    app.include_router(vans.router,    prefix="/api/v1", tags=["Vans"])
    app.include_router(averias.router, prefix="/api/v1", tags=["Averías"])
    app.include_router(metrics.router, prefix="/api/v1", tags=["Metrics"])
    app.include_router(health.router,  prefix="/api/v1", tags=["Health"])

    # ── Startup ──────────────────────────────────────────────────────────────
    @app.on_event("startup")
    async def startup():
        logger.info("Van Fleet backend starting up...")
        if create_schema:
            try:
                create_tables(app.state.session_factory.kw["bind"])
                logger.info("Database tables ready")
            except SQLAlchemyError as e:
                # Keep serving: store-backed routes answer 503 and /health reports degraded
                logger.error(f"Could not create tables, database unreachable: {e}")
        logger.info("API docs at /docs")

    @app.on_event("shutdown")
    async def shutdown():
        logger.info("Van Fleet backend shutting down...")

    return app


app = create_app()
