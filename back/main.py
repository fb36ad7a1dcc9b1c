# Standard library imports
from contextlib import asynccontextmanager
from pathlib import Path

# Third-party imports
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute
import uvicorn

# Local application imports
from app.api import router as api_router
from app.api.internal.utils.exceptions import register_exception_handlers
from app.core.middleware import (
    BodySizeLimitMiddleware,
    RequestContextMiddleware,
    SecurityHeadersMiddleware,
    UnhandledErrorMiddleware,
)
from app.core.monitoring import get_logger, setup_sentry
from app.core.storage import ComplaintStore
from app.schemas.common import HealthResponse, StatusResponse
from app.services.rate_limit import SlidingWindowRateLimiter
from app.settings import settings

APP_VERSION = "1.0.0"

# Set up the main application logger
logger = get_logger("app")

if setup_sentry():
    logger.info(f"Sentry initialised in {settings.ENVIRONMENT} environment")


# ---- FASTAPI APP CREATION ----
def custom_generate_unique_id(route: APIRoute) -> str:
    # Handle routes without tags
    if route.tags and len(route.tags) > 0:
        return f"{route.tags[0]}-{route.name}"
    else:
        return route.name or "unnamed_route"


def build_rate_limiters() -> dict[str, SlidingWindowRateLimiter]:
    window = settings.RATE_LIMIT_WINDOW_SECONDS
    return {
        "create": SlidingWindowRateLimiter(limit=settings.CREATE_RATE_LIMIT, window_seconds=window),
        "upvote": SlidingWindowRateLimiter(limit=settings.UPVOTE_RATE_LIMIT, window_seconds=window),
    }


def create_app(data_file: Path | str | None = None) -> FastAPI:
    """Create and configure FastAPI application"""
    store = ComplaintStore(data_file or settings.DATA_FILE)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        logger.info("Starting up FastAPI application")
        count = app.state.complaint_store.load_all()
        logger.info(f"Complaint store ready with {count} records")

        yield

        # Shutdown
        logger.info("Shutting down FastAPI application")

    is_production = settings.ENVIRONMENT == "production"
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=APP_VERSION,
        description="Public complaint submission portal API",
        openapi_url=f"{settings.API_PREFIX}/openapi.json" if not is_production else None,
        docs_url=f"{settings.API_PREFIX}/docs" if not is_production else None,
        redoc_url=f"{settings.API_PREFIX}/redoc" if not is_production else None,
        generate_unique_id_function=custom_generate_unique_id,
        lifespan=lifespan,
    )
    app.state.complaint_store = store
    app.state.rate_limiters = build_rate_limiters()

    # Middlewares run outermost last-added:
    # security headers -> request context -> CORS -> body limit -> unhandled errors
    app.add_middleware(UnhandledErrorMiddleware)
    app.add_middleware(BodySizeLimitMiddleware, max_body_size=settings.MAX_BODY_SIZE)
    origins = settings.all_cors_origins
    if "*" in origins:
        # Reflect the requesting origin
        app.add_middleware(
            CORSMiddleware,
            allow_origin_regex=".*",
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    else:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)

    register_exception_handlers(app)

    @app.get("/", response_model=StatusResponse, tags=["Status"])
    async def root():
        return StatusResponse(status="ok", message="Smart Complaint Portal API running")

    # Health check endpoint
    @app.get("/health", response_model=HealthResponse, tags=["Status"])
    async def health_check(request: Request):
        return HealthResponse(
            status="healthy",
            version=APP_VERSION,
            complaints=len(request.app.state.complaint_store),
        )

    app.include_router(api_router)

    return app


# Create the app instance
app = create_app()


if __name__ == "__main__":
    logger.info(f"API listening on port {settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
