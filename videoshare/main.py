"""FastAPI main application."""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from videoshare.config import settings
from videoshare.database import AsyncSessionLocal, init_db, close_db
from videoshare.logging_config import configure_logging
from videoshare.api import admin, auth, channels, comments, history, i18n, videos
from videoshare.core.i18n import normalize_language, parse_accept_language
from videoshare.core.media import MediaStorage
from videoshare.core.seed import seed_demo_data
from videoshare.utils.error_handling import (
    VideoShareException,
    build_error_response,
    log_error,
    request_language,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    configure_logging(settings.log_level)
    logger.info("Starting %s %s", settings.app_name, settings.app_version)
    await init_db()

    if settings.seed_demo_data:
        async with AsyncSessionLocal() as session:
            await seed_demo_data(session)

    yield

    # Shutdown
    logger.info("Shutting down")
    await close_db()


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    # VideoShare API

    Video sharing backend: browsing, upload, channels, comments,
    subscriptions, shorts, search, watch history and a developer panel.

    ## Authentication
    1. Sign up: `POST /v1/auth/signup` or log in: `POST /v1/auth/login`
    2. Use token: Include in `Authorization: Bearer <token>` header

    ## Language
    Responses render labels and error messages in English or Russian.
    Pass `?lang=ru` or an `Accept-Language` header.

    ## Quick Start

    ### 1. Sign up
    ```bash
    curl -X POST http://localhost:8000/v1/auth/signup \\
      -H "Content-Type: application/json" \\
      -d '{"username": "newchannel", "password": "secret"}'
    ```

    ### 2. Upload a video
    ```bash
    curl -X POST http://localhost:8000/v1/videos \\
      -H "Authorization: Bearer YOUR_JWT_TOKEN" \\
      -F "file=@clip.mp4" -F "title=My first video" -F "tags=gaming, fun"
    ```
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def resolve_language(request: Request, call_next):
    """Pick the response language from ?lang=, Accept-Language or the default."""
    requested = request.query_params.get("lang")
    if not requested:
        requested = parse_accept_language(request.headers.get("accept-language"))
    request.state.language = normalize_language(requested or settings.default_language)
    return await call_next(request)


# Uploaded media
media_storage = MediaStorage()
media_storage.ensure_dirs()
app.mount(settings.media_url_prefix, StaticFiles(directory=str(media_storage.root)), name="media")


# Health check endpoint
@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.environment
    }


# Include routers
app.include_router(auth.router, prefix=settings.api_v1_prefix)
app.include_router(channels.router, prefix=settings.api_v1_prefix)
app.include_router(videos.router, prefix=settings.api_v1_prefix)
app.include_router(comments.router, prefix=settings.api_v1_prefix)
app.include_router(history.router, prefix=settings.api_v1_prefix)
app.include_router(i18n.router, prefix=settings.api_v1_prefix)

# Developer panel (admin only)
app.include_router(admin.router, prefix=settings.api_v1_prefix)


@app.exception_handler(VideoShareException)
async def platform_exception_handler(request: Request, exc: VideoShareException):
    """Render platform errors in the request language."""
    if exc.status_code >= 500:
        log_error(exc, context=request.url.path)
    return build_error_response(exc, request_language(request))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return build_error_response(exc, request_language(request))


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle uncaught exceptions."""
    if settings.debug:
        raise exc

    log_error(exc, context=request.url.path)
    return build_error_response(exc, request_language(request))


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "videoshare.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug
    )
