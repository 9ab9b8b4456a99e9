import time
import uuid
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from jobtracker.core.config import settings
from jobtracker.core.database import init_db
from jobtracker.core.docs import configure_openapi, docs_config_from_settings
from jobtracker.core.logging_config import get_logger, setup_logging
from jobtracker.api.error_handlers import register_exception_handlers
from jobtracker.api.endpoints import auth, health, jobs, users

setup_logging(settings.LOG_LEVEL, settings.JSON_LOGS)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    # Startup
    logger.info(f"Starting up {settings.PROJECT_NAME}...")
    logger.info("Initializing database...")
    init_db()
    logger.info("Database initialized successfully")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.PROJECT_NAME}...")


docs_config = docs_config_from_settings()

# Create FastAPI application
app = FastAPI(
    title=docs_config.title,
    version=docs_config.version,
    description=docs_config.description,
    lifespan=lifespan
)
configure_openapi(app, docs_config)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


def _log_access(request: Request, request_id: str, status_code: int, started: float):
    duration_ms = (time.perf_counter() - started) * 1000
    logger.info(
        f"{request.method} {request.url.path} {status_code} {duration_ms:.1f}ms",
        extra={
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "status_code": status_code,
            "duration_ms": round(duration_ms, 3),
            "client_ip": request.client.host if request.client else None,
        },
    )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Access log: one line per request with status and duration"""
    request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
    request.state.request_id = request_id
    started = time.perf_counter()

    try:
        response = await call_next(request)
    except Exception:
        # The 500 body is rendered by the outermost server-error middleware
        _log_access(request, request_id, 500, started)
        raise

    response.headers["X-Request-ID"] = request_id
    _log_access(request, request_id, response.status_code, started)
    return response


# Include routers
app.include_router(health.router)
app.include_router(auth.router, prefix=settings.API_V1_STR)
app.include_router(users.router, prefix=settings.API_V1_STR)
app.include_router(jobs.router, prefix=settings.API_V1_STR)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,  # Enable auto-reload during development
        log_level="info"
    )
