"""
Order Service - Main FastAPI Application.

REST API for the order lifecycle: create, confirm, cancel, deliver, query.
"""
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from api.dependencies import get_event_publisher
from api.routes import health, orders
from core.domain.errors import DomainError, DomainErrorKind
from core.infrastructure.bus.redis_stream_publisher import RedisStreamPublisher
from core.infrastructure.database.config import close_database, init_database
from core.infrastructure.logging import configure_logging, get_logger
from core.settings import get_app_settings


logger = get_logger(__name__)


_ERROR_STATUS = {
    DomainErrorKind.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    DomainErrorKind.INVALID_STATE: status.HTTP_400_BAD_REQUEST,
    DomainErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


# =============================================================================
# STARTUP/SHUTDOWN
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_app_settings()
    configure_logging(settings.server.log_level)
    logger.info("Order service starting up...")

    if settings.database.backend == "sql":
        await init_database()

    publisher = get_event_publisher()
    if isinstance(publisher, RedisStreamPublisher):
        await publisher.connect()

    yield

    logger.info("Order service shutting down...")
    if isinstance(publisher, RedisStreamPublisher):
        await publisher.disconnect()
    if settings.database.backend == "sql":
        await close_database()


# =============================================================================
# CREATE FASTAPI APP
# =============================================================================

app = FastAPI(
    title="Order Service",
    description="Order lifecycle API: creation, confirmation, cancellation and delivery.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)


# =============================================================================
# REQUEST LOGGING MIDDLEWARE
# =============================================================================

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests with timing."""
    start_time = time.time()
    logger.info(f"→ {request.method} {request.url.path}")

    response = await call_next(request)

    duration = time.time() - start_time
    logger.info(
        f"← {request.method} {request.url.path} "
        f"[{response.status_code}] ({duration:.3f}s)"
    )
    return response


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Map domain error kinds to HTTP status codes."""
    status_code = _ERROR_STATUS.get(exc.kind, status.HTTP_400_BAD_REQUEST)
    logger.info(f"{request.method} {request.url.path} rejected: {exc.kind.value}: {exc.message}")

    return JSONResponse(status_code=status_code, content=exc.to_dict())


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error", "path": request.url.path},
    )


# =============================================================================
# INCLUDE ROUTERS
# =============================================================================

app.include_router(health.router, tags=["Health"])
app.include_router(orders.router, prefix="/api/orders", tags=["Orders"])


@app.get("/", tags=["Root"])
async def root():
    """API root endpoint."""
    return {
        "message": "Order Service",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn

    server = get_app_settings().server
    uvicorn.run(app, host=server.host, port=server.port)
