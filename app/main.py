"""
Telal Property API - Main Application
FastAPI application with CORS, error handling, middleware, and logging
"""
from contextlib import asynccontextmanager
from datetime import datetime, timezone
import logging

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.api.routes import (
    auth_router,
    properties_router,
    customers_router,
    receipts_router,
    transactions_router,
    rental_contracts_router,
    documents_router,
    rentals_router,
    dashboard_router,
    reminders_router,
    upload_router,
)
from app.core.config import get_cors_origins, settings
from app.core.errors import RecordError, RecordValidationError
from app.database import JsonStore, get_store, init_db, test_connection
from app.dependencies import get_current_user


# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


# ==================== STARTUP & SHUTDOWN ====================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Run on application startup and shutdown"""
    logger.info("=" * 70)
    logger.info(f"Starting {settings.PROJECT_NAME} v{settings.VERSION}")
    logger.info("=" * 70)
    logger.info(f"Database file: {settings.DATABASE_PATH}")

    if init_db():
        logger.info("[OK] Database initialization complete!")
    else:
        logger.warning("[WARN] Database init failed - requests will report storage errors")

    yield

    logger.info("Application shutdown complete")


# Initialize FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description=settings.PROJECT_DESCRIPTION,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)


# ==================== MIDDLEWARE ====================


# Compression: GZip responses
app.add_middleware(GZipMiddleware, minimum_size=1000)


# CORS: Cross-Origin Resource Sharing
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    max_age=3600,
)


# ==================== ROUTERS ====================


protected = [Depends(get_current_user)]

app.include_router(auth_router, prefix="/api/auth", tags=["Authentication"])
app.include_router(properties_router, prefix="/api/properties", tags=["Properties"], dependencies=protected)
app.include_router(customers_router, prefix="/api/customers", tags=["Customers"], dependencies=protected)
app.include_router(receipts_router, prefix="/api/receipts", tags=["Receipts"], dependencies=protected)
app.include_router(transactions_router, prefix="/api/transactions", tags=["Transactions"], dependencies=protected)
app.include_router(rental_contracts_router, prefix="/api/rental-contracts", tags=["Rental Contracts"], dependencies=protected)
app.include_router(documents_router, prefix="/api/documents", tags=["Documents"], dependencies=protected)
app.include_router(rentals_router, prefix="/api/rentals", tags=["Rentals"], dependencies=protected)
app.include_router(dashboard_router, prefix="/api/dashboard", tags=["Dashboard"], dependencies=protected)
app.include_router(reminders_router, prefix="/api/send-payment-reminder", tags=["Reminders"], dependencies=protected)
app.include_router(upload_router, prefix="/api/upload", tags=["Upload"], dependencies=protected)

app.mount(
    settings.UPLOAD_URL_PREFIX,
    StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False),
    name="uploads",
)


# ==================== ERROR HANDLERS ====================


@app.exception_handler(RecordError)
async def record_error_handler(request: Request, exc: RecordError):
    """Validation -> 400, not found -> 404, storage -> 500"""
    if exc.status_code >= 500:
        logger.error(f"[STORE] {request.method} {request.url.path} failed: {exc}")
        detail = str(exc) if settings.DEBUG else "Internal server error"
        errors = [detail]
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc}")
        detail = str(exc)
        errors = exc.messages
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "detail": detail, "errors": errors},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are reported like record validation errors"""
    logger.warning(f"Validation error on {request.url}: {exc.errors()}")
    messages = [
        f"{'.'.join(str(part) for part in err.get('loc', ())[1:]) or 'body'}: {err.get('msg')}"
        for err in exc.errors()
    ]
    return await record_error_handler(request, RecordValidationError(messages))


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle all unhandled exceptions"""
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)

    # Don't expose internal errors in production
    error_message = str(exc) if settings.DEBUG else "Internal server error"

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "detail": error_message,
            "timestamp": _timestamp(),
        }
    )


# ==================== HEALTH & STATUS ENDPOINTS ====================


@app.get("/", tags=["System"])
async def root():
    """Root endpoint - API information"""
    return {
        "success": True,
        "message": f"Welcome to {settings.PROJECT_NAME}",
        "version": settings.VERSION,
        "docs": "/api/docs",
        "status": "operational",
    }


@app.get("/health", tags=["System"])
def health_check(store: JsonStore = Depends(get_store)):
    """Health check endpoint for monitoring"""
    connection_ok = test_connection(store)
    return JSONResponse(
        status_code=status.HTTP_200_OK if connection_ok else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "success": connection_ok,
            "status": "healthy" if connection_ok else "unhealthy",
            "database": "readable" if connection_ok else "unreadable",
            "timestamp": _timestamp(),
        },
    )


# ==================== REQUEST LOGGING ====================


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all incoming requests"""
    # Skip logging for health checks
    if request.url.path in ["/health"]:
        return await call_next(request)

    start_time = datetime.now(timezone.utc)
    client_host = request.client.host if request.client else "-"
    logger.info(f">> {request.method} {request.url.path} - {client_host}")

    response = await call_next(request)
    duration = (datetime.now(timezone.utc) - start_time).total_seconds()
    logger.info(f"<< {request.method} {request.url.path} - {response.status_code} ({duration:.2f}s)")
    return response
