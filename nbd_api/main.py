# ============================================================================
# FILE: nbd_api/main.py
# ============================================================================
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from nbd_api.api.router import api_router
from nbd_api.core.exceptions import AppException, Unauthorized
from nbd_api.core.logging import setup_logging
from nbd_api.config import settings
import logging

# Setup logging
setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Create FastAPI app instance
app = FastAPI(
    title="nbd API",
    description="Music sharing: releases, songs, follows and accounts",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(AppException)
async def app_exception_handler(request: Request, exc: AppException):
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthorized) else None
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies and query strings are plain 400s"""
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(
            part for part in first.get("loc", ())
            if isinstance(part, str) and part not in ("body", "query")
        )
        message = f"Invalid value for {field}: {first.get('msg')}" if field else first.get("msg")
    else:
        message = "Invalid request"
    logger.debug(f"Request validation failed on {request.url.path}: {errors}")
    return JSONResponse(status_code=400, content={"error": message})

# Include API router
app.include_router(api_router, prefix="/api")

@app.on_event("startup")
async def startup_event():
    """Initialize services on startup"""
    logger.info(f"Starting {settings.APP_NAME} API")
    from nbd_api.db.session import init_db
    init_db()

@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info(f"Shutting down {settings.APP_NAME} API")

@app.get("/health")
async def health_check():
    return {"status": "healthy"}
