"""
User Registration API - FastAPI Application

Registration and authentication for users and admins, backed by MongoDB.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from user_api.config import get_settings
from user_api.core.errors import AppError, InternalError, ValidationError
from user_api.core.security import ensure_signing_key
from user_api.database.collections import create_indexes
from user_api.database.connections import close_connections, connect_mongo, connect_redis
from user_api.routers import admin, health, users

logger = logging.getLogger("user_api")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Refuse to start without a JWT signing secret
    - Open MongoDB and Redis handles
    - Create unique indexes

    Shutdown:
    - Close all database connections
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Starting up User Registration API...")

    ensure_signing_key(settings)

    app.state.mongo = connect_mongo(settings)
    app.state.redis = connect_redis(settings)

    # Uniqueness of email and username depends on these indexes
    try:
        await create_indexes(app.state.mongo.database)
    except Exception as e:
        logger.error("Could not create database indexes: %s", e)
        await close_connections(app.state.mongo, app.state.redis)
        raise
    logger.info("Database indexes created")

    yield

    logger.info("Shutting down User Registration API...")
    await close_connections(app.state.mongo, app.state.redis)
    logger.info("Database connections closed")


# Create FastAPI application
app = FastAPI(
    title="User Registration API",
    description="""
## User and Admin Registration API

### Features
- **Users**: register, login, list and fetch accounts
- **Admins**: signup and login with an `admin` role claim
- **Tokens**: HS256 JWTs valid for 24 hours

### Authentication
Protected endpoints expect the token returned by register/login:
```
Authorization: Bearer <token>
```

### Errors
Every error response has the shape `{"success": false, "message": "...", "errors": [...]}`.
    """,
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Error handlers
# =============================================================================

@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload(), headers=headers)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        errors.append({
            "field": ".".join(location) or "body",
            "message": error.get("msg", "Invalid value"),
        })
    return await app_error_handler(request, ValidationError(errors=errors))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    payload = InternalError().to_payload()
    if get_settings().is_development:
        payload["error"] = str(exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=payload)


# Include routers
app.include_router(health.router)
app.include_router(users.router)
app.include_router(admin.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "User Registration API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health",
    }
