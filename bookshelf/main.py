"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookshelf.api import books, users
from bookshelf.config import get_settings
from bookshelf.database import check_connection, init_db

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and report database connectivity on startup."""
    if check_connection():
        init_db()
        logger.info(f"Server running on port {settings.port} (database connected)")
    else:
        # Keep serving; requests will fail with 500 until the database is back
        logger.error(f"Server running on port {settings.port} WITHOUT a database connection")
    yield


app = FastAPI(
    title="Bookshelf API",
    description="Books CRUD with owner checks and email/password accounts",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render every HTTP error as {"message": ...}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies or parameters."""
    return JSONResponse(
        status_code=422,
        content={"message": "Invalid request", "errors": jsonable_encoder(exc.errors())},
    )


# Register routers
app.include_router(books.router)
app.include_router(users.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "environment": settings.environment,
        "database": "connected" if check_connection() else "unavailable",
    }


def run() -> None:
    """Serve the application with uvicorn, auto-reloading in development."""
    uvicorn.run(
        "bookshelf.main:app",
        host="0.0.0.0",  # noqa: S104
        port=settings.port,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
