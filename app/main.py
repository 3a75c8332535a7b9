# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Tweteroo API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   poetry run tweteroo
#   poetry run uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from app.config import settings
from app.exceptions import (
    TweterooException,
    tweteroo_exception_handler,
    validation_exception_handler,
)
from app.routers import tweets, users
from lib.mongo_client import Database, MongoClientError

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    - Startup: connect to MongoDB. The server only starts accepting
      connections once this succeeds; a failure aborts startup.
    - Shutdown: close the MongoDB client.
    """
    logger.info(f"Starting Tweteroo API in {settings.ENVIRONMENT} mode")

    try:
        await Database.connect()
    except MongoClientError as e:
        logger.critical(f"Could not connect to MongoDB, refusing to start: {e}")
        raise

    yield

    logger.info("Shutting down Tweteroo API")
    await Database.close()


# Create FastAPI application
app = FastAPI(
    title="Tweteroo API",
    description="Sign up with a handle and avatar, then post, list, edit and delete tweets.",
    version="1.0.0",
    lifespan=lifespan,
)


# =============================================================================
# Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

app.add_exception_handler(TweterooException, tweteroo_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={"message": "An unexpected error occurred."}
    )


# =============================================================================
# Routers
# =============================================================================

app.include_router(users.router, tags=["Users"])
app.include_router(tweets.router, tags=["Tweets"])


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", response_class=PlainTextResponse, tags=["Root"])
async def root():
    """Plain-text acknowledgement that the API is up."""
    return "Tweteroo API is running!"


def run() -> None:
    """Start the API server on the configured host and port."""
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level="debug" if settings.DEBUG else "info",
    )


if __name__ == "__main__":
    run()
