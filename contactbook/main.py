"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from contactbook.api.middleware import RequestContextMiddleware
from contactbook.api.routes import api_router
from contactbook.domain.errors import NotFoundError
from contactbook.logging_config import setup_logging
from contactbook.persistence.database import engine
from contactbook.settings import settings

# Setup logging
setup_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(f"Application startup - environment={settings.environment}")
    yield
    await engine.dispose()
    logger.info("Application shutdown")


app = FastAPI(
    title="Contact Book API",
    description="Contacts with phone numbers, filterable by lastname letter",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(RequestContextMiddleware)

app.include_router(api_router, prefix=settings.api_v1_prefix)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    """Map missing resources to 404."""
    logger.info(f"{exc} - path={request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": exc.detail},
    )


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Contact Book API",
        "version": "0.1.0",
        "docs": "/docs",
    }
