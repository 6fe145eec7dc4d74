"""FastAPI application entry point for the booth kiosk."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.api.middleware.logging_middleware import LoggingMiddleware
from src.api.routes.booth import router as booth_router
from src.api.routes.health import router as health_router
from src.api.startup import configure_logging, initialize_booth


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    configure_logging()
    initialize_booth()
    yield


app = FastAPI(
    title="Biometric Voting Booth API",
    description="Single-booth voter authentication and ballot kiosk",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(LoggingMiddleware)
app.include_router(health_router)
app.include_router(booth_router)
