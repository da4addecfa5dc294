"""FastAPI application setup for the dashboard gateway."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import router as api_router
from .config import settings
from .errors import register_error_handlers

app = FastAPI(title="Dashboard Gateway")

# The dashboard client is served from a different origin.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

register_error_handlers(app)

# API routes
app.include_router(api_router, prefix="/api")
