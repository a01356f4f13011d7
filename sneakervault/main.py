"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sneakervault.api import auth, blog, collection, pages, profile, sneakers, wishlist
from sneakervault.api.errors import register_exception_handlers
from sneakervault.api.guard import NoCacheMiddleware
from sneakervault.config import get_settings
from sneakervault.logging_config import configure_logging

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    configure_logging()
    yield


app = FastAPI(
    title="SneakerVault API",
    description="Sneaker collection and wishlist manager",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(NoCacheMiddleware)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://localhost:3001",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

register_exception_handlers(app)

# Register routers
app.include_router(auth.router)
app.include_router(collection.router)
app.include_router(wishlist.router)
app.include_router(profile.router)
app.include_router(sneakers.router)
app.include_router(blog.router)
app.include_router(pages.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
