"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from orchard.api import auth
from orchard.api.resources import fruits_router, items_router, posts_router
from orchard.config import get_settings
from orchard.middleware import MethodOverrideMiddleware, log_requests
from orchard.views import fruits as fruit_views
from orchard.views import users as user_views

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logger.info(f"Starting Orchard ({settings.environment})")
    yield


app = FastAPI(
    title="Orchard API",
    description="Owned fruits, marketplace items and posts behind bearer-token auth",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://localhost:5173",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.middleware("http")(log_requests)
# Added last so it runs first and routing sees the overridden method
app.add_middleware(MethodOverrideMiddleware)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed input as a 400 client error."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


# Register routers
app.include_router(auth.router)
app.include_router(fruits_router)
app.include_router(items_router)
app.include_router(posts_router)
app.include_router(user_views.router)
app.include_router(fruit_views.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
