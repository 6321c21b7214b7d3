"""
Achilles Auth - FastAPI Application

Email one-time passcode authentication: send a code, exchange it for a JWT.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from motor.motor_asyncio import AsyncIOMotorClient

from achilles_auth import __version__
from achilles_auth.config import Settings, get_settings
from achilles_auth.core.exceptions import AuthError
from achilles_auth.core.logging import configure_logging
from achilles_auth.database.connections import create_mongo_client, get_database
from achilles_auth.database.indexes import create_indexes
from achilles_auth.routers import auth, health
from achilles_auth.services.notifier import Notifier, create_notifier

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    mongo_client: Optional[AsyncIOMotorClient] = None,
    notifier: Optional[Notifier] = None,
) -> FastAPI:
    """
    Build the application around one settings object.
    
    Settings are resolved here, so a missing DATABASE_URL or JWT_SECRET
    fails the process at startup rather than per request. The client and
    notifier can be injected (tests); otherwise they are built from settings.
    """
    if settings is None:
        settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan manager.
        
        Startup:
        - Connect to MongoDB (unless a client was injected)
        - Create unique email indexes
        
        Shutdown:
        - Close the MongoDB client if we own it
        """
        logger.info("Starting up Achilles Auth...")
        
        owns_client = app.state.mongo_client is None
        if owns_client:
            app.state.mongo_client = create_mongo_client(settings)
        
        try:
            await create_indexes(get_database(app.state.mongo_client, settings))
        except Exception as e:
            logger.warning(f"Database initialization warning: {e}")
        
        yield
        
        logger.info("Shutting down Achilles Auth...")
        if owns_client:
            app.state.mongo_client.close()
            app.state.mongo_client = None
            logger.info("Database connection closed")

    app = FastAPI(
        title="Achilles Auth API",
        description="""
## Email one-time passcode authentication

1. `POST /api/auth/send-otp` with an email to receive a 6-digit code (valid 5 minutes).
2. Exchange the code at `/api/auth/register`, `/api/auth/login` or `/api/auth/admin/login`
   for a JWT session token valid for 30 minutes.
        """,
        version=__version__,
        lifespan=lifespan,
    )
    
    app.state.settings = settings
    app.state.mongo_client = mongo_client
    app.state.notifier = notifier if notifier is not None else create_notifier(settings)
    
    # Configure CORS
    if settings.frontend_url:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[settings.frontend_url],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    
    @app.exception_handler(AuthError)
    async def auth_error_handler(request: Request, exc: AuthError):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})
    
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Invalid request body"},
        )
    
    # Include routers
    app.include_router(health.router)
    app.include_router(auth.router)
    
    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "Achilles Auth API",
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
        }
    
    return app


def run() -> None:
    """Run the API with uvicorn on the configured port."""
    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
