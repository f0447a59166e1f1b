# app/middleware/db_middleware.py
"""
Lazy Database Connection Middleware.

Ensures the MongoDB connection and Beanie models are initialised before a
request reaches a route, for the case where startup could not connect.
"""

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
import logging

from database import Database
from settings import settings

logger = logging.getLogger(__name__)

# Served without touching the database
SKIP_PATHS = {"/", "/health", "/health/detailed"}


class LazyDatabaseMiddleware(BaseHTTPMiddleware):
    """Middleware to ensure database connection before handling requests."""

    async def dispatch(self, request: Request, call_next):
        if request.url.path in SKIP_PATHS:
            return await call_next(request)

        if not Database._initialized:
            try:
                logger.info("Lazy initializing MongoDB connection...")
                await Database.connect_db(
                    database_url=settings.DATABASE_URL,
                    database_name=settings.DATABASE_NAME
                )
            except Exception as e:
                logger.error(f"Failed to initialize database: {e}")
                # Let the request proceed; the route's store call reports the error

        return await call_next(request)
