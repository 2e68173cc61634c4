"""
mongo-identity - FastAPI Application

HTTP surface over the MongoDB user and role stores.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from pymongo.errors import PyMongoError

from mongo_identity.config import get_settings
from mongo_identity.database.connections import close_connections
from mongo_identity.database.context import IdentityDatabaseContext
from mongo_identity.database.registry import create_indexes
from mongo_identity.routers import health, roles, users

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("mongo_identity")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Connect to MongoDB
    - Create the unique name indexes (if enabled)

    Shutdown:
    - Close the MongoDB client
    """
    logger.info("Starting up mongo-identity...")

    if settings.create_indexes_on_startup:
        try:
            context = await IdentityDatabaseContext.from_settings(settings)
            await create_indexes(context)
            logger.info("Identity indexes created")
        except PyMongoError as e:
            logger.warning(f"Database initialization warning: {e}")

    yield

    logger.info("Shutting down mongo-identity...")
    await close_connections()
    logger.info("Database connections closed")


app = FastAPI(
    title="mongo-identity API",
    description="""
## MongoDB user and role store

Manage user and role accounts and the claims attached to them.

- **Roles**: create, rename, delete, look up by id or normalized name
- **Users**: same account operations for users
- **Claims**: add and remove (type, value) pairs on either kind

Names are unique per kind; a conflicting create or rename returns 409.
    """,
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(roles.router)
app.include_router(users.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "mongo-identity API",
        "version": "0.1.0",
        "docs": "/docs",
    }
