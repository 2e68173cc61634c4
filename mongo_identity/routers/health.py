"""
Liveness and readiness checks.
"""
from fastapi import APIRouter, status
from pymongo.errors import PyMongoError

from mongo_identity.config import get_settings
from mongo_identity.database.connections import get_mongo_client

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Liveness check",
)
async def health_check():
    return {"status": "healthy"}


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness check",
)
async def readiness_check():
    """
    Ping the identity database on the shared client.

    Reports "degraded" rather than failing so orchestrators can tell a
    running API with an unreachable database from a dead process.
    """
    database_name = get_settings().database_name
    try:
        client = await get_mongo_client()
        await client[database_name].command("ping")
        mongodb = "healthy"
    except PyMongoError as e:
        mongodb = f"unhealthy: {e}"

    return {
        "status": "healthy" if mongodb == "healthy" else "degraded",
        "database": database_name,
        "mongodb": mongodb,
    }
