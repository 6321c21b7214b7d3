"""
Health check router for liveness and readiness probes.
"""
from fastapi import APIRouter, Request, status

from achilles_auth.database.connections import get_database
from achilles_auth.database.indexes import missing_unique_email_indexes

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
)
async def health_check():
    """
    Basic health check endpoint.
    Returns 200 if the API is running.
    """
    return {"status": "healthy"}


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness check with dependencies",
)
async def readiness_check(request: Request):
    """
    Readiness check for MongoDB and the unique email indexes.
    
    Index creation failures at startup are only logged, so a missing index
    shows up here as ``degraded`` instead.
    """
    state = request.app.state
    checks = {
        "api": "healthy",
        "mongodb": "unknown",
        "email_indexes": "unknown",
    }
    
    try:
        await state.mongo_client.admin.command("ping")
        checks["mongodb"] = "healthy"
    except Exception as e:
        checks["mongodb"] = f"unhealthy: {str(e)}"
    
    if checks["mongodb"] == "healthy":
        try:
            missing = await missing_unique_email_indexes(
                get_database(state.mongo_client, state.settings)
            )
            if missing:
                checks["email_indexes"] = f"missing on: {', '.join(missing)}"
            else:
                checks["email_indexes"] = "healthy"
        except Exception as e:
            checks["email_indexes"] = f"unhealthy: {str(e)}"
    
    all_healthy = all(v == "healthy" for v in checks.values())
    
    return {
        "status": "healthy" if all_healthy else "degraded",
        "checks": checks,
    }
