"""Health check endpoint."""
from datetime import datetime, timezone
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pulse.config import get_settings
from pulse.models import HealthResponse
from pulse.services import get_snowflake_service, get_redis_cache

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Check health status of the API and its configured dependencies."
)
async def health_check():
    """
    Check health of the configured dependencies.

    The in-memory backend has none. Returns 503 if any is unhealthy.
    """
    settings = get_settings()
    dependencies: dict[str, str] = {}

    if settings.store_backend == "snowflake":
        try:
            snowflake = get_snowflake_service()
            sf_healthy, sf_error = await snowflake.health_check()
            dependencies["snowflake"] = "healthy" if sf_healthy else f"unhealthy: {sf_error}"
        except Exception as e:
            dependencies["snowflake"] = f"unhealthy: {str(e)}"

    if settings.question_cache_enabled:
        try:
            redis = get_redis_cache()
            redis_healthy, redis_error = await redis.health_check()
            dependencies["redis"] = "healthy" if redis_healthy else f"unhealthy: {redis_error}"
        except Exception as e:
            dependencies["redis"] = f"unhealthy: {str(e)}"

    all_healthy = all(v == "healthy" for v in dependencies.values())
    response = HealthResponse(
        status="healthy" if all_healthy else "degraded",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=settings.app_version,
        dependencies=dependencies
    )

    if not all_healthy:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=response.model_dump()
        )

    return response
