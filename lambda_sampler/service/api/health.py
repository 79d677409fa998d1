"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter

from ...core.config import get_settings

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/")
async def health_check() -> dict[str, str]:
    settings = get_settings()
    return {
        "status": "ok",
        "aws_region": settings.aws_region,
        "function_name": settings.lambda_function_name or "unset",
        "timestamp": datetime.now(tz=timezone.utc).isoformat(),
    }
