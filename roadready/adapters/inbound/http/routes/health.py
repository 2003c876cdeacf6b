"""Health check route."""

from fastapi import APIRouter, status

router = APIRouter(tags=["Health Check"])


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> dict[str, str]:
    """
    Health check endpoint for liveness/readiness.

    Returns:
        Health status
    """
    return {"status": "ok"}
