"""Health check endpoint."""

from fastapi import APIRouter

from fixit.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """Report service status and the configured AI service address."""
    return {
        "status": "ok",
        "service": "FixIt AI - Complaint Classification Engine",
        "aiServiceUrl": settings.ai_service_url or None,
    }
