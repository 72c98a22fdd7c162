"""Health check route"""

from fastapi import APIRouter, Depends

from api.dependencies import get_settings
from app.config import Settings

router = APIRouter(tags=["Health"])


@router.get("/")
def health_check(settings: Settings = Depends(get_settings)):
    """Default home route. Just relays a success message back."""
    return {"name": settings.app_name, "api-status": "OK"}
