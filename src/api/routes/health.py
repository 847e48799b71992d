from fastapi import APIRouter
import logging
from ..models import HealthResponse

router = APIRouter()
logger = logging.getLogger("api.health")


@router.get("/health", tags=["health"], response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint.
    """
    logger.debug("Health check endpoint was called.")
    return {"status": "ok"}
