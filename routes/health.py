from typing import Any, Dict

from fastapi import APIRouter, Depends

from routes.deps import get_service
from services.gym_service import GymService

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check(service: GymService = Depends(get_service)) -> Dict[str, Any]:
    return {
        "status": "healthy",
        "service": "fitzone",
        "classes": service.catalog.count(),
        "trainers": service.trainers.count(),
        "subscriptions": service.ledger.count(),
    }
