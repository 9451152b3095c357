"""
Class type endpoints.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from routes.deps import get_service
from routes.schemas import ClassCreateRequest, ClassResponse
from services.gym_service import GymService

router = APIRouter(prefix="/classes", tags=["classes"])
_LOG = logging.getLogger(__name__)


@router.get("", response_model=List[ClassResponse])
def list_classes(service: GymService = Depends(get_service)):
    """All class types in insertion order."""
    return [ClassResponse(**c.to_dict()) for c in service.catalog.list()]


@router.post("", response_model=ClassResponse, status_code=201)
def create_class(request: ClassCreateRequest, service: GymService = Depends(get_service)):
    _LOG.debug("POST /classes name=%s intensity=%s", request.name, request.intensity)
    fitness_class = service.add_class(request.name, request.intensity, request.base_price)
    return ClassResponse(**fitness_class.to_dict())


@router.get("/{name}", response_model=ClassResponse)
def get_class(name: str, service: GymService = Depends(get_service)):
    """Case-insensitive lookup by name."""
    return ClassResponse(**service.get_class(name).to_dict())
