"""
Trainer endpoints.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from routes.deps import get_service
from routes.schemas import TrainerCreateRequest, TrainerResponse
from services.gym_service import GymService
from shared.exceptions import DataValidationError

router = APIRouter(prefix="/trainers", tags=["trainers"])
_LOG = logging.getLogger(__name__)


@router.get("", response_model=List[TrainerResponse])
def list_trainers(service: GymService = Depends(get_service)):
    return [TrainerResponse(**t.to_dict()) for t in service.trainers.list()]


@router.post("", response_model=TrainerResponse, status_code=201)
def create_trainer(request: TrainerCreateRequest, service: GymService = Depends(get_service)):
    """Add a permanent or external trainer; the payload fields depend on ``type``."""
    _LOG.debug("POST /trainers type=%s name=%s", request.type, request.name)
    if request.type == "permanent":
        if request.monthly_salary is None:
            raise DataValidationError("monthly_salary is required for permanent trainers")
        trainer = service.add_permanent_trainer(
            request.name, request.email, request.specialization, request.monthly_salary
        )
    else:
        if not request.company or request.hourly_rate is None:
            raise DataValidationError("company and hourly_rate are required for external trainers")
        trainer = service.add_external_trainer(
            request.name, request.email, request.specialization, request.company, request.hourly_rate
        )
    return TrainerResponse(**trainer.to_dict())


@router.get("/{trainer_id}", response_model=TrainerResponse)
def get_trainer(trainer_id: int, service: GymService = Depends(get_service)):
    return TrainerResponse(**service.get_trainer(trainer_id).to_dict())
