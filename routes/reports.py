from fastapi import APIRouter, Depends

from routes.deps import get_service
from routes.schemas import ReportResponse, TrainerBrief
from services.gym_service import GymService

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/trainers-by-class", response_model=ReportResponse)
def trainers_by_class(service: GymService = Depends(get_service)):
    report = service.trainers_by_class()
    return ReportResponse(groups={
        class_name: [TrainerBrief(id=t.id, name=t.name, type=t.trainer_type) for t in trainers]
        for class_name, trainers in report.items()
    })
