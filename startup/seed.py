"""Sample data loaded at startup."""

import logging

from domain.value_objects.intensity import Intensity
from services.gym_service import GymService

logger = logging.getLogger(__name__)


def seed_sample_data(service: GymService) -> None:
    """Three class types and two trainers, one of each employment kind."""
    yoga = service.add_class("Yoga", Intensity.LIGHT, "30.0")
    crossfit = service.add_class("CrossFit", Intensity.HARD, "45.0")
    service.add_class("Pilates", Intensity.MEDIUM, "35.0")

    service.add_permanent_trainer("Ana Popescu", "ana@fitzone.ro", yoga.name, "2500.0")
    service.add_external_trainer("Carlos Silva", "carlos@trainco.com", crossfit.name, "TrainCo", "60.0")

    logger.info(
        "Seeded %d class types and %d trainers",
        service.catalog.count(), service.trainers.count(),
    )
