"""Shared pytest fixtures.

Puts the project root on sys.path so the top-level packages (``domain``,
``services``...) resolve when the project is not installed.
"""

import os
import sys
from decimal import Decimal

import pytest

CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from config import get_config  # noqa: E402
from domain.models.fitness_class import FitnessClass  # noqa: E402
from domain.value_objects.intensity import Intensity  # noqa: E402
from repositories.class_catalog import ClassCatalog  # noqa: E402
from repositories.trainer_directory import TrainerDirectory  # noqa: E402
from services.gym_service import GymService  # noqa: E402
from startup import build_service  # noqa: E402


@pytest.fixture
def test_config():
    return get_config("testing")


@pytest.fixture
def yoga():
    return FitnessClass("Yoga", Intensity.LIGHT, Decimal("30.0"))


@pytest.fixture
def crossfit():
    return FitnessClass("CrossFit", Intensity.HARD, Decimal("45.0"))


@pytest.fixture
def catalog(yoga, crossfit):
    catalog = ClassCatalog()
    catalog.add(yoga)
    catalog.add(crossfit)
    return catalog


@pytest.fixture
def directory():
    return TrainerDirectory()


@pytest.fixture
def service(test_config) -> GymService:
    """Empty gym."""
    return GymService(test_config)


@pytest.fixture
def seeded_service(test_config) -> GymService:
    """Gym with the startup sample data: Yoga, CrossFit, Pilates and two trainers."""
    return build_service(test_config, seed=True)
