"""Startup package.

Builds the application state the entry points share: the gym service,
seeded with sample data unless configuration turns that off.
"""

from config import get_config
from config.base import BaseConfig
from services.gym_service import GymService
from shared.exceptions import ConfigurationError
from startup.seed import seed_sample_data


def build_service(config: BaseConfig = None, seed: bool = None) -> GymService:
    """
    Create a GymService, seeding sample data unless disabled.

    Raises:
        ConfigurationError: If the pricing factors are unusable
    """
    config = config or get_config()

    pricing_errors = config.pricing.validate()
    if pricing_errors:
        raise ConfigurationError("pricing", "; ".join(pricing_errors))

    service = GymService(config)

    if seed is None:
        seed = config.seed.enabled
    if seed:
        seed_sample_data(service)

    return service


__all__ = ["build_service", "seed_sample_data"]
