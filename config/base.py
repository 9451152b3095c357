"""
Base configuration class with all application settings.

Every section is a dataclass with a ``from_env`` classmethod so settings can
be overridden through environment variables (or a ``.env`` file loaded by
the entry points).
"""

import os
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Dict, List

from shared.constants import (
    INTENSITY_FACTORS,
    LONG_TERM_FACTOR,
    LONG_TERM_MONTHS,
    MID_TERM_FACTOR,
    MID_TERM_MONTHS,
    PREMIUM_FACTOR,
)


def _get_bool(name: str, default: bool) -> bool:
    """Parse boolean environment variable."""
    val = os.getenv(name)
    if val is None:
        return default
    v = val.strip().lower()
    return v in ("1", "true", "yes", "on")


def _get_int(name: str, default: int) -> int:
    """Parse integer environment variable."""
    try:
        return int(os.getenv(name, str(default)))
    except (ValueError, TypeError):
        return default


def _get_decimal(name: str, default: Decimal) -> Decimal:
    """Parse decimal environment variable."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = Decimal(raw.strip())
    except InvalidOperation:
        return default
    return value if value.is_finite() else default


def _get_list(name: str, default: List[str] = None, separator: str = ",") -> List[str]:
    """Parse comma-separated list environment variable."""
    if default is None:
        default = []

    val = os.getenv(name, "")
    if not val.strip():
        return default

    return [item.strip() for item in val.split(separator) if item.strip()]


@dataclass(frozen=True)
class PricingConfig:
    """Subscription pricing factors."""
    intensity_factors: Dict[str, Decimal] = field(default_factory=lambda: dict(INTENSITY_FACTORS))
    long_term_months: int = LONG_TERM_MONTHS
    long_term_factor: Decimal = LONG_TERM_FACTOR
    mid_term_months: int = MID_TERM_MONTHS
    mid_term_factor: Decimal = MID_TERM_FACTOR
    premium_factor: Decimal = PREMIUM_FACTOR

    @classmethod
    def from_env(cls) -> 'PricingConfig':
        return cls(
            intensity_factors={
                "LIGHT": _get_decimal("FITZONE_FACTOR_LIGHT", INTENSITY_FACTORS["LIGHT"]),
                "MEDIUM": _get_decimal("FITZONE_FACTOR_MEDIUM", INTENSITY_FACTORS["MEDIUM"]),
                "HARD": _get_decimal("FITZONE_FACTOR_HARD", INTENSITY_FACTORS["HARD"]),
            },
            long_term_months=_get_int("FITZONE_LONG_TERM_MONTHS", LONG_TERM_MONTHS),
            long_term_factor=_get_decimal("FITZONE_LONG_TERM_FACTOR", LONG_TERM_FACTOR),
            mid_term_months=_get_int("FITZONE_MID_TERM_MONTHS", MID_TERM_MONTHS),
            mid_term_factor=_get_decimal("FITZONE_MID_TERM_FACTOR", MID_TERM_FACTOR),
            premium_factor=_get_decimal("FITZONE_PREMIUM_FACTOR", PREMIUM_FACTOR),
        )

    def validate(self) -> List[str]:
        errors = []
        for tier in ("LIGHT", "MEDIUM", "HARD"):
            factor = self.intensity_factors.get(tier)
            if factor is None:
                errors.append(f"Missing intensity factor for {tier}")
            elif factor < 0:
                errors.append(f"Intensity factor for {tier} cannot be negative")
        if self.mid_term_months > self.long_term_months:
            errors.append("Mid-term threshold must not exceed the long-term threshold")
        for name in ("long_term_factor", "mid_term_factor", "premium_factor"):
            if getattr(self, name) < 0:
                errors.append(f"{name} cannot be negative")
        return errors


@dataclass
class SeedConfig:
    """Startup sample data."""
    enabled: bool = True

    @classmethod
    def from_env(cls) -> 'SeedConfig':
        return cls(enabled=_get_bool("FITZONE_SEED_SAMPLE_DATA", True))


@dataclass
class ApiConfig:
    """HTTP API settings."""
    host: str = "0.0.0.0"
    port: int = 8000
    allowed_origins: List[str] = None

    @classmethod
    def from_env(cls) -> 'ApiConfig':
        return cls(
            host=os.getenv("FITZONE_API_HOST", "0.0.0.0"),
            port=_get_int("FITZONE_API_PORT", 8000),
            allowed_origins=_get_list("FITZONE_ALLOWED_ORIGINS", ["*"]),
        )


class BaseConfig:
    """
    Base configuration class that consolidates all application settings.
    """

    def __init__(self):
        # Core app configuration
        self.app_name: str = "FitZone+ Manager"
        self.app_version: str = "1.0.0"
        self.debug: bool = _get_bool("DEBUG", False)
        self.environment: str = os.getenv("FITZONE_ENV", "development")

        # Configuration groups
        self.pricing = PricingConfig.from_env()
        self.seed = SeedConfig.from_env()
        self.api = ApiConfig.from_env()

        # Initialize environment-specific settings
        self._setup_environment()

    def _setup_environment(self):
        """Setup environment-specific configuration. Override in subclasses."""
        pass

    @property
    def is_development(self) -> bool:
        return self.environment.lower() in ("development", "dev")

    @property
    def is_production(self) -> bool:
        return self.environment.lower() in ("production", "prod")

    @property
    def is_testing(self) -> bool:
        return self.environment.lower() in ("testing", "test")

    def validate(self) -> List[str]:
        """
        Validate configuration and return list of validation errors.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = list(self.pricing.validate())

        if not 0 < self.api.port < 65536:
            errors.append(f"FITZONE_API_PORT out of range: {self.api.port}")

        if self.is_production and self.api.allowed_origins == ["*"]:
            errors.append("FITZONE_ALLOWED_ORIGINS must be explicit in production")

        return errors
