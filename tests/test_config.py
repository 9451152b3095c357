from decimal import Decimal

import pytest

from config import get_config
from config.base import ApiConfig, PricingConfig, SeedConfig
from config.development import DevelopmentConfig
from config.production import ProductionConfig

FITZONE_VARS = [
    "FITZONE_ENV",
    "FITZONE_FACTOR_LIGHT",
    "FITZONE_FACTOR_MEDIUM",
    "FITZONE_FACTOR_HARD",
    "FITZONE_LONG_TERM_MONTHS",
    "FITZONE_LONG_TERM_FACTOR",
    "FITZONE_MID_TERM_MONTHS",
    "FITZONE_MID_TERM_FACTOR",
    "FITZONE_PREMIUM_FACTOR",
    "FITZONE_SEED_SAMPLE_DATA",
    "FITZONE_API_HOST",
    "FITZONE_API_PORT",
    "FITZONE_ALLOWED_ORIGINS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in FITZONE_VARS:
        monkeypatch.delenv(name, raising=False)
    # Environment configs setdefault LOG_LEVEL; keep that out of other tests
    monkeypatch.setenv("LOG_LEVEL", "INFO")


def test_pricing_defaults():
    config = PricingConfig.from_env()
    assert config.intensity_factors == {
        "LIGHT": Decimal("0.90"),
        "MEDIUM": Decimal("1.00"),
        "HARD": Decimal("1.20"),
    }
    assert (config.mid_term_months, config.mid_term_factor) == (6, Decimal("0.92"))
    assert (config.long_term_months, config.long_term_factor) == (12, Decimal("0.85"))
    assert config.premium_factor == Decimal("1.30")
    assert config.validate() == []


def test_pricing_env_overrides(monkeypatch):
    monkeypatch.setenv("FITZONE_PREMIUM_FACTOR", "1.5")
    monkeypatch.setenv("FITZONE_FACTOR_HARD", "1.25")
    monkeypatch.setenv("FITZONE_LONG_TERM_MONTHS", "24")
    config = PricingConfig.from_env()
    assert config.premium_factor == Decimal("1.5")
    assert config.intensity_factors["HARD"] == Decimal("1.25")
    assert config.long_term_months == 24


@pytest.mark.parametrize("raw", ["abc", "", "nan", "Infinity"])
def test_pricing_bad_values_fall_back(monkeypatch, raw):
    monkeypatch.setenv("FITZONE_PREMIUM_FACTOR", raw)
    assert PricingConfig.from_env().premium_factor == Decimal("1.30")


def test_pricing_validate_reports_problems():
    config = PricingConfig(
        intensity_factors={"LIGHT": Decimal("-1"), "MEDIUM": Decimal("1")},
        mid_term_months=13,
    )
    errors = config.validate()
    assert "Intensity factor for LIGHT cannot be negative" in errors
    assert "Missing intensity factor for HARD" in errors
    assert "Mid-term threshold must not exceed the long-term threshold" in errors


def test_seed_and_api_sections(monkeypatch):
    assert SeedConfig.from_env().enabled is True
    monkeypatch.setenv("FITZONE_SEED_SAMPLE_DATA", "no")
    monkeypatch.setenv("FITZONE_API_PORT", "9000")
    monkeypatch.setenv("FITZONE_ALLOWED_ORIGINS", "http://a.test, http://b.test")
    assert SeedConfig.from_env().enabled is False
    api = ApiConfig.from_env()
    assert api.port == 9000
    assert api.allowed_origins == ["http://a.test", "http://b.test"]


def test_get_config_aliases():
    assert isinstance(get_config("dev"), DevelopmentConfig)
    assert isinstance(get_config("PROD"), ProductionConfig)
    assert isinstance(get_config("unknown"), DevelopmentConfig)
    assert get_config("test").is_testing


def test_get_config_reads_fitzone_env(monkeypatch):
    monkeypatch.setenv("FITZONE_ENV", "production")
    config = get_config()
    assert isinstance(config, ProductionConfig)
    assert config.is_production


def test_testing_config_ignores_pricing_env(monkeypatch):
    monkeypatch.setenv("FITZONE_PREMIUM_FACTOR", "3")
    config = get_config("testing")
    assert config.pricing.premium_factor == Decimal("1.30")
    assert config.seed.enabled is False


def test_production_seeds_only_on_request(monkeypatch):
    assert get_config("production").seed.enabled is False
    monkeypatch.setenv("FITZONE_SEED_SAMPLE_DATA", "true")
    assert get_config("production").seed.enabled is True


def test_production_requires_explicit_origins(monkeypatch):
    assert "FITZONE_ALLOWED_ORIGINS must be explicit in production" in get_config("production").validate()
    monkeypatch.setenv("FITZONE_ALLOWED_ORIGINS", "https://fitzone.example")
    assert get_config("production").validate() == []


def test_port_out_of_range(monkeypatch):
    monkeypatch.setenv("FITZONE_API_PORT", "70000")
    assert any("FITZONE_API_PORT" in e for e in get_config("testing").validate())
