"""Testing environment configuration."""

from config.base import BaseConfig, PricingConfig


class TestingConfig(BaseConfig):
    """Configuration for testing environment."""

    def _setup_environment(self):
        """Setup testing-specific configuration."""
        self.debug = True

        # Tests always price with the stock factors, whatever the shell exports
        self.pricing = PricingConfig()

        # Tests seed explicitly
        self.seed.enabled = False
        self.api.allowed_origins = ["*"]
