"""Production environment configuration."""

import os
from config.base import BaseConfig


class ProductionConfig(BaseConfig):
    """Configuration for production environment."""

    def _setup_environment(self):
        """Setup production-specific configuration."""
        self.debug = False

        # Sample data only when explicitly requested
        if os.getenv("FITZONE_SEED_SAMPLE_DATA") is None:
            self.seed.enabled = False

        # Production logging
        os.environ.setdefault("LOG_LEVEL", "INFO")
