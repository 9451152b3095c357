"""Development environment configuration."""

import os
from config.base import BaseConfig


class DevelopmentConfig(BaseConfig):
    """Configuration for development environment."""

    def _setup_environment(self):
        """Setup development-specific configuration."""
        self.debug = True

        # Allow broader CORS in development
        if not self.api.allowed_origins or self.api.allowed_origins == ["*"]:
            self.api.allowed_origins = [
                "http://localhost:3000",
                "http://localhost:8000",
                "http://127.0.0.1:3000",
                "http://127.0.0.1:8000",
            ]

        # Development logging
        os.environ.setdefault("LOG_LEVEL", "DEBUG")
