"""
Configuration settings for the Spanner quickstart project.

This module centralizes all configuration values and provides a single source of truth for all
configurable parameters.
"""

import os

from dotenv import load_dotenv

load_dotenv(os.path.join(os.path.dirname(__file__), "..", ".env"))

_TRUE_VALUES = {"1", "true", "yes", "on"}


class Config:
    """
    Central configuration class for the Spanner quickstart project.

    This class consolidates all configuration values including the Spanner
    project/instance/database identifiers, emulator settings, and logging
    parameters. Defaults match a local emulator setup and can be overridden
    through environment variables.
    """

    # Spanner Configuration
    PROJECT_ID: str = "test-project"
    INSTANCE_ID: str = "test-instance"
    DATABASE_ID: str = "test-db"
    INSTANCE_CONFIG: str = "emulator"
    INSTANCE_DISPLAY_NAME: str = "Test Instance"
    NODE_COUNT: int = 1

    # Emulator Configuration
    USE_EMULATOR: bool = True
    EMULATOR_HOST: str = "localhost:9010"

    # File Paths
    LOG_FILE: str = "logs/spanner_setup.log"
    RESET_LOG_FILE: str = "logs/database_reset.log"
    VERIFY_LOG_FILE: str = "logs/schema_verification.log"

    # Logging Configuration
    LOG_LEVEL: str = "INFO"
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3

    def __init__(self):
        """Initialize configuration by loading from environment variables."""
        self._load_from_env()
        self._validate()

    def _load_from_env(self):
        """Load configuration values from environment variables."""
        # Spanner settings
        project_id = os.getenv("SPANNER_PROJECT_ID")
        if project_id:
            self.PROJECT_ID = project_id

        instance_id = os.getenv("SPANNER_INSTANCE_ID")
        if instance_id:
            self.INSTANCE_ID = instance_id

        database_id = os.getenv("SPANNER_DATABASE_ID")
        if database_id:
            self.DATABASE_ID = database_id

        instance_config = os.getenv("SPANNER_INSTANCE_CONFIG")
        if instance_config:
            self.INSTANCE_CONFIG = instance_config

        display_name = os.getenv("SPANNER_INSTANCE_DISPLAY_NAME")
        if display_name:
            self.INSTANCE_DISPLAY_NAME = display_name

        node_count = os.getenv("SPANNER_NODE_COUNT")
        if node_count:
            self.NODE_COUNT = int(node_count)

        # Emulator settings
        use_emulator = os.getenv("SPANNER_USE_EMULATOR")
        if use_emulator:
            self.USE_EMULATOR = use_emulator.strip().lower() in _TRUE_VALUES

        emulator_host = os.getenv("SPANNER_EMULATOR_HOST")
        if emulator_host:
            self.EMULATOR_HOST = emulator_host

        log_level = os.getenv("LOG_LEVEL")
        if log_level:
            self.LOG_LEVEL = log_level

    def _validate(self):
        """
        Validate required configuration values.

        Raises:
            ValueError: If a configuration value is missing or out of range.
        """
        for name in ("PROJECT_ID", "INSTANCE_ID", "DATABASE_ID", "INSTANCE_CONFIG"):
            if not getattr(self, name):
                raise ValueError(f"{name} must not be empty")

        if self.NODE_COUNT < 1:
            raise ValueError(
                f"SPANNER_NODE_COUNT must be at least 1, got {self.NODE_COUNT}"
            )

        if self.USE_EMULATOR and not self.EMULATOR_HOST:
            raise ValueError(
                "SPANNER_EMULATOR_HOST is required when the emulator is enabled. "
                "Please set it in your .env file or environment."
            )

    def get_instance_config_name(self) -> str:
        """
        Generate the fully qualified instance configuration name.

        Returns:
            str: Instance config path, e.g. ``projects/test-project/instanceConfigs/emulator``
        """
        if self.INSTANCE_CONFIG.startswith("projects/"):
            return self.INSTANCE_CONFIG
        return f"projects/{self.PROJECT_ID}/instanceConfigs/{self.INSTANCE_CONFIG}"


# Global configuration instance
config = Config()
