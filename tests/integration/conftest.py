"""
Integration test fixtures and configuration.

This module provides pytest fixtures for integration testing against the Cloud
Spanner emulator. Each test session provisions its own database so runs do not
interfere with the quickstart database.

Key fixtures:
- emulator_config: Config pointing at the emulator with a unique database id
- emulator_context: SpannerContext for that database, dropped after the session

Running integration tests:
    docker run -p 9010:9010 gcr.io/cloud-spanner-emulator/emulator
    pytest tests/integration -v -m integration
"""

import os
import socket
import uuid

import pytest

from config.settings import Config
from scripts.database.spanner_client import get_spanner_context
from utils.logging import setup_logging


def emulator_available(host: str, timeout: float = 1.0) -> bool:
    """Return True if something is listening on the emulator's host:port."""
    hostname, _, port = host.rpartition(":")
    try:
        with socket.create_connection((hostname or "localhost", int(port)), timeout=timeout):
            return True
    except (OSError, ValueError):
        return False


@pytest.fixture(scope="session")
def emulator_config() -> Config:
    """
    Provide a Config for the emulator with a per-session database id.

    Skips the integration tests when the emulator is not reachable.
    """
    settings = Config()
    settings.USE_EMULATOR = True
    settings.EMULATOR_HOST = os.getenv("SPANNER_EMULATOR_HOST", settings.EMULATOR_HOST)
    settings.DATABASE_ID = f"it-{uuid.uuid4().hex[:12]}"

    if not emulator_available(settings.EMULATOR_HOST):
        pytest.skip(f"Spanner emulator not reachable at {settings.EMULATOR_HOST}")

    return settings


@pytest.fixture(scope="session")
def emulator_context(emulator_config):
    """
    Provide Spanner handles for the per-session database.

    The database is dropped after all integration tests have run; the
    instance is left in place since other runs may share it.
    """
    logger = setup_logging(logger_name="integration_tests", log_level="DEBUG")
    ctx = get_spanner_context(emulator_config, logger)

    yield ctx

    logger.info("🧹 Dropping integration test database...")
    ctx.database.drop()
