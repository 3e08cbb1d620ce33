"""
Shared test fixtures and configuration for the Spanner quickstart test suite.

This file contains pytest fixtures that can be used across all test modules.
Fixtures defined here are automatically available to all test files.
"""

import logging
import os
from types import SimpleNamespace
from unittest.mock import MagicMock, Mock

import pytest
from dotenv import load_dotenv

# Load test environment variables (if any)
load_dotenv(os.path.join(os.path.dirname(__file__), "..", ".env"))

from config.settings import Config
from scripts.database.spanner_client import SpannerContext


@pytest.fixture
def test_config(monkeypatch):
    """
    Provide a Config built only from defaults.

    Spanner-related environment variables are cleared so that a developer's
    shell or .env file cannot change test expectations.
    """
    for name in (
        "SPANNER_PROJECT_ID",
        "SPANNER_INSTANCE_ID",
        "SPANNER_DATABASE_ID",
        "SPANNER_INSTANCE_CONFIG",
        "SPANNER_INSTANCE_DISPLAY_NAME",
        "SPANNER_NODE_COUNT",
        "SPANNER_USE_EMULATOR",
        "SPANNER_EMULATOR_HOST",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return Config()


@pytest.fixture
def mock_logger():
    """Provide a mock logger for asserting log calls."""
    return Mock(spec=logging.Logger)


@pytest.fixture
def mock_snapshot():
    """Provide a mock read-only snapshot."""
    return MagicMock()


@pytest.fixture
def mock_transaction():
    """Provide a mock read-write transaction that reports one updated row."""
    transaction = Mock()
    transaction.execute_update.return_value = 1
    return transaction


@pytest.fixture
def mock_database(mock_snapshot, mock_transaction):
    """
    Provide a mock Spanner database handle.

    ``snapshot()`` yields ``mock_snapshot`` as a context manager and
    ``run_in_transaction`` calls the unit of work with ``mock_transaction``.
    """
    database = MagicMock()
    database.snapshot.return_value.__enter__.return_value = mock_snapshot
    database.run_in_transaction.side_effect = lambda func: func(mock_transaction)
    return database


@pytest.fixture
def spanner_context(test_config, mock_database, mock_logger):
    """Provide a SpannerContext wired to mocks instead of a real client."""
    return SpannerContext(
        config=test_config,
        client=Mock(),
        instance=Mock(),
        database=mock_database,
        logger=mock_logger,
    )


def make_result_set(columns, rows):
    """Build a mock streamed result set with field metadata."""
    results = MagicMock()
    results.__iter__.return_value = iter(rows)
    results.fields = [SimpleNamespace(name=column) for column in columns]
    return results


@pytest.fixture
def result_set_factory():
    """Provide ``make_result_set`` to tests as a fixture."""
    return make_result_set
