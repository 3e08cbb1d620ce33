"""
Spanner client construction for the quickstart project.

The client, instance and database handles are created once at start-up and
bundled into a ``SpannerContext`` that is passed explicitly to every
provisioning and data operation.

Example Usage:
    ctx = get_spanner_context()
    setup_spanner(ctx)
    insert_user(ctx)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from google.cloud import spanner
from google.cloud.spanner_v1.database import Database
from google.cloud.spanner_v1.instance import Instance

if TYPE_CHECKING:
    from config.settings import Config

EMULATOR_HOST_ENV = "SPANNER_EMULATOR_HOST"


@dataclass(frozen=True)
class SpannerContext:
    """Handles shared by all operations for the lifetime of the process."""

    config: "Config"
    client: spanner.Client
    instance: Instance
    database: Database
    logger: logging.Logger


def configure_emulator(config: "Config", logger: Optional[logging.Logger] = None) -> None:
    """
    Point the Spanner client at the local emulator when enabled.

    The client library reads ``SPANNER_EMULATOR_HOST`` when it is constructed,
    so this must run before ``spanner.Client`` is created.
    """
    logger = logger or logging.getLogger(__name__)
    if config.USE_EMULATOR:
        os.environ[EMULATOR_HOST_ENV] = config.EMULATOR_HOST
        logger.info(f"Using Spanner emulator at {config.EMULATOR_HOST}")
    else:
        os.environ.pop(EMULATOR_HOST_ENV, None)
        logger.info("Using the Cloud Spanner service endpoint")


def get_spanner_context(
    config: Optional["Config"] = None, logger: Optional[logging.Logger] = None
) -> SpannerContext:
    """
    Create the Spanner client and instance/database handles.

    Creating handles makes no network calls; nothing is provisioned here.

    Args:
        config: Configuration to use. If None, uses the global config
        logger: Logger for operation tracking. If None, uses a module logger

    Returns:
        SpannerContext: Handles for all subsequent operations
    """
    if config is None:
        from config.settings import config as default_config

        config = default_config

    logger = logger or logging.getLogger(__name__)
    configure_emulator(config, logger)

    client = spanner.Client(project=config.PROJECT_ID)
    instance = client.instance(
        config.INSTANCE_ID,
        configuration_name=config.get_instance_config_name(),
        display_name=config.INSTANCE_DISPLAY_NAME,
        node_count=config.NODE_COUNT,
    )
    database = instance.database(config.DATABASE_ID)

    return SpannerContext(
        config=config,
        client=client,
        instance=instance,
        database=database,
        logger=logger,
    )
