#!/usr/bin/env python3
"""
Database Reset Script

This script provides a clean way to drop the quickstart database and recreate
it with an empty User table. Use this when you want to start fresh.

Usage:
    python scripts/database/reset_database.py

This will:
1. Drop the database (if it exists)
2. Re-run provisioning for the instance, database and User table
3. Log the entire process for verification
"""

import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), "..", ".."))

from google.api_core.exceptions import NotFound

from config.settings import config
from scripts.database.provisioning import setup_spanner
from scripts.database.spanner_client import SpannerContext, get_spanner_context


def setup_logging():
    """Set up logging for the reset process."""
    from utils.logging import setup_logging as setup_centralized_logging

    return setup_centralized_logging(
        log_file=config.RESET_LOG_FILE,
        logger_name="database_reset",
    )


def drop_database(ctx: SpannerContext) -> bool:
    """
    Drop the database if it exists.

    Returns:
        bool: True if the database was dropped, False if it did not exist
    """
    ctx.logger.info(f"Dropping database '{ctx.config.DATABASE_ID}'...")
    try:
        ctx.database.drop()
    except NotFound:
        ctx.logger.warning("⚠️  Database does not exist. Nothing to drop.")
        return False

    ctx.logger.info("✅ Database dropped")
    return True


def reset_database(ctx: SpannerContext) -> None:
    """Drop the database and provision it again with an empty User table."""
    ctx.logger.info("Step 1: Dropping the existing database...")
    drop_database(ctx)

    ctx.logger.info("Step 2: Re-creating instance, database and User table...")
    setup_spanner(ctx)


def main():
    """Main function to reset the database."""
    logger = setup_logging()

    try:
        logger.info("Starting database reset process...")
        ctx = get_spanner_context(config, logger)
        reset_database(ctx)
        logger.info("✅ Database reset completed successfully!")
    except Exception as e:
        logger.error(f"❌ Database reset failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
