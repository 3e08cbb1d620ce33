"""
Idempotent provisioning of the Spanner instance, database and User table.

Each step creates its resource and waits for the long-running operation to
finish. "Already exists" conditions are logged as warnings and skipped; any
other failure propagates to the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from scripts.database.errors import ErrorKind, classify_error
from scripts.database.schemas import USER_TABLE_DDL, USER_TABLE_NAME

if TYPE_CHECKING:
    from scripts.database.spanner_client import SpannerContext


def ensure_instance(ctx: SpannerContext) -> bool:
    """
    Create the Spanner instance if it does not exist yet.

    Returns:
        bool: True if the instance was created, False if it already existed

    Raises:
        google.api_core.exceptions.GoogleAPICallError: For any failure other
            than the instance already existing
    """
    ctx.logger.info(f"🚀 Creating Spanner instance '{ctx.config.INSTANCE_ID}'...")
    try:
        operation = ctx.instance.create()
        operation.result()
    except Exception as e:
        if classify_error(e) is not ErrorKind.ALREADY_EXISTS:
            raise
        ctx.logger.warning(
            "⚠️  Spanner instance already exists. Skipping creation."
        )
        return False

    ctx.logger.info("✅ Spanner instance created!")
    return True


def ensure_database(ctx: SpannerContext) -> bool:
    """
    Create the database under the instance if it does not exist yet.

    Returns:
        bool: True if the database was created, False if it already existed
    """
    ctx.logger.info(f"🛠  Creating Spanner database '{ctx.config.DATABASE_ID}'...")
    try:
        operation = ctx.database.create()
        operation.result()
    except Exception as e:
        if classify_error(e) is not ErrorKind.ALREADY_EXISTS:
            raise
        ctx.logger.warning(
            "⚠️  Spanner database already exists. Skipping creation."
        )
        return False

    ctx.logger.info("✅ Spanner database created!")
    return True


def ensure_user_table(ctx: SpannerContext) -> bool:
    """
    Apply the User table DDL.

    A duplicate table surfaces as a ``FailedPrecondition`` naming the table.

    Returns:
        bool: True if the table was created, False if it already existed
    """
    ctx.logger.info(f"🗄  Creating {USER_TABLE_NAME} table...")
    try:
        operation = ctx.database.update_ddl([USER_TABLE_DDL])
        operation.result()
    except Exception as e:
        if classify_error(e) is not ErrorKind.SCHEMA_ALREADY_EXISTS:
            raise
        ctx.logger.warning(
            f"⚠️  {USER_TABLE_NAME} table already exists. Skipping creation."
        )
        return False

    ctx.logger.info(f"✅ {USER_TABLE_NAME} table created!")
    return True


def setup_spanner(ctx: SpannerContext) -> None:
    """
    Ensure the instance, database and User table exist, in that order.

    Safe to run repeatedly. Any error not tolerated by an individual step
    aborts the setup.
    """
    ensure_instance(ctx)
    ensure_database(ctx)
    ensure_user_table(ctx)
    ctx.logger.info("✅ Spanner instance & database ready!")
