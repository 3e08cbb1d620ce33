#!/usr/bin/env python3
"""
Schema Verification Script

This script verifies that the User table exists in the quickstart database
with the expected columns, Spanner types and nullability.

Usage:
    python scripts/database/verify_schema.py

This will:
1. Connect to the database
2. Read the User table columns from INFORMATION_SCHEMA
3. Compare them with the expected schema
4. Report any issues found
"""

import os
import sys
from typing import Dict, List, Tuple

sys.path.append(os.path.join(os.path.dirname(__file__), "..", ".."))

from google.cloud.spanner_v1 import param_types

from config.settings import config
from scripts.database.schemas import USER_TABLE_COLUMNS, USER_TABLE_NAME
from scripts.database.spanner_client import SpannerContext, get_spanner_context

COLUMNS_SQL = """SELECT COLUMN_NAME, SPANNER_TYPE, IS_NULLABLE
FROM INFORMATION_SCHEMA.COLUMNS
WHERE TABLE_SCHEMA = '' AND TABLE_NAME = @table_name
ORDER BY ORDINAL_POSITION"""


def setup_logging():
    """Set up logging for the verification process."""
    from utils.logging import setup_logging as setup_centralized_logging

    return setup_centralized_logging(
        log_file=config.VERIFY_LOG_FILE,
        logger_name="schema_verification",
    )


def fetch_table_columns(
    ctx: SpannerContext, table_name: str = USER_TABLE_NAME
) -> Dict[str, Tuple[str, bool]]:
    """
    Read column definitions for a table.

    Returns:
        dict: Column name -> (Spanner type, nullable)
    """
    with ctx.database.snapshot() as snapshot:
        rows = list(
            snapshot.execute_sql(
                COLUMNS_SQL,
                params={"table_name": table_name},
                param_types={"table_name": param_types.STRING},
            )
        )
    return {name: (spanner_type, nullable == "YES") for name, spanner_type, nullable in rows}


def compare_columns(
    actual: Dict[str, Tuple[str, bool]],
    expected: Dict[str, Tuple[str, bool]] = USER_TABLE_COLUMNS,
) -> List[str]:
    """
    Compare actual column definitions against the expected ones.

    Returns:
        list[str]: Human-readable problems; empty when the schema matches
    """
    issues = []
    if not actual:
        return [f"Table {USER_TABLE_NAME} does not exist"]

    for name, (spanner_type, nullable) in expected.items():
        if name not in actual:
            issues.append(f"Missing column: {name}")
            continue
        actual_type, actual_nullable = actual[name]
        if actual_type != spanner_type:
            issues.append(f"Column {name} has type {actual_type}, expected {spanner_type}")
        if actual_nullable != nullable:
            expected_null = "NULL" if nullable else "NOT NULL"
            issues.append(f"Column {name} should be {expected_null}")

    for name in actual:
        if name not in expected:
            issues.append(f"Unexpected column: {name}")

    return issues


def verify_user_table(ctx: SpannerContext) -> bool:
    """Verify the User table and log the outcome."""
    ctx.logger.info(f"🔍 Verifying {USER_TABLE_NAME} table schema...")
    issues = compare_columns(fetch_table_columns(ctx))

    if issues:
        for issue in issues:
            ctx.logger.error(f"❌ {issue}")
        return False

    ctx.logger.info(f"✅ {USER_TABLE_NAME} table schema is correct")
    return True


def main():
    """Main function to verify the schema."""
    logger = setup_logging()

    try:
        ctx = get_spanner_context(config, logger)
        ok = verify_user_table(ctx)
    except Exception as e:
        logger.error(f"❌ Schema verification failed: {e}")
        sys.exit(1)

    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
