"""
Data operations against the User table.

All three operations are non-fatal: failures are logged and returned as a
failed ``OperationResult`` instead of being raised, so callers can tell an
empty result apart from an error.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from scripts.database.errors import OperationResult
from scripts.database.schemas import USER_PARAM_TYPES, User

if TYPE_CHECKING:
    from scripts.database.spanner_client import SpannerContext

CURRENT_TIMESTAMP_SQL = "SELECT CURRENT_TIMESTAMP()"

INSERT_USER_SQL = """INSERT INTO User (id, firstName, lastName, age)
VALUES (@id, @firstName, @lastName, @age)"""

SELECT_ALL_USERS_SQL = "SELECT * FROM User"


def default_user() -> User:
    """Sample record inserted by the quickstart run."""
    return User(firstName="Jane", lastName="Doe", age=36)


def check_connection(ctx: SpannerContext) -> OperationResult[datetime]:
    """
    Verify connectivity by reading the server's current timestamp.

    Returns:
        OperationResult[datetime]: The server timestamp, or the error
    """
    try:
        with ctx.database.snapshot() as snapshot:
            rows = list(snapshot.execute_sql(CURRENT_TIMESTAMP_SQL))
        timestamp = rows[0][0]
    except Exception as e:
        ctx.logger.error(f"❌ Error checking connection: {e}")
        return OperationResult.failure(e)

    ctx.logger.info(f"Connection successful. Current timestamp: {timestamp}")
    return OperationResult.success(timestamp)


def insert_user(
    ctx: SpannerContext, user: Optional[User] = None
) -> OperationResult[int]:
    """
    Insert one user inside a read-write transaction.

    The transaction commits when the unit of work returns. When no user is
    given, a new Jane Doe record with a fresh UUID is inserted.

    Args:
        ctx: Spanner handles
        user: Record to insert. If None, uses ``default_user()``

    Returns:
        OperationResult[int]: Number of inserted rows, or the error
    """
    if user is None:
        user = default_user()

    def _insert(transaction) -> int:
        return transaction.execute_update(
            INSERT_USER_SQL,
            params=user.to_params(),
            param_types=USER_PARAM_TYPES,
        )

    try:
        row_count = ctx.database.run_in_transaction(_insert)
    except Exception as e:
        ctx.logger.error(f"❌ Error inserting record: {e}")
        return OperationResult.failure(e)

    ctx.logger.info(f"Inserted {row_count} record(s) with id {user.id}.")
    return OperationResult.success(row_count)


def get_all_users(ctx: SpannerContext) -> OperationResult[List[Dict[str, Any]]]:
    """
    Read every row of the User table.

    Each row becomes a ``{column name: value}`` dict. The list is printed as
    JSON and returned; an empty table gives a successful empty list.

    Returns:
        OperationResult[list[dict]]: All users, or an empty list and the error
    """
    try:
        with ctx.database.snapshot() as snapshot:
            results = snapshot.execute_sql(SELECT_ALL_USERS_SQL)
            rows = list(results)
            columns = [field.name for field in results.fields]
    except Exception as e:
        ctx.logger.error(f"❌ Error getting all users: {e}")
        return OperationResult.failure(e, default=[])

    users = [dict(zip(columns, row)) for row in rows]
    print(f"All users: {json.dumps(users, default=str)}")
    return OperationResult.success(users)
