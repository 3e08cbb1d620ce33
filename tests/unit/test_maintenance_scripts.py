"""
Unit tests for the database reset and schema verification scripts.
"""

from unittest.mock import patch

import pytest
from google.api_core import exceptions as gexc

from scripts.database import reset_database as reset_module
from scripts.database import verify_schema as verify_module
from scripts.database.reset_database import drop_database, reset_database
from scripts.database.schemas import USER_TABLE_COLUMNS
from scripts.database.verify_schema import (
    compare_columns,
    fetch_table_columns,
    verify_user_table,
)


class TestDropDatabase:
    """Test cases for drop_database."""

    def test_drops_existing_database(self, spanner_context):
        """Test an existing database is dropped."""
        assert drop_database(spanner_context) is True
        spanner_context.database.drop.assert_called_once_with()

    def test_missing_database(self, spanner_context):
        """Test a missing database is only a warning."""
        spanner_context.database.drop.side_effect = gexc.NotFound("Database not found")

        assert drop_database(spanner_context) is False
        spanner_context.logger.warning.assert_called_once()

    def test_other_errors_propagate(self, spanner_context):
        """Test unrelated drop errors are raised."""
        spanner_context.database.drop.side_effect = gexc.PermissionDenied("denied")

        with pytest.raises(gexc.PermissionDenied):
            drop_database(spanner_context)


class TestResetDatabase:
    """Test cases for reset_database."""

    def test_drops_then_provisions(self, spanner_context):
        """Test the database is dropped before provisioning runs again."""
        with patch.object(reset_module, "setup_spanner") as mock_setup:
            mock_setup.side_effect = lambda ctx: ctx.database.drop.assert_called_once()
            reset_database(spanner_context)

        mock_setup.assert_called_once_with(spanner_context)

    def test_main_exits_on_failure(self, spanner_context):
        """Test main exits with status 1 when the reset fails."""
        with patch.object(
            reset_module, "setup_logging", return_value=spanner_context.logger
        ), patch.object(
            reset_module, "get_spanner_context", return_value=spanner_context
        ), patch.object(
            reset_module, "setup_spanner", side_effect=gexc.PermissionDenied("denied")
        ):
            with pytest.raises(SystemExit) as exc_info:
                reset_module.main()

        assert exc_info.value.code == 1


class TestCompareColumns:
    """Test cases for compare_columns."""

    def test_matching_schema(self):
        """Test no issues are reported when the schema matches."""
        assert compare_columns(dict(USER_TABLE_COLUMNS)) == []

    def test_missing_table(self):
        """Test an empty column list means the table is missing."""
        assert compare_columns({}) == ["Table User does not exist"]

    def test_wrong_type_and_nullability(self):
        """Test type and nullability mismatches are reported."""
        actual = dict(USER_TABLE_COLUMNS)
        actual["age"] = ("STRING(10)", True)
        actual["id"] = ("STRING(36)", True)

        issues = compare_columns(actual)

        assert "Column age has type STRING(10), expected INT64" in issues
        assert "Column id should be NOT NULL" in issues

    def test_missing_and_unexpected_columns(self):
        """Test missing and extra columns are reported."""
        actual = dict(USER_TABLE_COLUMNS)
        del actual["lastName"]
        actual["email"] = ("STRING(MAX)", True)

        issues = compare_columns(actual)

        assert "Missing column: lastName" in issues
        assert "Unexpected column: email" in issues


class TestVerifyUserTable:
    """Test cases for fetching and verifying the User table."""

    def test_fetch_table_columns(self, spanner_context, mock_snapshot):
        """Test INFORMATION_SCHEMA rows are converted to column definitions."""
        mock_snapshot.execute_sql.return_value = iter(
            [
                ["id", "STRING(36)", "NO"],
                ["firstName", "STRING(100)", "YES"],
            ]
        )

        columns = fetch_table_columns(spanner_context)

        assert columns == {
            "id": ("STRING(36)", False),
            "firstName": ("STRING(100)", True),
        }
        kwargs = mock_snapshot.execute_sql.call_args.kwargs
        assert kwargs["params"] == {"table_name": "User"}

    def test_verify_success(self, spanner_context):
        """Test verification passes for the expected schema."""
        with patch.object(
            verify_module, "fetch_table_columns", return_value=dict(USER_TABLE_COLUMNS)
        ):
            assert verify_user_table(spanner_context) is True

        spanner_context.logger.error.assert_not_called()

    def test_verify_failure_logs_issues(self, spanner_context):
        """Test each schema issue is logged as an error."""
        with patch.object(verify_module, "fetch_table_columns", return_value={}):
            assert verify_user_table(spanner_context) is False

        spanner_context.logger.error.assert_called_once()
