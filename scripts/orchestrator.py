#!/usr/bin/env python3
"""
Spanner Setup Orchestrator

This script provisions a Spanner instance, database and User table, then runs a
sample insert and read against it. By default it targets the local Spanner
emulator (see SPANNER_EMULATOR_HOST).

Pipeline Steps:
1. Provisioning - Ensure instance, database and User table exist (fatal on error)
2. Connectivity Check - Read the server's current timestamp
3. Insert - Insert one sample user inside a read-write transaction
4. Read All - Print every row of the User table as JSON

Usage:
    python scripts/orchestrator.py

Features:
- Strictly sequential execution
- Idempotent provisioning (safe to run repeatedly)
- Fail-fast on provisioning errors, log-and-continue for data steps
"""

from __future__ import annotations

import os
import sys
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

# Add project root to path for imports
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from config.settings import Config, config
from scripts.database.errors import OperationResult
from scripts.database.provisioning import setup_spanner
from scripts.database.spanner_client import SpannerContext, get_spanner_context
from scripts.database.user_repository import (
    check_connection,
    get_all_users,
    insert_user,
)
from utils.logging import setup_spanner_setup_logging


@dataclass
class RunReport:
    """Results of the non-fatal steps of a run."""

    connection: Optional[OperationResult[datetime]] = None
    insert: Optional[OperationResult[int]] = None
    users: Optional[OperationResult[List[Dict[str, Any]]]] = None
    failed_steps: List[str] = field(default_factory=list)


class SpannerSetupOrchestrator:
    """Run provisioning and the sample data steps in order."""

    def __init__(
        self,
        settings: Optional[Config] = None,
        context: Optional[SpannerContext] = None,
    ):
        """
        Initialize the orchestrator with logging and Spanner handles.

        Args:
            settings: Configuration to use. If None, uses the global config
            context: Pre-built Spanner handles. If None, builds them from settings
        """
        self.config = settings or config
        if context is None:
            logger = setup_spanner_setup_logging(self.config.LOG_LEVEL)
            context = get_spanner_context(self.config, logger)
        self.context = context
        self.logger = context.logger
        self.start_time = time.time()

    def run(self) -> RunReport:
        """
        Run the full setup and demo sequence.

        Returns:
            RunReport: Results of the connectivity, insert and read steps

        Raises:
            Exception: Any provisioning error other than "already exists"
        """
        self.logger.info("🚀 Starting Spanner setup")
        self.logger.info(
            f"Configuration: project={self.config.PROJECT_ID}, "
            f"instance={self.config.INSTANCE_ID}, database={self.config.DATABASE_ID}"
        )

        self.logger.info("📋 Step 1/4: Provisioning")
        setup_spanner(self.context)

        report = RunReport()

        self.logger.info("📋 Step 2/4: Connectivity Check")
        report.connection = check_connection(self.context)
        self._record(report, "Connectivity Check", report.connection)

        self.logger.info("📋 Step 3/4: Insert")
        report.insert = insert_user(self.context)
        self._record(report, "Insert", report.insert)

        self.logger.info("📋 Step 4/4: Read All")
        report.users = get_all_users(self.context)
        self._record(report, "Read All", report.users)

        self._log_summary(report)
        return report

    def _record(self, report: RunReport, step_name: str, result: OperationResult) -> None:
        if result.ok:
            self.logger.info(f"✅ Completed: {step_name}")
        else:
            report.failed_steps.append(step_name)
            self.logger.warning(
                f"⚠️  {step_name} failed ({result.kind.value}); continuing"
            )

    def _log_summary(self, report: RunReport) -> None:
        elapsed = time.time() - self.start_time
        self.logger.info("=" * 60)
        if report.failed_steps:
            self.logger.warning(
                f"⚠️  Finished with failed steps: {', '.join(report.failed_steps)}"
            )
        else:
            self.logger.info("🎉 All steps completed successfully")
        self.logger.info(f"⏱️  Total execution time: {elapsed:.1f}s")
        self.logger.info("=" * 60)


def main() -> None:
    """Main entry point for the setup orchestrator."""
    orchestrator = SpannerSetupOrchestrator()

    try:
        orchestrator.run()
    except Exception as e:
        orchestrator.logger.error(f"❌ Spanner setup failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
