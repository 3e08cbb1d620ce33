"""
Spanner Quickstart Scripts Package

This package contains the setup orchestrator and database management scripts:

- orchestrator.py: Provision Spanner, then run the sample insert and read
- database/: Spanner client, provisioning, data operations and maintenance utilities
"""
