"""
Database Management Scripts

This module contains utilities for Spanner operations:
- Client construction and emulator configuration
- Instance, database and schema provisioning
- User table reads and writes
- Database reset and schema verification
"""
