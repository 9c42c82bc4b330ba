# ==============================================================================
# DATABASE PACKAGE INITIALIZATION
# ==============================================================================
# Document storage abstraction over MongoDB
# ==============================================================================

"""
Database Module
===============

Key Components:
- Adapters: BaseDatabaseAdapter contract and its Motor implementation
- Factory: Adapter construction, connection and index management
"""

from artverse.database.factory import DatabaseFactory
from artverse.database.adapters.base_adapter import BaseDatabaseAdapter

__all__ = [
    "DatabaseFactory",
    "BaseDatabaseAdapter",
]
