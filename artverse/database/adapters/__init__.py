# ==============================================================================
# DATABASE ADAPTERS PACKAGE
# ==============================================================================

"""
Database Adapters
=================

- BaseDatabaseAdapter: Abstract interface definition
- MongoDBAdapter: MongoDB using Motor async driver
"""

from artverse.database.adapters.base_adapter import BaseDatabaseAdapter
from artverse.database.adapters.mongodb_adapter import MongoDBAdapter

__all__ = [
    "BaseDatabaseAdapter",
    "MongoDBAdapter",
]
