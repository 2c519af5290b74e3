"""PostgreSQL database layer.

This module provides:
- Connection pool management
- Repository classes for data access
- Health check utilities
"""

from recipebox.database.connection import (
    check_database_health,
    close_database_pool,
    get_database_pool,
    init_database_pool,
)


__all__ = [
    "check_database_health",
    "close_database_pool",
    "get_database_pool",
    "init_database_pool",
]
