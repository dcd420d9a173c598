"""Infrastructure layer - External dependencies and implementations.

This layer contains the database adapters (SQLAlchemy) that implement
the persistence the domain services depend on.
"""

from wmscore.infrastructure.persistence.database import (
    Base,
    DatabaseManager,
    get_db_manager,
    init_database,
)

__all__ = [
    "Base",
    "DatabaseManager",
    "get_db_manager",
    "init_database",
]
