"""SQLAlchemy models for wmscore tables.

All models inherit from the Base class defined in database.py.
"""

from wmscore.infrastructure.persistence.models.role import RoleModel

__all__ = ["RoleModel"]
