"""Persistence repositories for database operations."""

from wmscore.infrastructure.persistence.repositories.role_repository import (
    RoleRepository,
)

__all__ = ["RoleRepository"]
