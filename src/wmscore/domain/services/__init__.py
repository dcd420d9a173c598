"""Domain services for wmscore.

Services hold the business rules and translate persistence failures into
ServiceError.
"""

from wmscore.domain.services.exceptions import (
    EntityNotFoundError,
    InvalidArgumentError,
    ServiceError,
    StoreFailureError,
)
from wmscore.domain.services.role_service import RoleService

__all__ = [
    "EntityNotFoundError",
    "InvalidArgumentError",
    "RoleService",
    "ServiceError",
    "StoreFailureError",
]
