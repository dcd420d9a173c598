"""Domain entities for wmscore.

Entities are pure Python dataclasses that represent core business concepts.
They have no dependencies on infrastructure or external frameworks.
"""

from wmscore.domain.entities.role import Role

__all__ = ["Role"]
