"""Role entity for authorization.

A role is a named permission group such as ``ROLE_ADMIN``. The name is the
business key: unique across the store and fixed once persisted.
"""

from dataclasses import dataclass


@dataclass
class Role:
    """Role entity.

    A role is transient until the store assigns it an ``id``. The store
    is the only authority for identity, so callers construct roles
    without one.

    Attributes:
        name: Unique role name (e.g., 'ROLE_ADMIN').
        description: Optional description of the role's purpose.
        id: Store-assigned identity, None while transient.
    """

    name: str
    description: str | None = None
    id: int | None = None

    def __post_init__(self) -> None:
        """Validate role data after initialization."""
        if not self.name or not self.name.strip():
            raise ValueError("Role name is required")

    @property
    def is_new(self) -> bool:
        """Whether the role has not been persisted yet."""
        return self.id is None
