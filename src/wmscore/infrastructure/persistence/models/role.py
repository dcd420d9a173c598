"""SQLAlchemy model for the roles table."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from wmscore.infrastructure.persistence.database import Base


class RoleModel(Base):
    """SQLAlchemy model for the roles table.

    Attributes:
        id: Auto-incrementing primary key.
        name: Unique role name.
        description: Optional description of the role's purpose.
    """

    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    name: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        unique=True,
        index=True,
        comment="Role name (e.g., 'ROLE_ADMIN')",
    )
    description: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        comment="Description of the role's purpose",
    )

    def __repr__(self) -> str:
        return f"<Role(id={self.id}, name={self.name})>"
