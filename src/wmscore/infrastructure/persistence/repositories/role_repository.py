"""Role repository for database operations."""

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from wmscore.domain.entities.role import Role
from wmscore.infrastructure.persistence.models import RoleModel

# Largest value a signed 64-bit INTEGER column can hold
MAX_ROLE_ID = 2**63 - 1


class RoleRepository:
    """Repository for role database operations.

    Methods flush but never commit; the caller owns the transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    @staticmethod
    def _is_storable_id(role_id: int) -> bool:
        """Whether role_id fits the id column; larger ids can never be stored."""
        return -MAX_ROLE_ID - 1 <= role_id <= MAX_ROLE_ID

    def _to_model(self, entity: Role) -> RoleModel:
        """Convert domain entity to infrastructure model."""
        return RoleModel(
            id=entity.id,
            name=entity.name,
            description=entity.description,
        )

    def _to_entity(self, model: RoleModel) -> Role:
        """Convert infrastructure model to domain entity."""
        return Role(
            id=model.id,
            name=model.name,
            description=model.description,
        )

    async def create(self, role: Role) -> Role:
        """Insert a transient role.

        Args:
            role: Role entity without an id.

        Returns:
            The stored role carrying its new id.

        Raises:
            IntegrityError: If a role with the same name already exists.
        """
        model = self._to_model(role)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, role: Role) -> Role:
        """Merge the state of a persisted role into the store.

        Args:
            role: Role entity with an id.

        Returns:
            The refreshed stored role.
        """
        model = await self._session.merge(self._to_model(role))
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def delete_by_id(self, role_id: int) -> bool:
        """Delete a role by ID.

        Args:
            role_id: Role ID.

        Returns:
            True if a role was deleted, False if no role had that ID.
        """
        if not self._is_storable_id(role_id):
            return False
        result = await self._session.execute(
            delete(RoleModel).where(RoleModel.id == role_id)
        )
        await self._session.flush()
        return result.rowcount > 0

    async def get_by_id(self, role_id: int) -> Role | None:
        """Get a role by ID.

        Args:
            role_id: Role ID.

        Returns:
            Role entity if found, None otherwise.
        """
        if not self._is_storable_id(role_id):
            return None
        result = await self._session.execute(
            select(RoleModel).where(RoleModel.id == role_id)
        )
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_by_name(self, name: str) -> Role | None:
        """Get a role by its unique name.

        Args:
            name: Role name (e.g., 'ROLE_ADMIN').

        Returns:
            Role entity if found, None otherwise.
        """
        result = await self._session.execute(
            select(RoleModel).where(RoleModel.name == name)
        )
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def list_all(self) -> list[Role]:
        """List all roles ordered by ID."""
        result = await self._session.execute(select(RoleModel).order_by(RoleModel.id))
        return [self._to_entity(model) for model in result.scalars().all()]

    async def count(self) -> int:
        """Count stored roles."""
        result = await self._session.execute(select(func.count()).select_from(RoleModel))
        return result.scalar_one()
