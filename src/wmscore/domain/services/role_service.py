"""Role service for business logic.

Provides save (insert or update), remove and lookup operations over roles.
Every failure surfaces as a ServiceError; persistence errors are
rolled back and wrapped with their original message.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wmscore.core.logging import get_logger
from wmscore.domain.entities.role import Role
from wmscore.domain.services.exceptions import (
    EntityNotFoundError,
    InvalidArgumentError,
    ServiceError,
    StoreFailureError,
)
from wmscore.infrastructure.persistence.repositories import RoleRepository

logger = get_logger(__name__)


class RoleService:
    """Service for role management.

    The service keeps no state besides its session, so one instance per
    session is enough and sessions are never shared between callers.
    """

    SAVE_NULL_MESSAGE = "Role to be saved must not be null"
    REMOVE_NULL_MESSAGE = "Roles to be removed must not be null"

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the role service.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session
        self.role_repo = RoleRepository(session)

    @asynccontextmanager
    async def _store_operation(self, operation: str) -> AsyncIterator[None]:
        """Roll back on any failure inside the block and wrap persistence errors."""
        try:
            yield
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Role operation failed", operation=operation, error=str(e))
            raise StoreFailureError(str(e)) from e
        except ServiceError:
            await self.session.rollback()
            raise
        except Exception as e:
            # Driver errors SQLAlchemy does not wrap, e.g. OverflowError from sqlite3
            await self.session.rollback()
            logger.error("Role operation failed", operation=operation, error=str(e))
            raise StoreFailureError(str(e)) from e

    async def save(self, role: Role | None) -> Role:
        """Insert a transient role or update a persisted one.

        Args:
            role: Role to save. Without an id it is inserted, otherwise its
                description is merged into the stored role.

        Returns:
            The persisted role with its store-assigned id.

        Raises:
            InvalidArgumentError: If role is None or its name was changed.
            EntityNotFoundError: If role has an id that is not stored.
            StoreFailureError: If the persistence layer fails.
        """
        if role is None:
            raise InvalidArgumentError(self.SAVE_NULL_MESSAGE)

        async with self._store_operation("save"):
            if role.is_new:
                saved = await self.role_repo.create(role)
            else:
                existing = await self.role_repo.get_by_id(role.id)
                if existing is None:
                    raise EntityNotFoundError(f"Role with id {role.id} does not exist")
                if existing.name != role.name:
                    raise InvalidArgumentError(
                        f"Role name is immutable: cannot rename '{existing.name}' to '{role.name}'"
                    )
                saved = await self.role_repo.update(role)
            await self.session.commit()

        logger.info("Role saved", role_id=saved.id, role_name=saved.name)
        return saved

    async def remove(self, role_id: int | None) -> None:
        """Remove a role by ID.

        Removing an ID that is not stored does nothing.

        Args:
            role_id: ID of the role to remove.

        Raises:
            InvalidArgumentError: If role_id is None.
            StoreFailureError: If the persistence layer fails.
        """
        if role_id is None:
            raise InvalidArgumentError(self.REMOVE_NULL_MESSAGE)

        async with self._store_operation("remove"):
            deleted = await self.role_repo.delete_by_id(role_id)
            await self.session.commit()

        if deleted:
            logger.info("Role removed", role_id=role_id)
        else:
            logger.debug("Role to remove not found", role_id=role_id)

    async def find_all(self) -> list[Role]:
        """Return every stored role, ordered by ID."""
        async with self._store_operation("find_all"):
            return await self.role_repo.list_all()

    async def find_by_name(self, name: str | None) -> Role | None:
        """Look up a role by its unique name.

        Raises:
            InvalidArgumentError: If name is None.
            StoreFailureError: If the persistence layer fails.
        """
        if name is None:
            raise InvalidArgumentError("Role name to search for must not be null")

        async with self._store_operation("find_by_name"):
            return await self.role_repo.get_by_name(name)

    async def find_by_id(self, role_id: int | None) -> Role | None:
        """Look up a role by ID.

        Raises:
            InvalidArgumentError: If role_id is None.
            StoreFailureError: If the persistence layer fails.
        """
        if role_id is None:
            raise InvalidArgumentError("Role id to search for must not be null")

        async with self._store_operation("find_by_id"):
            return await self.role_repo.get_by_id(role_id)
