"""Tests for DatabaseManager and database initialization."""

from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio

from wmscore.core.config import Settings
from wmscore.domain.services import RoleService, StoreFailureError
from wmscore.infrastructure.persistence.database import DatabaseManager, init_database


@pytest_asyncio.fixture
async def db(tmp_path):
    settings = Settings(
        _env_file=None,
        environment="testing",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'data' / 'wms.db'}",
        default_roles=["ROLE_ADMIN", "ROLE_USER", "ROLE_OPERATOR"],
    )
    manager = DatabaseManager(settings)
    yield manager
    await manager.disconnect()


@pytest.mark.asyncio
async def test_init_database_creates_directory_and_seeds(db, tmp_path):
    seeded = await init_database(db)

    assert (tmp_path / "data").is_dir()
    assert seeded == ["ROLE_ADMIN", "ROLE_USER", "ROLE_OPERATOR"]
    async with db.session() as session:
        roles = await RoleService(session).find_all()
    assert [role.name for role in roles] == ["ROLE_ADMIN", "ROLE_USER", "ROLE_OPERATOR"]


@pytest.mark.asyncio
async def test_init_database_is_repeatable(db):
    await init_database(db)

    assert await init_database(db) == []


@pytest.mark.asyncio
async def test_check_connection_on_fresh_manager(db, tmp_path):
    """The engine creates the SQLite directory, so any entry point can connect."""
    assert not (tmp_path / "data").exists()

    assert await db.check_connection() is True
    assert (tmp_path / "data").is_dir()


@pytest.mark.asyncio
async def test_init_database_unreachable(db):
    with patch.object(DatabaseManager, "check_connection", AsyncMock(return_value=False)):
        with pytest.raises(StoreFailureError, match="Failed to connect to database"):
            await init_database(db)


@pytest.mark.asyncio
async def test_sessions_are_independent(db):
    """A role saved in one session is visible from another."""
    await init_database(db)

    async with db.session() as writer:
        admin = await RoleService(writer).find_by_name("ROLE_ADMIN")
        admin.description = "Administrators"
        await RoleService(writer).save(admin)

    async with db.session() as reader:
        reloaded = await RoleService(reader).find_by_id(admin.id)

    assert reloaded.description == "Administrators"


@pytest.mark.asyncio
async def test_session_rolls_back_on_error(db):
    await init_database(db)

    with pytest.raises(RuntimeError):
        async with db.session() as session:
            await RoleService(session).role_repo.delete_by_id(1)
            raise RuntimeError("abort")

    async with db.session() as session:
        assert len(await RoleService(session).find_all()) == 3


@pytest.mark.asyncio
async def test_drop_tables(db):
    await init_database(db)
    await db.drop_tables()
    await db.create_tables()

    async with db.session() as session:
        assert await RoleService(session).find_all() == []
