"""Unit tests for RoleRepository."""

import pytest
from sqlalchemy.exc import IntegrityError

from wmscore.domain.entities import Role
from wmscore.infrastructure.persistence.repositories import RoleRepository


@pytest.fixture
def repository(db_session):
    """Create a RoleRepository bound to the seeded test session."""
    return RoleRepository(db_session)


@pytest.mark.asyncio
async def test_create_assigns_id(repository):
    created = await repository.create(Role(name="ROLE_OPERATOR", description="Operators"))

    assert created.id is not None
    assert created.name == "ROLE_OPERATOR"
    assert created.description == "Operators"
    assert await repository.count() == 3


@pytest.mark.asyncio
async def test_create_duplicate_name(repository):
    with pytest.raises(IntegrityError):
        await repository.create(Role(name="ROLE_ADMIN"))


@pytest.mark.asyncio
async def test_get_by_name(repository):
    role = await repository.get_by_name("ROLE_USER")

    assert role is not None
    assert role.name == "ROLE_USER"
    assert await repository.get_by_name("ROLE_MISSING") is None


@pytest.mark.asyncio
async def test_get_by_id(repository):
    admin = await repository.get_by_name("ROLE_ADMIN")

    assert await repository.get_by_id(admin.id) == admin
    assert await repository.get_by_id(4711) is None


@pytest.mark.asyncio
async def test_update_merges_description(repository):
    admin = await repository.get_by_name("ROLE_ADMIN")
    admin.description = "Full access"

    updated = await repository.update(admin)

    assert updated.id == admin.id
    assert updated.description == "Full access"
    assert (await repository.get_by_id(admin.id)).description == "Full access"


@pytest.mark.asyncio
async def test_delete_by_id(repository):
    admin = await repository.get_by_name("ROLE_ADMIN")

    assert await repository.delete_by_id(admin.id) is True
    assert await repository.get_by_id(admin.id) is None
    assert await repository.count() == 1


@pytest.mark.asyncio
async def test_delete_by_unknown_id(repository):
    assert await repository.delete_by_id(4711) is False
    assert await repository.count() == 2


@pytest.mark.asyncio
async def test_list_all_ordered_by_id(repository):
    roles = await repository.list_all()

    assert [role.name for role in roles] == ["ROLE_ADMIN", "ROLE_USER"]
    assert roles[0].id < roles[1].id


@pytest.mark.asyncio
async def test_ids_beyond_integer_range_are_not_stored(repository):
    assert await repository.get_by_id(2**64) is None
    assert await repository.delete_by_id(2**64) is False
    assert await repository.delete_by_id(-(2**64)) is False
    assert await repository.count() == 2
