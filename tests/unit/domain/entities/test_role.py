"""Unit tests for Role entity."""

import pytest

from wmscore.domain.entities import Role


def test_transient_role_is_new():
    role = Role(name="ROLE_ADMIN")

    assert role.id is None
    assert role.description is None
    assert role.is_new is True


def test_persisted_role_is_not_new():
    role = Role(id=1, name="ROLE_ADMIN", description="Administrators")

    assert role.is_new is False


@pytest.mark.parametrize("name", ["", "   "])
def test_role_requires_name(name):
    with pytest.raises(ValueError, match="Role name is required"):
        Role(name=name)
