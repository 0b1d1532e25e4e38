import asyncio

import pytest

from cardinal.errors import InvariantError, PlatformError, RoleNotFoundError
from cardinal.roles import registry


def test_find_role_exact_match(guild):
    guild.add_role("Artist")
    artist = guild.add_role("artist")

    assert registry.find_role(guild.roles, "artist") is artist
    assert registry.find_role(guild.roles, "ARTIST") is None


def test_existing_tag_role_is_reused(guild):
    artist = guild.add_role("artist")

    role, created = asyncio.run(
        registry.fetch_or_create_role(guild, tuple(guild.roles), "artist", 0x123456)
    )

    assert role is artist
    assert created is False
    assert guild.calls == []


def test_admin_role_with_permissions_is_rejected(guild):
    guild.add_role("artist", permissions=8)

    with pytest.raises(InvariantError, match="artist has invalid permissions"):
        asyncio.run(registry.fetch_or_create_role(guild, tuple(guild.roles), "artist", 0))

    assert guild.calls == []


def test_unmentionable_role_is_rejected(guild):
    guild.add_role("artist", mentionable=False)

    with pytest.raises(InvariantError, match="artist is not mentionable"):
        asyncio.run(registry.fetch_or_create_role(guild, tuple(guild.roles), "artist", 0))


def test_missing_role_is_created_as_tag_role(guild):
    role, created = asyncio.run(
        registry.fetch_or_create_role(guild, (), "artist", 0xC0FFEE)
    )

    assert created is True
    assert role.name == "artist"
    assert role.colour.value == 0xC0FFEE
    assert role.permissions.value == 0
    assert role.mentionable is True
    assert guild.calls == [("create",), ("edit", "artist")]


def test_create_failure_is_reported(guild):
    guild.failing.add("create")

    with pytest.raises(PlatformError, match="role create failed") as excinfo:
        asyncio.run(registry.create_tag_role(guild, "artist", 0))

    assert excinfo.value.step == "role create"
    assert guild.roles == []


def test_edit_failure_leaves_skeleton_role(guild):
    guild.failing.add("edit")

    with pytest.raises(PlatformError, match="role edit failed"):
        asyncio.run(registry.create_tag_role(guild, "artist", 0))

    assert [r.name for r in guild.roles] == ["new role"]


def test_role_has_members_honours_exclusion(guild):
    role = guild.add_role("artist")
    alice = guild.add_member("alice")
    alice.roles.append(role)

    assert registry.role_has_members(guild.members, role)
    assert not registry.role_has_members(guild.members, role, exclude=alice)


def test_delete_if_empty_keeps_roles_with_holders(guild):
    role = guild.add_role("artist")
    alice, bob = guild.add_member("alice"), guild.add_member("bob")
    alice.roles.append(role)
    bob.roles.append(role)

    deleted = asyncio.run(registry.delete_if_empty(role, tuple(guild.members), revoked=alice))

    assert deleted is False
    assert role in guild.roles


def test_delete_if_empty_removes_last_role(guild):
    role = guild.add_role("artist")
    alice = guild.add_member("alice")
    alice.roles.append(role)

    deleted = asyncio.run(registry.delete_if_empty(role, tuple(guild.members), revoked=alice))

    assert deleted is True
    assert role not in guild.roles


def test_delete_failure_is_reported(guild):
    role = guild.add_role("artist")
    guild.failing.add("delete")

    with pytest.raises(PlatformError, match="role delete failed"):
        asyncio.run(registry.delete_if_empty(role, ()))


def test_fetch_existing_role_never_creates(guild):
    with pytest.raises(RoleNotFoundError, match="artist is not an existing role"):
        registry.fetch_existing_role((), "artist")

    assert guild.calls == []


def test_fetch_existing_role_checks_invariants(guild):
    guild.add_role("artist", permissions=8)

    with pytest.raises(InvariantError):
        registry.fetch_existing_role(tuple(guild.roles), "artist")
