"""In-memory stand-ins for the discord.py guild objects the bot touches."""

from itertools import count
from types import SimpleNamespace

import discord
import pytest

# Permission bits Discord gives a freshly created role.
DEFAULT_ROLE_PERMISSIONS = 104324673

_ids = count(1000)


def http_error(text="boom"):
    return discord.HTTPException(SimpleNamespace(status=500, reason="Server Error"), text)


class FakeRole:
    def __init__(self, guild, name, *, permissions=0, mentionable=True, colour=0):
        self.guild = guild
        self.id = next(_ids)
        self.name = name
        self.permissions = SimpleNamespace(value=permissions)
        self.mentionable = mentionable
        self.colour = SimpleNamespace(value=colour)

    async def edit(self, *, name, colour, permissions, mentionable, reason=None):
        self.guild.calls.append(("edit", name))
        self.guild.raise_if_failing("edit")
        self.name = name
        self.colour = colour
        self.permissions = permissions
        self.mentionable = mentionable
        return self

    async def delete(self, reason=None):
        self.guild.calls.append(("delete", self.name))
        self.guild.raise_if_failing("delete")
        self.guild.roles.remove(self)
        for member in self.guild.members:
            if self in member.roles:
                member.roles.remove(self)


class FakeMember:
    def __init__(self, guild, name, *, bot=False):
        self.guild = guild
        self.id = next(_ids)
        self.name = name
        self.bot = bot
        self.roles = []

    async def add_roles(self, role, reason=None):
        self.guild.calls.append(("add", self.name, role.name))
        self.guild.raise_if_failing("add")
        if role not in self.roles:
            self.roles.append(role)

    async def remove_roles(self, role, reason=None):
        self.guild.calls.append(("remove", self.name, role.name))
        self.guild.raise_if_failing("remove")
        if role in self.roles:
            self.roles.remove(role)


class FakeGuild:
    def __init__(self):
        self.id = next(_ids)
        self.roles = []
        self.members = []
        self.calls = []
        self.failing = set()

    def raise_if_failing(self, step):
        if step in self.failing:
            raise http_error(f"{step} rejected")

    def add_role(self, name, **kwargs):
        role = FakeRole(self, name, **kwargs)
        self.roles.append(role)
        return role

    def add_member(self, name, *, bot=False):
        member = FakeMember(self, name, bot=bot)
        self.members.append(member)
        return member

    def get_member(self, user_id):
        return next((m for m in self.members if m.id == user_id), None)

    async def fetch_member(self, user_id):
        self.raise_if_failing("fetch_member")
        member = self.get_member(user_id)
        if member is None:
            raise http_error("Unknown Member")
        return member

    async def create_role(self, reason=None):
        self.calls.append(("create",))
        self.raise_if_failing("create")
        return self.add_role("new role", permissions=DEFAULT_ROLE_PERMISSIONS, mentionable=False)

    def role_named(self, name):
        return next((r for r in self.roles if r.name == name), None)


class FakeChannel:
    def __init__(self, guild=None):
        self.id = next(_ids)
        self.guild = guild
        self.sent = []

    async def send(self, text):
        self.sent.append(text)


class FakeClient:
    def __init__(self, channels=()):
        self.user = SimpleNamespace(id=next(_ids), name="cardinal")
        self.presence = []
        self._channels = {channel.id: channel for channel in channels}

    async def change_presence(self, *, activity=None):
        self.presence.append(activity.name if activity else None)

    def get_channel(self, channel_id):
        return self._channels.get(channel_id)

    async def fetch_channel(self, channel_id):
        raise http_error("Unknown Channel")


@pytest.fixture
def guild():
    return FakeGuild()


@pytest.fixture
def channel(guild):
    return FakeChannel(guild)


@pytest.fixture
def client(channel):
    return FakeClient([channel])


@pytest.fixture
def make_message(guild, channel):
    def _make(content, author, mentions=()):
        return SimpleNamespace(
            id=next(_ids),
            content=content,
            author=author,
            mentions=list(mentions),
            guild=guild,
            channel=channel,
        )

    return _make
