"""Shared test fixtures."""

import pytest

from git_switch_user.backends.base import ConfigBackend, Scope
from git_switch_user.profiles import Profile, ProfileStore


class MemoryBackend(ConfigBackend):
    """In-memory two-scope config that records every call."""

    def __init__(self, values=None):
        # {(scope, key): value}
        self.values = dict(values or {})
        self.calls = []

    def get(self, key, scope=None):
        self.calls.append(("get", key, scope))
        if scope is None:
            for s in (Scope.LOCAL, Scope.GLOBAL):
                if (s, key) in self.values:
                    return self.values[(s, key)]
            return None
        return self.values.get((scope, key))

    def set(self, key, value, scope):
        self.calls.append(("set", key, value, scope))
        self.values[(scope, key)] = value

    def unset(self, key, scope):
        self.calls.append(("unset", key, scope))
        self.values.pop((scope, key), None)

    def local(self):
        return {k: v for (s, k), v in self.values.items() if s is Scope.LOCAL}

    def global_(self):
        return {k: v for (s, k), v in self.values.items() if s is Scope.GLOBAL}

    def calls_for(self, key):
        return [c for c in self.calls if c[1] == key]


@pytest.fixture
def backend():
    return MemoryBackend()


@pytest.fixture
def store_path(tmp_path):
    """Return a path for a temporary profile store."""
    return tmp_path / "git-switch-user" / "profiles.json"


@pytest.fixture
def store(store_path):
    return ProfileStore(store_path)


@pytest.fixture
def work_profile():
    return Profile(
        name="work",
        user="Alice",
        email="a@x.com",
        signing=False,
        key=None,
        ssh_key=None,
    )


@pytest.fixture
def sample_profiles():
    return [
        Profile(name="work", user="Alice", email="a@x.com"),
        Profile(
            name="oss",
            user="alice-oss",
            email="alice@example.org",
            signing=True,
            key="ABC123",
        ),
        Profile(
            name="client",
            user="Alice C",
            email="alice@client.test",
            ssh_key="~/.ssh/id_client",
        ),
    ]
