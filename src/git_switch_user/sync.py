"""Sync engine: write a profile's identity into the configuration backend."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from git_switch_user.backends.base import ConfigBackend, Scope
from git_switch_user.errors import InvalidProfileError
from git_switch_user.profiles import Profile

logger = logging.getLogger(__name__)

USER_NAME = "user.name"
USER_EMAIL = "user.email"
COMMIT_GPGSIGN = "commit.gpgsign"
TAG_GPGSIGN = "tag.gpgsign"
SIGNING_KEY = "user.signingkey"
SSH_COMMAND = "core.sshCommand"

# Values pinned at local scope when a global value would otherwise show through.
SIGNING_DEFAULTS = {
    COMMIT_GPGSIGN: "false",
    TAG_GPGSIGN: "false",
    SIGNING_KEY: "",
}
SSH_COMMAND_DEFAULT = "ssh"


@dataclass(frozen=True)
class SetAction:
    key: str
    value: str
    scope: Scope = Scope.LOCAL

    def apply(self, backend: ConfigBackend) -> None:
        backend.set(self.key, self.value, self.scope)


@dataclass(frozen=True)
class UnsetAction:
    key: str
    scope: Scope = Scope.LOCAL

    def apply(self, backend: ConfigBackend) -> None:
        backend.unset(self.key, self.scope)


Action = Union[SetAction, UnsetAction]


def resolve_unset(
    key: str,
    local_default: str,
    global_probe: str | None,
) -> Action:
    """Decide how to clear a local key without exposing a global value.

    If global_probe holds a value, unsetting the local key would let that
    global value take effect, so the local key is pinned to local_default.
    Otherwise the local key can simply be removed.
    """
    if global_probe is not None:
        return SetAction(key, local_default, Scope.LOCAL)
    return UnsetAction(key, Scope.LOCAL)


def conditional_unset(
    backend: ConfigBackend,
    key: str,
    local_default: str,
    scope: Scope,
) -> Action:
    """Clear key at scope, pinning local_default locally when a global value exists."""
    if scope is Scope.GLOBAL:
        action: Action = UnsetAction(key, Scope.GLOBAL)
    else:
        action = resolve_unset(key, local_default, backend.get(key, Scope.GLOBAL))
        if isinstance(action, SetAction):
            logger.debug(
                "Found global value for %s. Setting local value to '%s'",
                key,
                local_default,
            )
        else:
            logger.debug("Global value for %s not found. Unsetting local value", key)
    action.apply(backend)
    return action


def activate(
    profile: Profile,
    backend: ConfigBackend,
    global_: bool = False,
) -> list[Action]:
    """Make profile the active identity at local or global scope.

    Returns the actions applied, in order. Nothing is rolled back if a
    backend call fails part way through.
    """
    scope = Scope.from_flag(global_)
    applied: list[Action] = []

    def put(key: str, value: str) -> None:
        action = SetAction(key, value, scope)
        action.apply(backend)
        applied.append(action)

    put(USER_NAME, profile.user)
    put(USER_EMAIL, profile.email)

    if profile.signing:
        if not profile.key:
            raise InvalidProfileError(
                f"Profile {profile.name} has signing set to true, "
                "but has no associated signing key"
            )
        put(COMMIT_GPGSIGN, "true")
        put(TAG_GPGSIGN, "true")
        put(SIGNING_KEY, profile.key)
    else:
        for key, default in SIGNING_DEFAULTS.items():
            applied.append(conditional_unset(backend, key, default, scope))

    if profile.ssh_key:
        put(SSH_COMMAND, f"ssh -i {profile.ssh_key}")
    else:
        applied.append(
            conditional_unset(backend, SSH_COMMAND, SSH_COMMAND_DEFAULT, scope)
        )

    logger.debug("Profile %s is now active (%s)", profile.name, scope.value)
    return applied


def current_email(backend: ConfigBackend) -> str:
    """The effective user.email, or an empty string if none is configured."""
    return backend.get(USER_EMAIL) or ""
