"""Abstract base class for configuration backends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class Scope(str, Enum):
    """Visibility tier of a configuration key."""

    LOCAL = "local"
    GLOBAL = "global"

    @classmethod
    def from_flag(cls, global_: bool) -> Scope:
        return cls.GLOBAL if global_ else cls.LOCAL


class ConfigBackend(ABC):
    """A two-scope key/value configuration store."""

    @abstractmethod
    def get(self, key: str, scope: Scope | None = None) -> str | None:
        """Read a key. Returns None if unset.

        With scope=None the effective value across all scopes is returned.
        """

    @abstractmethod
    def set(self, key: str, value: str, scope: Scope) -> None:
        """Write a key at the given scope."""

    @abstractmethod
    def unset(self, key: str, scope: Scope) -> None:
        """Remove a key at the given scope. Missing keys are not an error."""
