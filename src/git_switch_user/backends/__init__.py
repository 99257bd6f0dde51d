"""Configuration backends that identities are written into."""

from git_switch_user.backends.base import ConfigBackend, Scope
from git_switch_user.backends.git import GitConfigBackend


def create_backend(backend_type: str = "git", **kwargs) -> ConfigBackend:
    """Factory: create the configuration backend for the given type."""
    if backend_type == "git":
        return GitConfigBackend(**kwargs)
    else:
        raise ValueError(f"Unknown backend type: {backend_type}")


__all__ = ["ConfigBackend", "GitConfigBackend", "Scope", "create_backend"]
