"""Profile storage for git-switch-user."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from git_switch_user.config import default_store_path
from git_switch_user.errors import (
    DuplicateProfile,
    InvalidProfileError,
    ProfileNotFound,
    StoreReadError,
    StoreWriteError,
)

logger = logging.getLogger(__name__)


@dataclass
class Profile:
    """A named git identity."""

    name: str
    user: str
    email: str
    signing: bool = False
    key: str | None = None
    ssh_key: str | None = None


def _profile_from_dict(d: dict) -> Profile:
    for field_name in ("name", "user", "email"):
        if not isinstance(d[field_name], str):
            raise TypeError(f"{field_name} must be a string")
    if not isinstance(d["signing"], bool):
        raise TypeError("signing must be true or false")
    for field_name in ("key", "ssh_key"):
        if not isinstance(d.get(field_name), (str, type(None))):
            raise TypeError(f"{field_name} must be a string")

    return Profile(
        name=d["name"],
        user=d["user"],
        email=d["email"],
        signing=d["signing"],
        key=d.get("key"),
        ssh_key=d.get("ssh_key"),
    )


def _profile_to_dict(p: Profile) -> dict[str, Any]:
    pd: dict[str, Any] = {
        "name": p.name,
        "user": p.user,
        "email": p.email,
        "signing": p.signing,
    }
    if p.key is not None:
        pd["key"] = p.key
    if p.ssh_key is not None:
        pd["ssh_key"] = p.ssh_key
    return pd


def load_profiles(path: Path) -> list[Profile]:
    """Load profiles from disk. Returns an empty list if the file is missing or empty."""
    if not path.exists():
        return []

    try:
        text = path.read_text()
    except (OSError, UnicodeDecodeError) as exc:
        raise StoreReadError(f"Error reading profiles from {path}: {exc}") from exc

    if not text.strip():
        return []

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise StoreReadError(f"Error parsing profiles in {path}: {exc}") from exc

    if not isinstance(data, dict) or not isinstance(data.get("profiles", []), list):
        raise StoreReadError(f"Error parsing profiles in {path}: expected a 'profiles' list")

    profiles = []
    for entry in data.get("profiles", []):
        try:
            profiles.append(_profile_from_dict(entry))
        except (KeyError, TypeError) as exc:
            raise StoreReadError(
                f"Error parsing profiles in {path}: invalid record {entry!r}"
            ) from exc
    return profiles


def save_profiles(profiles: list[Profile], path: Path) -> None:
    """Write the full profile list to disk."""
    data = {"profiles": [_profile_to_dict(p) for p in profiles]}
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2) + "\n")
    except OSError as exc:
        raise StoreWriteError(f"Error writing profiles to {path}: {exc}") from exc


class ProfileStore:
    """Ordered collection of profiles persisted to a single JSON file.

    Every mutation re-reads the file and rewrites it in full.
    """

    def __init__(self, path: Path | None = None):
        self.path = path or default_store_path()

    def get_all(self) -> list[Profile]:
        return load_profiles(self.path)

    def find_by_name(self, name: str) -> Profile | None:
        for p in self.get_all():
            if p.name == name:
                return p
        return None

    def create(self, profile: Profile) -> bool:
        """Append a profile. Returns False (and warns) if the name is taken."""
        if not profile.name.strip():
            raise InvalidProfileError("Profile name cannot be empty")

        profiles = self.get_all()
        for p in profiles:
            if p.name == profile.name:
                logger.warning(str(DuplicateProfile(profile.name)))
                return False

        profiles.append(profile)
        save_profiles(profiles, self.path)
        logger.info("Profile %s has been created", profile.name)
        return True

    def remove(self, name: str) -> bool:
        """Remove every profile called name. Returns False (and warns) if none matched."""
        profiles = self.get_all()
        remaining = [p for p in profiles if p.name != name]

        if len(remaining) == len(profiles):
            logger.warning(str(ProfileNotFound(name)))
            return False

        save_profiles(remaining, self.path)
        logger.info("Profile %s has been removed", name)
        return True
