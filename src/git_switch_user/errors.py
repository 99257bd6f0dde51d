"""Exceptions raised by git-switch-user."""

from __future__ import annotations


class GitSwitchUserError(Exception):
    """Base class for all errors surfaced to the command line."""


class StoreError(GitSwitchUserError):
    """The profile store could not be used."""


class StoreReadError(StoreError):
    """The store file is unreadable or its document is malformed."""


class StoreWriteError(StoreError):
    """The store file could not be written."""


class ProfileNotFound(GitSwitchUserError):
    def __init__(self, name: str):
        super().__init__(f"Could not find a profile with the name {name}")
        self.name = name


class DuplicateProfile(GitSwitchUserError):
    def __init__(self, name: str):
        super().__init__(
            f"A profile named {name} already exists. Please remove it first."
        )
        self.name = name


class InvalidProfileError(GitSwitchUserError):
    """A profile cannot be activated as stored."""


class BackendInvocationError(GitSwitchUserError):
    """The configuration backend failed to run or returned an unexpected status."""

    def __init__(
        self,
        cmd: list[str],
        returncode: int | None = None,
        stderr: str = "",
    ):
        detail = f"Error running command: {' '.join(cmd)}"
        if returncode is not None:
            detail += f" (exit status {returncode})"
        if stderr:
            detail += f": {stderr}"
        super().__init__(detail)
        self.cmd = cmd
        self.returncode = returncode
        self.stderr = stderr
