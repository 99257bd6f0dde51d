"""Backend that reads and writes git's own configuration."""

from __future__ import annotations

import logging
import subprocess

from git_switch_user.backends.base import ConfigBackend, Scope
from git_switch_user.errors import BackendInvocationError

logger = logging.getLogger(__name__)

# `git config` exit statuses that mean "no such key" rather than a failure.
# 1: --get found nothing. 5: --unset-all of a key that is not set.
KEY_NOT_FOUND = 1
NOTHING_TO_UNSET = 5


class GitConfigBackend(ConfigBackend):
    """Adapter that shells out to `git config`."""

    def __init__(self, cwd: str | None = None, git: str = "git"):
        self.cwd = cwd
        self.git = git

    def run(
        self, args: list[str], allowed: tuple[int, ...] = ()
    ) -> subprocess.CompletedProcess:
        cmd = [self.git, "config"] + args
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                cwd=self.cwd,
            )
        except OSError as exc:
            raise BackendInvocationError(cmd, stderr=str(exc)) from exc
        except UnicodeDecodeError as exc:
            raise BackendInvocationError(
                cmd, stderr=f"Error converting git output to string: {exc}"
            ) from exc

        if result.returncode != 0 and result.returncode not in allowed:
            raise BackendInvocationError(
                cmd, result.returncode, result.stderr.strip()
            )
        logger.debug("Output: %s", result.stdout.strip())
        return result

    def get(self, key: str, scope: Scope | None = None) -> str | None:
        args = ["--get"]
        if scope is not None:
            args.append(f"--{scope.value}")
        result = self.run(args + [key], allowed=(KEY_NOT_FOUND,))
        if result.returncode == KEY_NOT_FOUND:
            return None
        return result.stdout.strip()

    def set(self, key: str, value: str, scope: Scope) -> None:
        self.run([f"--{scope.value}", key, value])

    def unset(self, key: str, scope: Scope) -> None:
        self.run(
            ["--unset-all", f"--{scope.value}", key], allowed=(NOTHING_TO_UNSET,)
        )
