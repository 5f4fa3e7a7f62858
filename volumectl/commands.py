"""Running external mixer programs."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Mapping, Sequence


class VolumeError(Exception):
    """Raised when the audio volume cannot be read or changed."""


class CommandError(VolumeError):
    """Raised when an external mixer program cannot be run or fails."""

    def __init__(self, command: Sequence[str], reason: object) -> None:
        self.command = list(command)
        self.reason = reason
        super().__init__(f'failed to execute "{" ".join(self.command)}" ({reason})')


def run_command(args: Sequence[str], env: Mapping[str, str] | None = None) -> str:
    """Run a program and return its standard output.

    The variables in ``env`` are added to the current environment,
    overriding any that are already set.
    """
    command = list(args)
    if not command:
        raise ValueError("empty command")
    full_env = {**os.environ, **(env or {})}
    try:
        completed = subprocess.run(
            command,
            env=full_env,
            capture_output=True,
            text=True,
            check=True,
        )
    except (subprocess.CalledProcessError, OSError) as exc:
        raise CommandError(command, exc) from exc
    return completed.stdout