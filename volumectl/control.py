"""Reading and changing the system audio volume."""

from __future__ import annotations

import functools
import sys
from typing import Protocol

from volumectl.commands import VolumeError, run_command
from volumectl.darwin import DarwinBackend
from volumectl.linux import LinuxBackend


class _Backend(Protocol):
    def env(self) -> dict[str, str]: ...
    def get_volume_cmd(self) -> list[str]: ...
    def parse_volume(self, out: str) -> int: ...
    def set_volume_cmd(self, volume: int) -> list[str]: ...
    def increase_volume_cmd(self, diff: int) -> list[str]: ...
    def get_muted_cmd(self) -> list[str]: ...
    def parse_muted(self, out: str) -> bool: ...
    def mute_cmd(self) -> list[str]: ...
    def unmute_cmd(self) -> list[str]: ...


@functools.cache
def _linux_backend() -> LinuxBackend:
    return LinuxBackend()


def default_backend() -> _Backend:
    """Return the backend for the running platform."""
    if sys.platform == "darwin":
        return DarwinBackend()
    if sys.platform == "win32":
        raise VolumeError(f"unsupported platform: {sys.platform}")
    return _linux_backend()


def _resolve(backend: _Backend | None) -> _Backend:
    return default_backend() if backend is None else backend


def _execute(backend: _Backend, cmd: list[str]) -> str:
    return run_command(cmd, backend.env())


def get_volume(backend: _Backend | None = None) -> int:
    """Return the current volume (0 to 100)."""
    backend = _resolve(backend)
    return backend.parse_volume(_execute(backend, backend.get_volume_cmd()))


def set_volume(volume: int, backend: _Backend | None = None) -> None:
    """Set the volume to the given value (0 to 100)."""
    if volume < 0 or volume > 100:
        raise ValueError("out of valid volume range")
    backend = _resolve(backend)
    _execute(backend, backend.set_volume_cmd(volume))


def increase_volume(diff: int, backend: _Backend | None = None) -> None:
    """Raise the volume by ``diff``, or lower it when ``diff`` is negative."""
    backend = _resolve(backend)
    _execute(backend, backend.increase_volume_cmd(diff))


def get_muted(backend: _Backend | None = None) -> bool:
    """Return whether the audio is muted."""
    backend = _resolve(backend)
    return backend.parse_muted(_execute(backend, backend.get_muted_cmd()))


def mute(backend: _Backend | None = None) -> None:
    """Mute the audio."""
    backend = _resolve(backend)
    _execute(backend, backend.mute_cmd())


def unmute(backend: _Backend | None = None) -> None:
    """Unmute the audio."""
    backend = _resolve(backend)
    _execute(backend, backend.unmute_cmd())