"""Volume control through AppleScript on macOS."""

from __future__ import annotations

import re

from volumectl.commands import VolumeError

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _osascript(script: str) -> list[str]:
    return ["osascript", "-e", script]


class DarwinBackend:
    """Builds osascript commands and parses their output."""

    def env(self) -> dict[str, str]:
        return {}

    def get_volume_cmd(self) -> list[str]:
        return _osascript("output volume of (get volume settings)")

    def parse_volume(self, out: str) -> int:
        out = out.removesuffix("\n")
        if out == "missing value":
            raise VolumeError(f"failed to get volume settings: {out}")
        if not _INTEGER.fullmatch(out):
            raise VolumeError(f'parsing "{out}": invalid syntax')
        return int(out)

    def set_volume_cmd(self, volume: int) -> list[str]:
        return _osascript(f"set volume output volume {volume}")

    def increase_volume_cmd(self, diff: int) -> list[str]:
        return _osascript(
            "set volume output volume "
            f"((output volume of (get volume settings)) + {diff})"
        )

    def get_muted_cmd(self) -> list[str]:
        return _osascript("output muted of (get volume settings)")

    def parse_muted(self, out: str) -> bool:
        match out.strip():
            case "true":
                return True
            case "false":
                return False
        raise VolumeError(f"unknown muted status: {out}")

    def mute_cmd(self) -> list[str]:
        return _osascript("set volume output muted true")

    def unmute_cmd(self) -> list[str]:
        return _osascript("set volume output muted false")