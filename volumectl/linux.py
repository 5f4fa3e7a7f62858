"""Volume control through PulseAudio (pactl) or ALSA (amixer)."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator, Mapping, Sequence

from volumectl.commands import CommandError, VolumeError, run_command

Runner = Callable[[Sequence[str], "Mapping[str, str] | None"], str]

_VOLUME_PATTERN = re.compile(r"\d+%")
_DEFAULT_SINK_PREFIX = "Default Sink: "


def parse_default_sink(out: str) -> str:
    """Return the default sink name from the output of ``pactl info``."""
    for line in out.split("\n"):
        stripped = line.lstrip(" \t")
        if stripped.startswith(_DEFAULT_SINK_PREFIX):
            return stripped.replace(_DEFAULT_SINK_PREFIX, "", 1).strip()
    raise VolumeError("could not find PulseAudio Default Sink")


class LinuxBackend:
    """Builds pactl or amixer commands and parses their output.

    When ``use_amixer`` is not given, amixer is chosen if ``pactl info``
    cannot be run.
    """

    def __init__(self, use_amixer: bool | None = None, runner: Runner | None = None) -> None:
        self._runner = runner or run_command
        if use_amixer is None:
            try:
                self._runner(["pactl", "info"], self.env())
            except CommandError:
                use_amixer = True
            else:
                use_amixer = False
        self.use_amixer = use_amixer

    def env(self) -> dict[str, str]:
        return {"LANG": "C", "LC_ALL": "C"}

    def default_sink(self) -> str:
        return parse_default_sink(self._runner(["pactl", "info"], self.env()))

    def _status_lines(self, out: str, prefix: str) -> Iterator[str]:
        """Yield the lines of mixer output that describe the default output."""
        if self.use_amixer:
            for line in out.split("\n"):
                stripped = line.lstrip(" \t")
                if "Playback" in stripped and "%" in stripped:
                    yield stripped
            return
        try:
            sink = self.default_sink()
        except VolumeError:
            in_default_sink = True
            sink = ""
        else:
            in_default_sink = False
        for line in out.split("\n"):
            stripped = line.lstrip(" \t")
            if not in_default_sink and f"Name: {sink}" in stripped:
                in_default_sink = True
            if in_default_sink and stripped.startswith(prefix):
                yield stripped

    def get_volume_cmd(self) -> list[str]:
        if self.use_amixer:
            return ["amixer", "get", "Master"]
        return ["pactl", "list", "sinks"]

    def parse_volume(self, out: str) -> int:
        for line in self._status_lines(out, "Volume:"):
            match = _VOLUME_PATTERN.search(line)
            if match is None:
                break
            return int(match.group()[:-1])
        raise VolumeError("no volume found")

    def set_volume_cmd(self, volume: int) -> list[str]:
        if self.use_amixer:
            return ["amixer", "set", "Master", f"{volume}%"]
        return ["pactl", "set-sink-volume", "@DEFAULT_SINK@", f"{volume}%"]

    def increase_volume_cmd(self, diff: int) -> list[str]:
        sign = ""
        if diff >= 0:
            sign = "+"
        elif self.use_amixer:
            diff = -diff
            sign = "-"
        if self.use_amixer:
            return ["amixer", "set", "Master", f"{diff}%{sign}"]
        return ["pactl", "--", "set-sink-volume", "@DEFAULT_SINK@", f"{sign}{diff}%"]

    def get_muted_cmd(self) -> list[str]:
        return self.get_volume_cmd()

    def parse_muted(self, out: str) -> bool:
        for line in self._status_lines(out, "Mute: "):
            if "[off]" in line or "yes" in line:
                return True
            if "[on]" in line or "no" in line:
                return False
        raise VolumeError("no muted information found")

    def mute_cmd(self) -> list[str]:
        if self.use_amixer:
            return ["amixer", "-D", "pulse", "set", "Master", "mute"]
        return ["pactl", "set-sink-mute", "@DEFAULT_SINK@", "1"]

    def unmute_cmd(self) -> list[str]:
        if self.use_amixer:
            return ["amixer", "-D", "pulse", "set", "Master", "unmute"]
        return ["pactl", "set-sink-mute", "@DEFAULT_SINK@", "0"]