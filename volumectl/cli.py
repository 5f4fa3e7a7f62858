"""The ``volume`` command line tool."""

from __future__ import annotations

import platform
import re
import sys
from collections.abc import Sequence
from typing import TextIO

from volumectl import control
from volumectl.commands import VolumeError

NAME = "volume"
VERSION = "0.2.2"
REVISION = "HEAD"
DEFAULT_STEP = "6"

_INTEGER = re.compile(r"[+-]?[0-9]+")

_HELP = """\
{name} - control audio volume

USAGE:
  {name} command [argument...]

COMMANDS:
  status      prints the volume status
  get         prints the current volume
  set [vol]   sets the audio volume
  up [diff]   volume up by [diff]
  down [diff] volume down by [diff]
  mute        mutes the audio
  unmute      unmutes the audio
  version     prints the version
  help        prints this help

VERSION:
  {version} (rev: {revision}/{runtime})
"""


def _runtime() -> str:
    return f"python{platform.python_version()}"


def _parse_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f'parsing "{text}": invalid syntax')
    return int(text)


def _print_status(out: TextIO) -> None:
    vol = control.get_volume()
    muted = control.get_muted()
    out.write(f"volume: {vol}\n")
    out.write(f"muted: {str(muted).lower()}\n")


def run(args: Sequence[str], out: TextIO | None = None) -> None:
    """Carry out one command given by its arguments, writing results to ``out``."""
    args = list(args)
    out = sys.stdout if out is None else out
    if not args:
        raise VolumeError("no arg")
    match args:
        case ["-v" | "version" | "-version" | "--version", *_]:
            out.write(f"{NAME} {VERSION} (rev: {REVISION}/{_runtime()})\n")
            return
        case ["-h" | "help" | "-help" | "--help", *_]:
            out.write(
                _HELP.format(name=NAME, version=VERSION, revision=REVISION, runtime=_runtime())
            )
            return
        case ["status"]:
            _print_status(out)
            return
        case ["get"]:
            out.write(f"{control.get_volume()}\n")
            return
        case ["set", vol]:
            control.set_volume(_parse_int(vol))
            return
        case ["up"] | ["up", _]:
            control.increase_volume(_parse_int(args[1] if len(args) == 2 else DEFAULT_STEP))
            return
        case ["down"] | ["down", _]:
            control.increase_volume(-_parse_int(args[1] if len(args) == 2 else DEFAULT_STEP))
            return
        case ["mute"]:
            control.mute()
            return
        case ["unmute"]:
            control.unmute()
            return
    raise VolumeError(f"invalid argument for volume: [{' '.join(args)}]")


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the command; returns the exit status."""
    args = sys.argv[1:] if argv is None else argv
    try:
        run(args, sys.stdout)
    except (VolumeError, ValueError) as exc:
        print(f"{NAME}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())