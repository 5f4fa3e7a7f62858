# volumectl

Control the system audio volume from Python or from a shell.

On macOS the volume is driven through `osascript`. On Linux and other
Unix-like systems it is driven through PulseAudio's `pactl`, falling back
to ALSA's `amixer` when `pactl info` cannot be run. Commands are run with
`LANG=C` and `LC_ALL=C` on Linux so that their output can be parsed.

## Installation

```
pip install .
```

## Command line

Installing the package provides a `volume` command:

```
volume status        # prints "volume: N" and "muted: true|false"
volume get           # prints the current volume (0 to 100)
volume set 40        # sets the volume to 40
volume up            # raises the volume by 6
volume up 10         # raises the volume by 10
volume down          # lowers the volume by 6
volume down 10       # lowers the volume by 10
volume mute          # mutes the audio
volume unmute        # unmutes the audio
volume version       # prints the version (also -v, -version, --version)
volume help          # prints the help (also -h, -help, --help)
```

The same can be done with `python -m volumectl.cli <command>`.

On failure (no argument, an unknown command, a value that is not an
integer, a volume outside 0 to 100, or a mixer program that fails) the
command writes `volume: <reason>` to standard error and exits with
status 1.

## Library

```python
from volumectl.control import get_volume, set_volume, increase_volume, get_muted, mute, unmute

print(get_volume())       # e.g. 37
set_volume(50)            # 0 to 100; anything else raises ValueError
increase_volume(-10)      # a negative difference lowers the volume
if not get_muted():
    mute()
unmute()
```

Each function takes an optional `backend`. When it is left out, the
backend comes from `volumectl.control.default_backend()`, which picks the
one for the current platform. `volumectl.darwin.DarwinBackend` and
`volumectl.linux.LinuxBackend` can also be built directly. For example,
`LinuxBackend(use_amixer=True)` forces the `amixer` commands, and
`LinuxBackend(runner=...)` takes a callable used in place of
`volumectl.commands.run_command` when querying `pactl info`.
`volumectl.linux.parse_default_sink` extracts the default sink name from
`pactl info` output.

Errors are raised as `volumectl.commands.VolumeError`. When an external
program cannot be run or exits with an error, the error is its subclass
`CommandError`, which keeps the `command` and the `reason`.

## Limitations

Windows is not supported: `default_backend()` raises `VolumeError` there.
The package only changes the default output device; it does not list or
select other devices, and it does not control input (microphone) levels.