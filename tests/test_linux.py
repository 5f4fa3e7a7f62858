import pytest

from volumectl.commands import CommandError, VolumeError
from volumectl.linux import LinuxBackend, parse_default_sink

PACTL_INFO = """Server String: /run/user/1000/pulse/native
Server Name: pulseaudio
\tDefault Sink: alsa_output.pci.analog-stereo
Default Source: alsa_input.pci.analog-stereo
"""

PACTL_SINKS = """Sink #0
\tState: SUSPENDED
\tName: alsa_output.hdmi
\tMute: no
\tVolume: front-left: 65536 / 100% / 0.00 dB,   front-right: 65536 / 100% / 0.00 dB
Sink #1
\tState: RUNNING
\tName: alsa_output.pci.analog-stereo
\tMute: yes
\tVolume: front-left: 22282 /  34% / -28.11 dB,   front-right: 22282 /  34% / -28.11 dB
"""

AMIXER_OUT = """Simple mixer control 'Master',0
  Capabilities: pvolume pswitch
  Playback channels: Front Left - Front Right
  Limits: Playback 0 - 65536
  Mono:
  Front Left: Playback 39321 [60%] [on]
  Front Right: Playback 39321 [60%] [on]
"""


class FakeRunner:
    def __init__(self, info=PACTL_INFO, fail=False):
        self.info = info
        self.fail = fail
        self.calls = []

    def __call__(self, args, env):
        self.calls.append((list(args), env))
        if self.fail:
            raise CommandError(args, "not found")
        return self.info


def test_parse_default_sink():
    assert parse_default_sink(PACTL_INFO) == "alsa_output.pci.analog-stereo"


def test_parse_default_sink_missing():
    with pytest.raises(VolumeError, match="Default Sink"):
        parse_default_sink("Server Name: pulseaudio\n")


def test_detects_pactl():
    runner = FakeRunner()
    backend = LinuxBackend(runner=runner)
    assert backend.use_amixer is False
    assert runner.calls[0][0] == ["pactl", "info"]
    assert runner.calls[0][1] == {"LANG": "C", "LC_ALL": "C"}


def test_falls_back_to_amixer():
    backend = LinuxBackend(runner=FakeRunner(fail=True))
    assert backend.use_amixer is True
    assert backend.get_volume_cmd() == ["amixer", "get", "Master"]


def test_explicit_choice_skips_detection():
    runner = FakeRunner()
    LinuxBackend(use_amixer=True, runner=runner)
    assert runner.calls == []


def test_default_sink_via_runner():
    backend = LinuxBackend(use_amixer=False, runner=FakeRunner())
    assert backend.default_sink() == "alsa_output.pci.analog-stereo"


def test_pactl_volume_of_default_sink():
    backend = LinuxBackend(use_amixer=False, runner=FakeRunner())
    assert backend.parse_volume(PACTL_SINKS) == 34


def test_pactl_muted_of_default_sink():
    backend = LinuxBackend(use_amixer=False, runner=FakeRunner())
    assert backend.parse_muted(PACTL_SINKS) is True


def test_pactl_uses_first_sink_without_default():
    backend = LinuxBackend(use_amixer=False, runner=FakeRunner(fail=True))
    assert backend.parse_volume(PACTL_SINKS) == 100
    assert backend.parse_muted(PACTL_SINKS) is False


def test_amixer_volume_and_muted():
    backend = LinuxBackend(use_amixer=True, runner=FakeRunner())
    assert backend.parse_volume(AMIXER_OUT) == 60
    assert backend.parse_muted(AMIXER_OUT) is False
    assert backend.parse_muted(AMIXER_OUT.replace("[on]", "[off]")) is True


def test_no_volume_found():
    backend = LinuxBackend(use_amixer=True, runner=FakeRunner())
    with pytest.raises(VolumeError, match="no volume found"):
        backend.parse_volume("Simple mixer control 'Master',0\n")


def test_no_muted_information():
    backend = LinuxBackend(use_amixer=False, runner=FakeRunner())
    with pytest.raises(VolumeError, match="no muted information"):
        backend.parse_muted("Sink #0\n\tName: other\n\tMute: yes\n")


def test_set_volume_cmds():
    pactl = LinuxBackend(use_amixer=False, runner=FakeRunner())
    amixer = LinuxBackend(use_amixer=True, runner=FakeRunner())
    assert pactl.set_volume_cmd(37)[:3] == ["pactl", "set-sink-volume", "@DEFAULT_SINK@"]
    assert pactl.set_volume_cmd(37)[-1] == amixer.set_volume_cmd(37)[-1]
    assert amixer.set_volume_cmd(37)[:3] == ["amixer", "set", "Master"]


def test_increase_volume_cmds_signs():
    pactl = LinuxBackend(use_amixer=False, runner=FakeRunner())
    amixer = LinuxBackend(use_amixer=True, runner=FakeRunner())
    assert amixer.increase_volume_cmd(-5)[-1] == "5%-"
    assert amixer.increase_volume_cmd(5)[-1] == "5%+"
    assert pactl.increase_volume_cmd(-5)[-1] == "-5%"
    assert pactl.increase_volume_cmd(5)[:2] == ["pactl", "--"]


def test_mute_cmds():
    pactl = LinuxBackend(use_amixer=False, runner=FakeRunner())
    amixer = LinuxBackend(use_amixer=True, runner=FakeRunner())
    assert pactl.mute_cmd() == ["pactl", "set-sink-mute", "@DEFAULT_SINK@", "1"]
    assert pactl.unmute_cmd() == ["pactl", "set-sink-mute", "@DEFAULT_SINK@", "0"]
    assert amixer.mute_cmd()[-1] == "mute"
    assert amixer.unmute_cmd()[-1] == "unmute"
    assert pactl.get_muted_cmd() == ["pactl", "list", "sinks"]