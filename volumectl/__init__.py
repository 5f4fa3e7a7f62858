"""Get and set the system audio volume and mute state on macOS and Linux."""

__version__ = "0.2.2"