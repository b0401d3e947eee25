"""Video options, stream description and command-line parsing for the camera streamer."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Sequence

DEFAULT_PORT = 8554

_RESOLUTIONS: dict[str, tuple[int, int]] = {
    "720p": (1280, 720),
    "1080p": (1920, 1080),
    "480p": (640, 480),
}

_USAGE = (
    "Usage: raspi-stream <resolution> <destination_url> [port]\n"
    "Example: raspi-stream 720p rtsp://localhost:8554/stream"
)


@dataclass
class VideoOptions:
    """Requested capture and encoding settings."""

    width: int = 1280
    height: int = 720
    framerate: int = 30
    codec: str = "h264"
    bitrate: int = 2_000_000


@dataclass
class StreamInfo:
    """Geometry and format of a configured video stream."""

    width: int = 0
    height: int = 0
    stride: int = 0
    pixel_format: str = ""
    colour_space: str | None = None


@dataclass
class StreamSettings:
    """Everything the command line decides: video options and destination."""

    options: VideoOptions = field(default_factory=VideoOptions)
    destination_url: str = ""
    port: int = DEFAULT_PORT


def parse_resolution(res: str) -> tuple[int, int]:
    """Return (width, height) for a named resolution such as '720p'."""
    try:
        return _RESOLUTIONS[res]
    except KeyError:
        raise ValueError(f"invalid resolution option: {res!r}") from None


def parse_args(argv: Sequence[str]) -> StreamSettings:
    """Parse '<resolution> <destination_url> [port]' into stream settings.

    An unknown resolution falls back to 720p with a warning; too few
    arguments or a non-numeric port raise ValueError.
    """
    args = list(argv)
    if len(args) < 2:
        raise ValueError(_USAGE)

    options = VideoOptions()
    try:
        options.width, options.height = parse_resolution(args[0])
    except ValueError:
        print("Invalid resolution option, using default 720p", file=sys.stderr)

    destination_url = args[1]
    if len(args) > 2:
        try:
            port = int(args[2])
        except ValueError:
            raise ValueError(f"invalid port: {args[2]!r}") from None
    else:
        port = DEFAULT_PORT
        print(f"No port specified, using default {DEFAULT_PORT}")

    return StreamSettings(options=options, destination_url=destination_url, port=port)