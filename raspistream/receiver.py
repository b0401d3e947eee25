"""Receive raw YUV420 frames over UDP and append them to a file."""

from __future__ import annotations

import socket
import sys
from typing import Iterator, Sequence

_PROG = "udp-receiver"

_USAGE = (
    f"Usage: {_PROG} <listen_port> <width> <height> <output_file>\n"
    f"Example: {_PROG} 5000 1280 720 out.yuv"
)


def yuv420_frame_size(width: int, height: int) -> int:
    """Byte size of one planar YUV420 frame."""
    if width < 0 or height < 0:
        raise ValueError("width and height must be non-negative")
    return width * height + 2 * ((width // 2) * (height // 2))


class FrameAssembler:
    """Collects incoming datagrams into fixed-size frames.

    A datagram longer than the space left in the current frame is cut
    short; the excess is dropped, as a truncated socket read would.
    """

    def __init__(self, frame_size: int) -> None:
        if frame_size <= 0:
            raise ValueError("frame_size must be positive")
        self.frame_size = frame_size
        self._buf = bytearray()

    @property
    def remaining(self) -> int:
        """Bytes still missing from the current frame."""
        return self.frame_size - len(self._buf)

    def feed(self, data) -> bytes | None:
        """Add data; return the finished frame once it is complete."""
        self._buf += memoryview(data).cast("B")[: self.remaining]
        if len(self._buf) < self.frame_size:
            return None
        frame = bytes(self._buf)
        self._buf.clear()
        return frame


def receive_frames(sock: socket.socket, frame_size: int) -> Iterator[bytes]:
    """Yield complete frames read from a datagram socket, forever.

    Socket errors propagate to the caller.
    """
    assembler = FrameAssembler(frame_size)
    while True:
        frame = assembler.feed(sock.recv(assembler.remaining))
        if frame is not None:
            yield frame


def main(argv: Sequence[str] | None = None) -> int:
    """Listen on a UDP port and write every received frame to a file."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 4:
        print(_USAGE, file=sys.stderr)
        return 1
    try:
        port, width, height = (int(a) for a in args[:3])
        frame_size = yuv420_frame_size(width, height)
    except ValueError as err:
        print(f"{_PROG}: {err}", file=sys.stderr)
        return 1
    if frame_size <= 0:
        print(f"{_PROG}: frame size must be positive", file=sys.stderr)
        return 1
    output_file = args[3]

    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        try:
            sock.bind(("", port))
        except (OSError, OverflowError) as err:
            print(f"bind: {err}", file=sys.stderr)
            return 1
        try:
            out = open(output_file, "wb")
        except OSError:
            print("Failed to open output file", file=sys.stderr)
            return 1
        with out:
            print(f"Listening for UDP packets on port {port}...")
            print(f"Writing raw frames to {output_file}")
            try:
                for frame in receive_frames(sock, frame_size):
                    out.write(frame)
                    out.flush()
                    print("Frame written")
            except OSError as err:
                print(f"recv: {err}", file=sys.stderr)
            except KeyboardInterrupt:
                pass
    return 0


if __name__ == "__main__":
    sys.exit(main())