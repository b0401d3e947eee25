"""Send raw frame planes to a destination over UDP."""

from __future__ import annotations

import socket
from typing import Iterable, Iterator

from raspistream.options import StreamInfo

MAX_UDP_SIZE = 65507


def chunk_payload(data, max_size: int = MAX_UDP_SIZE) -> Iterator[memoryview]:
    """Yield consecutive slices of data no longer than max_size bytes."""
    if max_size <= 0:
        raise ValueError("max_size must be positive")
    view = memoryview(data).cast("B")
    for start in range(0, len(view), max_size):
        yield view[start : start + max_size]


class Streamer:
    """UDP sender that writes every plane of a frame to one address."""

    def __init__(self, url: str, port: int, max_packet_size: int = MAX_UDP_SIZE) -> None:
        if not 0 <= port <= 0xFFFF:
            raise ValueError(f"invalid port: {port}")
        try:
            host = socket.inet_ntoa(socket.inet_aton(url))
        except OSError:
            raise ValueError("Invalid IP address") from None
        if max_packet_size <= 0:
            raise ValueError("max_packet_size must be positive")
        self.destination = (host, port)
        self.max_packet_size = max_packet_size
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)

    def process_frame(self, planes: Iterable, info: StreamInfo | None = None) -> bool:
        """Send each plane in datagram-sized chunks; False if a send fails."""
        for plane in planes:
            for chunk in chunk_payload(plane, self.max_packet_size):
                try:
                    self._sock.sendto(chunk, self.destination)
                except OSError:
                    return False
        return True

    def close(self) -> None:
        """Close the socket."""
        self._sock.close()

    def __enter__(self) -> Streamer:
        return self

    def __exit__(self, *args) -> None:
        self.close()