# raspistream

Send raw YUV420 frame planes over UDP, and put them back together into
whole frames on the other end.

The sending side splits every plane of a frame into datagrams of at most
65507 bytes, the largest UDP payload. The receiving side gathers datagrams
until it has one full YUV420 frame, writes it out, and starts on the next.

## Receiving frames

The package installs one command, `raspistream-receive`:

    raspistream-receive <listen_port> <width> <height> <output_file>

For example:

    raspistream-receive 5000 1280 720 out.yuv

It binds the given UDP port on all interfaces, truncates the output file,
and appends each completed frame to it as raw YUV420 (planar Y, then U,
then V), printing `Frame written` after each one. It runs until a socket
error or Ctrl-C. With fewer than four arguments, a non-numeric port, width
or height, a frame size of zero, a port that cannot be bound, or an output
file that cannot be opened, it prints a message and exits with status 1.

## Library use

### Receiving: `raspistream.receiver`

```python
from raspistream.receiver import FrameAssembler, yuv420_frame_size

size = yuv420_frame_size(1280, 720)   # 1382400 bytes
assembler = FrameAssembler(size)
frame = assembler.feed(datagram)       # None until a frame is complete
```

`yuv420_frame_size(width, height)` is a full-size Y plane plus two
quarter-size chroma planes (odd dimensions rounded down for chroma); it
raises `ValueError` for negative sizes.

`FrameAssembler.feed(data)` appends bytes to the current frame and returns
the finished frame as `bytes` once it is full. Data beyond what the current
frame still needs is dropped, not carried into the next frame.
`FrameAssembler.remaining` is the number of bytes still missing.

`receive_frames(sock, frame_size)` is a generator that reads from a bound
datagram socket and yields complete frames forever; socket errors
propagate.

### Sending: `raspistream.streamer`

`chunk_payload(data, max_size=65507)` yields consecutive `memoryview`
slices of a buffer, none longer than `max_size`.

`Streamer(url, port, max_packet_size=65507)` opens a UDP socket aimed at
an IPv4 address given in dotted form; anything else raises `ValueError`,
as does a port outside 0–65535. `process_frame(planes, info=None)` sends
each plane in chunks and returns `False` as soon as a send fails, `True`
otherwise. A `Streamer` is a context manager and closes its socket on
exit; `close()` does the same directly.

```python
from raspistream.streamer import Streamer

with Streamer("127.0.0.1", 5000) as streamer:
    streamer.process_frame([y_plane, u_plane, v_plane])
```

### Settings: `raspistream.options`

`VideoOptions` holds width, height (default 1280x720), framerate (30),
codec (`"h264"`) and bitrate (2000000). `StreamInfo` describes a
configured stream: width, height, stride, pixel format and colour space.

`parse_resolution(res)` maps `720p` to (1280, 720), `1080p` to
(1920, 1080) and `480p` to (640, 480), and raises `ValueError` for any
other name.

`parse_args(argv)` reads `<resolution> <destination_url> [port]` into a
`StreamSettings` (options, destination URL, port). An unknown resolution
keeps 720p and prints a warning; a missing port means 8554. Fewer than two
arguments or a non-numeric port raise `ValueError`.

### Request hand-off: `raspistream.completion`

`RequestQueue` is a thread-safe FIFO of `CompletedRequest` objects (a
`buffers` dict and a `metadata` dict). `push(request)` queues one and
wakes a waiting consumer; `wait(timeout=None)` blocks until a request is
available and returns the oldest, raising `TimeoutError` if the timeout
expires first. `len()` gives the number queued.

## What it does not do

There is no camera capture: nothing here opens a camera or produces
frames, so frame planes must come from elsewhere. Likewise there is no
sending command; `parse_args`, `Streamer` and `RequestQueue` are the
pieces a sender program would be built from. The receiver only writes raw
frames to a file; it does not display or encode them.