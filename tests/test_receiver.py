import socket

import pytest

from raspistream.receiver import FrameAssembler, main, receive_frames, yuv420_frame_size


@pytest.fixture
def udp_pair():
    receiver = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    receiver.bind(("127.0.0.1", 0))
    receiver.settimeout(5)
    sender = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    yield sender, receiver
    sender.close()
    receiver.close()


def test_frame_size_720p():
    assert yuv420_frame_size(1280, 720) == 1382400


def test_frame_size_odd_dimensions_round_chroma_down():
    assert yuv420_frame_size(3, 3) == 11


def test_frame_size_negative_rejected():
    with pytest.raises(ValueError):
        yuv420_frame_size(-2, 4)


def test_assembler_emits_frame_when_full():
    asm = FrameAssembler(6)
    assert asm.feed(b"abc") is None
    assert asm.remaining == 3
    assert asm.feed(b"def") == b"abcdef"
    assert asm.remaining == 6


def test_assembler_drops_excess_of_oversized_datagram():
    asm = FrameAssembler(6)
    asm.feed(b"abcd")
    assert asm.feed(b"efgh") == b"abcdef"
    assert asm.feed(b"123456") == b"123456"


def test_assembler_rejects_empty_frame_size():
    with pytest.raises(ValueError):
        FrameAssembler(0)


def test_receive_frames_over_udp(udp_pair):
    sender, receiver = udp_pair
    addr = receiver.getsockname()
    for chunk in (b"abcd", b"efgh", b"123456"):
        sender.sendto(chunk, addr)
    frames = receive_frames(receiver, 6)
    assert next(frames) == b"abcdef"
    assert next(frames) == b"123456"


def test_receive_frames_propagates_socket_errors(udp_pair):
    _, receiver = udp_pair
    receiver.settimeout(0.01)
    with pytest.raises(OSError):
        next(receive_frames(receiver, 6))


def test_main_usage_on_missing_arguments(capsys):
    assert main(["5000", "64", "48"]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_rejects_non_numeric_arguments():
    assert main(["port", "64", "48", "out.yuv"]) == 1


def test_main_fails_when_output_cannot_be_opened(tmp_path, capsys):
    target = tmp_path / "missing" / "out.yuv"
    assert main(["0", "4", "4", str(target)]) == 1
    assert "Failed to open output file" in capsys.readouterr().err