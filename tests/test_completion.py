import threading

import pytest

from raspistream.completion import CompletedRequest, RequestQueue


def test_push_then_wait_returns_same_request():
    queue = RequestQueue()
    req = CompletedRequest(buffers={"video": b"frame"})
    queue.push(req)
    assert queue.wait(timeout=1) is req
    assert len(queue) == 0


def test_fifo_order():
    queue = RequestQueue()
    reqs = [CompletedRequest(metadata={"seq": n}) for n in range(3)]
    for r in reqs:
        queue.push(r)
    assert len(queue) == 3
    assert [queue.wait(timeout=1) for _ in reqs] == reqs


def test_wait_times_out_on_empty_queue():
    queue = RequestQueue()
    with pytest.raises(TimeoutError):
        queue.wait(timeout=0.01)


def test_wait_unblocks_when_another_thread_pushes():
    queue = RequestQueue()
    req = CompletedRequest(buffers={"s": b"x"})
    timer = threading.Timer(0.05, queue.push, args=(req,))
    timer.start()
    try:
        assert queue.wait(timeout=5) is req
    finally:
        timer.join()


def test_completed_request_defaults_are_independent():
    a = CompletedRequest()
    b = CompletedRequest()
    a.buffers["s"] = b"x"
    assert b.buffers == {}