import pytest


def test_calls_run_in_due_order(loop, clock):
    ran = []
    loop.call_later(0.5, lambda: ran.append("b"))
    loop.call_later(0.1, lambda: ran.append("a"))
    loop.call_later(0.5, lambda: ran.append("c"))
    assert loop.pending == 3
    assert loop.run_until_idle() == 3
    assert ran == ["a", "b", "c"]
    assert clock.now == pytest.approx(0.5)


def test_cancelled_call_never_runs(loop, clock):
    ran = []
    call = loop.call_later(0.6, lambda: ran.append(1))
    call.cancel()
    assert not call.active
    assert loop.pending == 0
    assert loop.run_once() is False
    assert ran == []
    assert clock.slept == []


def test_non_blocking_run_skips_future_calls(loop, clock):
    ran = []
    loop.call_later(1.0, lambda: ran.append(1))
    assert loop.run_once(block=False) is False
    clock.now = 1.0
    assert loop.run_once(block=False) is True
    assert ran == [1]


def test_cancel_during_wait(loop, clock):
    ran = []
    call = loop.call_later(0.6, lambda: ran.append(1))
    original_sleep = clock.sleep

    def sleep_and_cancel(seconds):
        original_sleep(seconds)
        call.cancel()

    loop._sleep = sleep_and_cancel
    assert loop.run_once() is False
    assert ran == []


def test_negative_delay_rejected(loop):
    with pytest.raises(ValueError):
        loop.call_later(-0.1, lambda: None)


def test_done_call_is_inactive(loop):
    call = loop.call_later(0, lambda: None)
    loop.run_once()
    assert call.done and not call.active


def test_equal_due_times_run_in_scheduling_order(loop):
    ran = []
    for name in "xyz":
        loop.call_later(0.2, lambda n=name: ran.append(n))
    assert loop.run_once() is True
    assert ran == ["x", "y", "z"]
    assert loop.pending == 0


def test_cancel_is_idempotent_and_leaves_others_queued(loop):
    ran = []
    keep = loop.call_later(0.3, lambda: ran.append("keep"))
    drop = loop.call_later(0.1, lambda: ran.append("drop"))
    drop.cancel()
    drop.cancel()
    assert loop.pending == 1
    assert loop.next_due() == pytest.approx(0.3)
    assert loop.run_until_idle() == 1
    assert ran == ["keep"]
    keep.cancel()
    assert not keep.active and keep.done
