"""Tests for injected clocks and FrameContext generation."""

import random

import pytest
from idle_frame.clock import FrameClock, ManualClock, SystemClock
from idle_frame.types import FrameContext

_test_rng = random.Random(0)


def test_manual_clock_starts_where_told():
    clock = ManualClock(1500.0)
    assert clock.now_ms() == 1500.0


def test_manual_clock_advance_and_set():
    clock = ManualClock()
    assert clock.advance(16.0) == 16.0
    assert clock.advance(4.0) == 20.0
    clock.set(1000.0)
    assert clock.now_ms() == 1000.0


def test_manual_clock_rejects_going_backwards():
    clock = ManualClock()
    with pytest.raises(ValueError):
        clock.advance(-1.0)


def test_system_clock_reports_milliseconds():
    clock = SystemClock()
    a = clock.now_ms()
    b = clock.now_ms()
    assert a > 1e12  # well past 2001 in ms
    assert b >= a


def test_first_frame_has_zero_dt():
    """The first frame never moves anything."""
    source = ManualClock(5000.0)
    clock = FrameClock(source)
    assert clock.advance() == 1
    assert clock.dt == 0.0
    assert clock.now_ms == 5000.0


def test_dt_is_seconds_between_frames():
    source = ManualClock(0.0)
    clock = FrameClock(source)
    clock.advance()
    source.advance(50.0)
    clock.advance()
    assert abs(clock.dt - 0.05) < 1e-9


def test_dt_is_capped():
    source = ManualClock(0.0)
    clock = FrameClock(source, max_dt=0.1)
    clock.advance()
    source.advance(10_000.0)
    clock.advance()
    assert clock.dt == 0.1


def test_invalid_max_dt():
    with pytest.raises(ValueError):
        FrameClock(ManualClock(), max_dt=0.0)


def test_context_fields():
    source = ManualClock(1000.0)
    clock = FrameClock(source)
    clock.advance()
    source.advance(250.0)
    clock.advance()

    stop_called = []
    ctx = clock.context(lambda: stop_called.append(True), _test_rng)

    assert isinstance(ctx, FrameContext)
    assert ctx.frame_number == 2
    assert ctx.now_ms == 1250.0
    assert abs(ctx.elapsed - 0.25) < 1e-9
    assert abs(ctx.dt - 0.25) < 1e-9
    assert abs(ctx.seconds - 1.25) < 1e-9
    assert ctx.random is _test_rng
    ctx.request_stop()
    assert stop_called == [True]


def test_context_is_frozen():
    clock = FrameClock(ManualClock())
    ctx = clock.context(lambda: None, _test_rng)
    with pytest.raises(AttributeError):
        ctx.dt = 1.0  # type: ignore[misc]


def test_resume_drops_dt_but_keeps_count():
    source = ManualClock(0.0)
    clock = FrameClock(source)
    clock.advance()
    source.advance(100.0)
    clock.advance()
    clock.resume()
    source.advance(3000.0)
    clock.advance()
    assert clock.frame_number == 3
    assert clock.dt == 0.0


def test_reset():
    source = ManualClock(0.0)
    clock = FrameClock(source)
    clock.advance()
    clock.advance()
    clock.reset()
    assert clock.frame_number == 0
    assert clock.dt == 0.0
