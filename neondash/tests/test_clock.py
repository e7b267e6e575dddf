# neondash/tests/test_clock.py
import pytest

from neondash.game.clock import ManualTimeSource, SimulationClock
from neondash.game.config import DT_FALLBACK, SPEED
from neondash.game.level import LevelTrack
from neondash.game.session import GameSession


def make(length=15000.0, start=0.0, sleep=None):
    ts = ManualTimeSource(start)
    session = GameSession(LevelTrack([], length=length))
    clock = SimulationClock(session, time_source=ts, sleep=sleep)
    return ts, session, clock


def test_stall_uses_nominal_dt():
    ts, session, clock = make()
    session.start()
    dt = clock.on_frame(5.0)
    assert dt == DT_FALLBACK
    assert session.state.distance == pytest.approx(SPEED * DT_FALLBACK)
    assert clock.last_time == 5.0, "last_time must follow the real clock even when clamped"


def test_regular_frames_pass_through():
    ts, session, clock = make()
    session.start()
    assert clock.on_frame(0.1) == 0.1, "exactly the threshold is not a stall"
    assert clock.on_frame(0.116) == pytest.approx(0.016)


def test_time_going_backwards_is_an_empty_frame():
    ts, session, clock = make(start=10.0)
    session.start()
    assert clock.on_frame(9.5) == 0.0
    assert session.state.distance == 0.0
    assert clock.last_time == 9.5


def test_start_resyncs_time_reference():
    ts, session, clock = make()
    ts.advance(30.0)              # idle in the menu for a while
    session.press(True)
    assert clock.last_time == 30.0
    ts.advance(0.02)
    assert clock.on_frame(ts()) == pytest.approx(0.02)


def test_one_tick_per_frame():
    ts, session, clock = make()
    calls = []
    real_tick = session.tick
    session.tick = lambda dt: (calls.append(dt), real_tick(dt))
    session.start()
    for _ in range(3):
        clock.on_frame(ts.advance(1 / 60))
    assert len(calls) == 3


def test_run_stops_when_session_completes():
    ts = ManualTimeSource()
    session = GameSession(LevelTrack([], length=100.0))
    clock = SimulationClock(session, time_source=ts, sleep=ts.advance, fps=60)
    session.start()
    frames = clock.run(max_frames=1000)
    # 7.5 units per frame -> 14 frames to cover 100 units
    assert frames == 14
    assert session.state.completed and not session.active


def test_run_respects_frame_cap():
    ts = ManualTimeSource()
    session = GameSession()
    clock = SimulationClock(session, time_source=ts, sleep=ts.advance)
    session.start()
    assert clock.run(max_frames=10) == 10
    assert session.active


def test_run_does_nothing_while_idle():
    ts, session, clock = make()
    assert clock.run(max_frames=10) == 0


def test_closed_clock_stops_listening():
    ts, session, clock = make()
    replacement = SimulationClock(session, time_source=ts, sleep=None)
    clock.close()
    assert session.on_start == [replacement.sync]
    ts.advance(12.0)
    session.start()
    assert replacement.last_time == 12.0
    assert clock.last_time == 0.0
    clock.close()   # second close is a no-op
