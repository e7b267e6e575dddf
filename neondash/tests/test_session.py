# neondash/tests/test_session.py
import dataclasses

import pytest

from neondash.game.config import SPEED
from neondash.game.level import LevelTrack, Obstacle, ObstacleType
from neondash.game.player import Mode, spawn_player
from neondash.game.session import GameSession, Status

DT = 0.02   # 9 units of scroll per tick


def session_with(*items, length=15000.0):
    track = LevelTrack([Obstacle(x=float(x), kind=k) for x, k in items], length=length)
    return GameSession(track)


def test_new_session_is_idle():
    s = session_with()
    assert s.status is Status.IDLE
    assert s.state.attempts == 1
    s.tick(DT)
    assert s.state.distance == 0.0, "idle session must not advance"


def test_default_session_uses_stock_course():
    assert len(GameSession().track) == 8


def test_press_starts_from_idle():
    s = session_with()
    starts = []
    s.on_start.append(lambda: starts.append(True))
    s.press(False)
    assert s.status is Status.IDLE and not starts
    s.press(True)
    assert s.status is Status.RUNNING
    assert s.state.pressed is True
    assert starts == [True]
    s.press(False)
    assert s.active and s.state.pressed is False


def test_start_while_running_is_an_error():
    s = session_with()
    s.start()
    with pytest.raises(RuntimeError):
        s.start()


def test_tick_scrolls_at_constant_speed():
    s = session_with()
    s.start()
    s.tick(0.1)
    s.tick(0.1)
    assert s.state.distance == pytest.approx(2 * SPEED * 0.1)


def test_press_mid_run_makes_the_cube_jump():
    s = session_with()
    s.start()
    s.press(True)
    s.tick(DT)
    assert s.player.vy == -16.0
    assert s.player.y < spawn_player().y


def test_spike_collision_kills_and_respawns():
    s = session_with((159, ObstacleType.SPIKE))
    deaths = []
    s.on_death.append(deaths.append)
    s.start()
    s.tick(DT)   # spike now 150 units ahead of the scroll origin, overlapping the player
    assert s.state.attempts == 2
    assert deaths == [2]
    assert s.death_cause == "spike"
    assert s.state.distance == 0.0
    assert s.player == spawn_player()
    assert s.active, "death is an instant respawn"


def test_portal_switches_mode():
    s = session_with((199, ObstacleType.PORTAL_TO_SHIP))
    s.start()
    s.tick(DT)
    assert s.player.mode is Mode.SHIP
    assert s.state.attempts == 1


def test_ship_touching_ground_dies():
    s = session_with()
    s.start()
    s.player.mode = Mode.SHIP
    s.tick(DT)
    assert s.state.attempts == 2
    assert s.death_cause == "ground"
    assert s.player.mode is Mode.CUBE


def test_die_restores_exact_initial_pose():
    s = session_with()
    s.start()
    s.state.distance = 1234.5
    s.player.y, s.player.vy, s.player.rotation, s.player.mode = 12.0, 5.0, 33.0, Mode.SHIP
    s.die()
    assert s.state.distance == 0.0
    assert dataclasses.asdict(s.player) == dataclasses.asdict(spawn_player())


def test_attempts_are_monotonic():
    s = session_with()
    s.start()
    seen = [s.state.attempts]
    for _ in range(5):
        s.die()
        seen.append(s.state.attempts)
    assert seen == [1, 2, 3, 4, 5, 6]


def test_progress_fraction():
    s = session_with(length=900.0)
    s.start()
    s.tick(1.0)
    assert s.progress == pytest.approx(0.5)


def test_completion_clamps_progress_and_halts():
    s = session_with(length=100.0)
    s.start()
    s.tick(0.5)
    assert s.progress == 1.0
    assert s.status is Status.COMPLETE
    assert not s.active
    dist = s.state.distance
    s.tick(0.5)
    assert s.state.distance == dist, "completed session must ignore ticks"

    s.press(True)
    assert s.status is Status.RUNNING
    assert s.state.distance == 0.0 and s.progress == 0.0
    assert s.state.attempts == 1


def test_snapshot_exposes_render_state():
    s = GameSession()
    s.start()
    snap = s.snapshot()
    assert snap.obstacles == ((800.0, ObstacleType.SPIKE),)
    assert snap.mode is Mode.CUBE
    assert snap.player_x == 150.0 and snap.player_y == 320.0
    assert snap.progress == 0.0 and snap.attempts == 1 and snap.active
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.progress = 1.0


def test_die_resets_progress_immediately():
    s = session_with(length=900.0)
    s.start()
    s.tick(1.0)
    assert s.progress == pytest.approx(0.5)
    s.die()
    assert s.progress == 0.0
    assert s.snapshot().progress == 0.0, "snapshot between death and next tick"
