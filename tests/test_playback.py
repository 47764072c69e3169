import pytest

from algorithms import require_algorithm, tracer_kwargs
from engine import Playback, PlaybackState, Recorder
from errors import TraceInputError


@pytest.fixture
def trace(initial_graph):
    info = require_algorithm("bfs")
    return Recorder().record(info, initial_graph.copy(), **tracer_kwargs(info, initial_graph, 0))


@pytest.fixture
def pb(trace) -> Playback:
    p = Playback()
    p.load(trace)
    return p


def test_load_shows_first_frame(pb, trace):
    assert pb.state == PlaybackState.PAUSED
    assert pb.index == 0
    assert pb.current_frame is trace[0]
    assert pb.total == len(trace)


def test_nothing_loaded():
    p = Playback()
    assert p.state == PlaybackState.IDLE
    assert p.current_frame is None
    assert p.step(1) is False
    assert p.seek(0) is False
    p.reset()
    assert p.state == PlaybackState.IDLE


def test_seek_then_step_back_and_forth_returns_same_frame(pb):
    k = len(pb.trace) // 2
    assert pb.seek(k)
    direct = pb.current_frame
    for _ in range(k):
        assert pb.step(-1)
    assert pb.index == 0
    for _ in range(k):
        assert pb.step(1)
    assert pb.current_frame is direct


def test_seek_out_of_range_is_refused(pb):
    pb.seek(2)
    assert pb.seek(len(pb.trace)) is False
    assert pb.seek(-1) is False
    assert pb.index == 2


def test_step_past_either_end(pb):
    assert pb.step(-1) is False
    assert pb.index == 0
    pb.seek(len(pb.trace) - 1)
    assert pb.state == PlaybackState.FINISHED
    assert pb.step(1) is False
    assert pb.index == len(pb.trace) - 1


def test_tick_advances_once_per_interval(pb):
    pb.set_speed(2)
    pb.play()
    start = pb._last_tick
    assert pb.tick(now=start + 0.1) is False
    assert pb.tick(now=start + 0.6) is True
    assert pb.index == 1
    assert pb.tick(now=start + 0.7) is False


def test_autoplay_runs_to_finished(pb):
    pb.play()
    now = pb._last_tick
    while pb.is_playing:
        now += 2 * pb.interval
        pb.tick(now=now)
    assert pb.state == PlaybackState.FINISHED
    assert pb.at_end


def test_pause_stops_ticks(pb):
    pb.play()
    pb.pause()
    assert pb.state == PlaybackState.PAUSED
    assert pb.tick(now=pb._last_tick + 100) is False


def test_speed_presets_and_validation(pb):
    pb.set_speed("4x")
    assert pb.interval == 0.25
    pb.set_speed("0.5")
    assert pb.speed == 0.5
    for bad in (0, -1, "fast", None):
        with pytest.raises(TraceInputError):
            pb.set_speed(bad)
    assert pb.speed == 0.5


def test_reset_returns_to_first_frame(pb):
    pb.seek(3)
    pb.play()
    pb.reset()
    assert pb.index == 0
    assert pb.state == PlaybackState.PAUSED


def test_unload_goes_idle(pb):
    pb.unload()
    assert pb.state == PlaybackState.IDLE
    assert pb.trace is None
    assert pb.index == -1


def test_on_frame_callback(trace):
    seen = []
    p = Playback(on_frame=seen.append)
    p.load(trace)
    p.step(1)
    p.seek(0)
    assert seen == [trace[0], trace[1], trace[0]]
