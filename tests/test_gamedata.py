import pytest

from glplayground.gamedata import GameData, Input, State, Stopwatch


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


def test_defaults_are_playing_with_nothing_pressed():
    data = GameData()
    assert data.state is State.PLAYING
    assert not any(data.is_pressed(key) for key in Input)


def test_press_and_release():
    data = GameData()
    data.press(Input.UP)
    assert data.is_pressed(Input.UP)
    assert not data.is_pressed(Input.DOWN)
    data.release(Input.UP)
    assert not data.is_pressed(Input.UP)


def test_release_of_unpressed_key_is_harmless():
    data = GameData()
    data.release(Input.FIRE)
    assert data.inputs == set()


def test_press_is_idempotent():
    data = GameData()
    data.press(Input.LEFT)
    data.press(Input.LEFT)
    assert data.inputs == {Input.LEFT}


def test_clear_releases_everything():
    data = GameData()
    for key in Input:
        data.press(key)
    data.clear()
    assert [key for key in Input if data.is_pressed(key)] == []


def test_instances_do_not_share_inputs():
    first = GameData()
    second = GameData()
    first.press(Input.RIGHT)
    assert not second.is_pressed(Input.RIGHT)


def test_stopwatch_elapsed_follows_clock():
    clock = FakeClock(10.0)
    watch = Stopwatch(clock)
    clock.now = 12.5
    assert watch.elapsed() == pytest.approx(2.5)


def test_stopwatch_restart_resets_and_reports():
    clock = FakeClock(1.0)
    watch = Stopwatch(clock)
    clock.now = 4.0
    assert watch.restart() == pytest.approx(3.0)
    assert watch.elapsed() == pytest.approx(0.0)
    clock.now = 4.25
    assert watch.elapsed() == pytest.approx(0.25)


def test_stopwatch_with_real_clock_is_non_negative():
    watch = Stopwatch()
    assert watch.elapsed() >= 0.0