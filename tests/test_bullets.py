import pytest

from glplayground.bullets import Bullet, Bullets
from glplayground.gamedata import GameData, Input, State
from glplayground.geometry import Vec2
from glplayground.ship import Ship


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def ship(clock):
    return Ship(clock=clock)


def firing():
    data = GameData()
    data.press(Input.FIRE)
    return data


def test_fires_a_pair_after_cooldown(ship, clock):
    bullets = Bullets()
    clock.now = 0.3
    bullets.update(ship, firing(), 0.0)
    pair = list(bullets)
    assert len(bullets) == 2
    offset = 11.0 / 15.5 * ship.scale
    assert pair[0].translation.x == pytest.approx(offset)
    assert pair[1].translation.x == pytest.approx(-offset)
    for bullet in pair:
        assert bullet.translation.y == pytest.approx(0.0)
        assert bullet.velocity.y == pytest.approx(2.0)
        assert bullet.dead is False
    assert ship.velocity.y == pytest.approx(-0.1)


def test_cooldown_blocks_firing(ship, clock):
    bullets = Bullets()
    clock.now = 0.1
    bullets.update(ship, firing(), 0.0)
    assert len(bullets) == 0

    clock.now = 0.3
    bullets.update(ship, firing(), 0.0)
    clock.now = 0.4
    bullets.update(ship, firing(), 0.0)
    assert len(bullets) == 2


def test_no_firing_when_not_playing(ship, clock):
    bullets = Bullets()
    clock.now = 1.0
    data = firing()
    data.state = State.GAME_OVER
    bullets.update(ship, data, 0.0)
    assert len(bullets) == 0


def test_bullets_move_relative_to_ship(ship):
    bullets = Bullets()
    bullets._bullets.append(Bullet(False, Vec2(0.0, 0.0), Vec2(0.0, 1.0)))
    ship.velocity = Vec2(0.5, 0.0)
    bullets.update(ship, GameData(), 0.2)
    (bullet,) = list(bullets)
    assert bullet.translation.x == pytest.approx(-0.1)
    assert bullet.translation.y == pytest.approx(0.2)


def test_bullets_off_screen_are_removed(ship, clock):
    bullets = Bullets()
    clock.now = 0.3
    bullets.update(ship, firing(), 0.0)
    assert len(bullets) == 2
    bullets.update(ship, GameData(), 1.0)
    assert len(bullets) == 0


def test_reset_clears(ship, clock):
    bullets = Bullets()
    clock.now = 0.3
    bullets.update(ship, firing(), 0.0)
    bullets.reset()
    assert list(bullets) == []


def test_shape_is_closed_fan():
    shape = Bullets().shape
    assert len(shape) == 12
    assert shape[0] == Vec2(0.0, 0.0)
    assert shape[-1] == shape[1]