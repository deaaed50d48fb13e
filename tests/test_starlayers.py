import random

import pytest

from glplayground.geometry import Vec2
from glplayground.ship import Ship
from glplayground.starlayers import StarLayers


def make_layers(quantity=25, seed=7):
    return StarLayers(quantity, random.Random(seed))


def test_layers_grow_denser_and_smaller():
    layers = list(make_layers())
    assert len(layers) == 5
    assert [layer.quantity for layer in layers] == [25, 50, 75, 100, 125]
    assert layers[0].point_size == pytest.approx(10.0)
    sizes = [layer.point_size for layer in layers]
    assert sizes == sorted(sizes, reverse=True)
    for layer in layers:
        assert len(layer.stars) == layer.quantity
        assert layer.translation == Vec2()


def test_stars_in_range():
    for layer in make_layers():
        for star in layer.stars:
            assert -1.0 <= star.position.x <= 1.0
            assert -1.0 <= star.position.y <= 1.0
            assert 0.5 <= star.intensity <= 1.0


def test_same_seed_same_sky():
    first = [layer.stars for layer in make_layers(seed=3)]
    second = [layer.stars for layer in make_layers(seed=3)]
    assert first == second


def test_reset_changes_quantity():
    layers = make_layers()
    layers.reset(2)
    assert [layer.quantity for layer in layers] == [2, 4, 6, 8, 10]


def test_update_scrolls_with_parallax():
    layers = make_layers()
    ship = Ship()
    ship.velocity = Vec2(0.4, 0.0)
    layers.update(ship, 1.0)
    result = list(layers)
    assert result[0].translation.x == pytest.approx(-0.4 / 2)
    assert result[1].translation.x == pytest.approx(-0.4 / 3)
    assert all(layer.translation.y == pytest.approx(0.0) for layer in result)
    speeds = [abs(layer.translation.x) for layer in result]
    assert speeds == sorted(speeds, reverse=True)


def test_update_wraps_around():
    layers = make_layers()
    ship = Ship()
    ship.velocity = Vec2(-3.0, 3.0)
    layers.update(ship, 1.0)
    for layer in layers:
        assert -1.0 <= layer.translation.x <= 1.0
        assert -1.0 <= layer.translation.y <= 1.0
    first = list(layers)[0]
    assert first.translation.x == pytest.approx(-0.5)
    assert first.translation.y == pytest.approx(0.5)


def test_copies_tile_around_translation():
    layer = list(make_layers())[0]
    layer.translation = Vec2(0.25, -0.5)
    copies = layer.copies()
    assert len(copies) == 9
    assert Vec2(0.25, -0.5) in copies
    assert copies[0] == Vec2(0.25 - 2, -0.5 - 2)
    assert copies[-1] == Vec2(0.25 + 2, -0.5 + 2)