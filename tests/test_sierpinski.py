import random

from glplayground.geometry import Vec2
from glplayground.sierpinski import VERTICES, ChaosGame


def test_triangle_vertices_match_source():
    assert VERTICES == (Vec2(0, 1), Vec2(-1, -1), Vec2(1, -1))


def test_start_point_is_inside_unit_square():
    for seed in range(20):
        game = ChaosGame(random.Random(seed))
        assert -1.0 <= game.position.x <= 1.0
        assert -1.0 <= game.position.y <= 1.0


def test_step_returns_current_and_moves_to_midpoint():
    game = ChaosGame(random.Random(3))
    for _ in range(50):
        before = game.position
        drawn = game.step()
        assert drawn == before
        targets = [(before + v) / 2.0 for v in VERTICES]
        assert any(
            abs(game.position.x - t.x) < 1e-12 and abs(game.position.y - t.y) < 1e-12
            for t in targets
        )


def test_same_seed_gives_same_sequence():
    first = ChaosGame(random.Random(42))
    second = ChaosGame(random.Random(42))
    assert [first.step() for _ in range(30)] == [second.step() for _ in range(30)]


def test_points_stay_in_square():
    game = ChaosGame(random.Random(7))
    for _ in range(500):
        point = game.step()
        assert -1.0 <= point.x <= 1.0
        assert -1.0 <= point.y <= 1.0