"""
test_player.py
--------------
Tests for the Cheese player entity.

Covers:
- Sizing and centered reset
- Key edges setting and clearing velocity
- Movement and clamping to the canvas
"""

import random

import pytest

from cracker_chase.core.runtime.game_settings import Keys
from cracker_chase.core.services.input_manager import FrameInput, KeyTransition
from tests.helpers import NO_INPUT, press, release


@pytest.fixture
def cheese(game):
    return game.cheese


class TestCheeseReset:

    def test_size_is_fifteenth_of_canvas_width(self, cheese):
        assert cheese.width == pytest.approx(800 / 15)
        assert cheese.height == pytest.approx(800 / 15)

    def test_reset_centers(self, cheese):
        cheese.pos.update(0, 0)
        cheese.reset()
        assert cheese.pos.x == pytest.approx((800 - 800 / 15) / 2)
        assert cheese.pos.y == pytest.approx((600 - 800 / 15) / 2)

    def test_reset_clears_velocity(self, cheese):
        cheese.update(press(Keys.MOVE_RIGHT, Keys.MOVE_DOWN))
        assert (cheese.x_speed, cheese.y_speed) == (5, 5)

        cheese.reset()

        assert (cheese.x_speed, cheese.y_speed) == (0, 0)


class TestCheeseInput:

    @pytest.mark.parametrize("key, expected", [
        (Keys.MOVE_LEFT, (-5, 0)),
        (Keys.MOVE_RIGHT, (5, 0)),
        (Keys.MOVE_UP, (0, -5)),
        (Keys.MOVE_DOWN, (0, 5)),
    ])
    def test_press_sets_axis(self, cheese, key, expected):
        cheese.apply_input(press(key))
        assert (cheese.x_speed, cheese.y_speed) == expected

    def test_release_zeros_axis(self, cheese):
        cheese.apply_input(press(Keys.MOVE_LEFT, Keys.MOVE_UP))
        cheese.apply_input(release(Keys.MOVE_LEFT))
        assert (cheese.x_speed, cheese.y_speed) == (0, -5)

    def test_opposite_keys_last_edge_wins(self, cheese):
        """Holding left then pressing right moves right; releasing right stops, even with left held."""
        cheese.apply_input(press(Keys.MOVE_LEFT))
        cheese.apply_input(press(Keys.MOVE_RIGHT))
        assert cheese.x_speed == 5

        cheese.apply_input(release(Keys.MOVE_RIGHT))
        assert cheese.x_speed == 0

    def test_edges_apply_in_order_within_a_frame(self, cheese):
        frame = FrameInput(
            frozenset(),
            (KeyTransition(Keys.MOVE_UP, True), KeyTransition(Keys.MOVE_UP, False)),
        )
        cheese.apply_input(frame)
        assert cheese.y_speed == 0

    def test_unbound_keys_ignored(self, cheese):
        cheese.apply_input(press(Keys.START))
        assert (cheese.x_speed, cheese.y_speed) == (0, 0)


class TestCheeseMovement:

    def test_moves_by_speed_each_frame(self, cheese):
        x, y = cheese.pos.x, cheese.pos.y
        cheese.update(press(Keys.MOVE_RIGHT))
        cheese.update(NO_INPUT)
        assert cheese.pos.x == pytest.approx(x + 10)
        assert cheese.pos.y == pytest.approx(y)

    def test_clamps_at_edges_without_zeroing_velocity(self, cheese):
        cheese.pos.update(2, 598)
        cheese.update(press(Keys.MOVE_LEFT, Keys.MOVE_DOWN))

        assert cheese.pos.x == 0
        assert cheese.pos.y == pytest.approx(600 - cheese.height)
        assert (cheese.x_speed, cheese.y_speed) == (-5, 5)

    @pytest.mark.parametrize("seed", range(10))
    def test_always_inside_canvas(self, cheese, seed):
        rng = random.Random(seed)
        for _ in range(100):
            cheese.pos.update(rng.uniform(-2000, 2000), rng.uniform(-2000, 2000))
            cheese.x_speed = rng.uniform(-500, 500)
            cheese.y_speed = rng.uniform(-500, 500)

            cheese.update(NO_INPUT)

            assert 0 <= cheese.pos.x <= 800 - cheese.width
            assert 0 <= cheese.pos.y <= 600 - cheese.height
