import math

import pytest

from breakout.geometry import circle_rect_collision, reflect


def test_reflect_straight_down_off_floor_goes_up():
    result = reflect((0.0, 1.0), (0.0, -1.0))
    assert tuple(result) == pytest.approx((0.0, -1.0))


def test_reflect_flips_only_normal_component():
    s = 1 / math.sqrt(2)
    result = reflect((s, s), (-1.0, 0.0))
    assert tuple(result) == pytest.approx((-s, s))


def test_reflect_result_is_unit_length():
    result = reflect((3.0, 4.0), (0.0, 1.0))
    assert result.length() == pytest.approx(1.0)


def test_reflect_twice_restores_unit_vector():
    original = (0.6, 0.8)
    once = reflect(original, (0.0, 1.0))
    twice = reflect(once, (0.0, 1.0))
    assert tuple(twice) == pytest.approx(original)


def test_reflect_zero_vector_stays_zero():
    result = reflect((0.0, 0.0), (1.0, 0.0))
    assert tuple(result) == (0.0, 0.0)


def test_reflect_does_not_mutate_input():
    from pygame.math import Vector2

    v = Vector2(0.0, 2.0)
    reflect(v, (0.0, -1.0))
    assert tuple(v) == (0.0, 2.0)


RECT = (10.0, 20.0, 30.0, 10.0)


def test_circle_centre_inside_rect_collides():
    assert circle_rect_collision((25.0, 25.0), 4.0, RECT) is True


def test_circle_far_away_does_not_collide():
    assert circle_rect_collision((100.0, 100.0), 4.0, RECT) is False


def test_circle_touching_edge_collides():
    assert circle_rect_collision((25.0, 16.0), 4.0, RECT) is True


def test_circle_just_beyond_edge_misses():
    assert circle_rect_collision((25.0, 15.9), 4.0, RECT) is False


def test_circle_near_corner_inside_radius_collides():
    assert circle_rect_collision((8.0, 18.0), 4.0, RECT) is True


def test_circle_near_corner_outside_radius_misses():
    assert circle_rect_collision((7.0, 17.0), 4.0, RECT) is False