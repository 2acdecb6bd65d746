import math

import pytest

from judgekit.vectors import min_pairing_distance_sum, min_vector_matching


def test_two_points_vector_length():
    points = [(0, 0), (3, 4)]
    assert min_vector_matching(points) == pytest.approx(math.dist(*points))


def test_symmetric_points_cancel():
    assert min_vector_matching([(1, 0), (-1, 0), (2, 0), (-2, 0)]) == pytest.approx(0.0)


def test_vector_matching_translation_invariant():
    points = [(1, 2), (5, -3), (7, 7), (-4, 0), (2, 9), (0, 1)]
    shifted = [(x + 13, y - 8) for x, y in points]
    assert min_vector_matching(points) == pytest.approx(min_vector_matching(shifted))


def test_vector_matching_order_invariant():
    points = [(1, 2), (5, -3), (7, 7), (-4, 0)]
    assert min_vector_matching(points) == pytest.approx(min_vector_matching(points[::-1]))


def test_vector_matching_not_longer_than_one_pairing():
    points = [(1, 2), (5, -3), (7, 7), (-4, 0)]
    one_pairing = math.hypot(1 - 5 + 7 + 4, 2 + 3 + 7 - 0)
    assert min_vector_matching(points) <= one_pairing + 1e-9


@pytest.mark.parametrize("points", [[], [(0, 0)], [(0, 0), (1, 1), (2, 2)]])
def test_vector_matching_needs_even_count(points):
    with pytest.raises(ValueError):
        min_vector_matching(points)


def test_pairing_two_points():
    assert min_pairing_distance_sum([(0, 0), (3, 4)]) == 25


def test_pairing_picks_close_pairs():
    assert min_pairing_distance_sum([(0, 0), (5, 0), (0, 1), (5, 1)]) == 2


def test_pairing_translation_invariant():
    points = [(1, 2), (5, -3), (7, 7), (-4, 0), (2, 9), (0, 1)]
    shifted = [(x - 6, y + 11) for x, y in points]
    assert min_pairing_distance_sum(points) == min_pairing_distance_sum(shifted)


def test_pairing_not_worse_than_given_pairing():
    points = [(1, 2), (5, -3), (7, 7), (-4, 0)]
    given = (1 - 5) ** 2 + (2 + 3) ** 2 + (7 + 4) ** 2 + (7 - 0) ** 2
    assert min_pairing_distance_sum(points) <= given


def test_pairing_needs_even_count():
    with pytest.raises(ValueError):
        min_pairing_distance_sum([(0, 0), (1, 1), (2, 2)])