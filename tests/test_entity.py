import pytest

from entity import Entity


def test_integrate_is_semi_implicit_euler():
    entity = Entity((1.0, 1.0), 2.0, (0.5, 0.0))
    entity.integrate((1.0, -2.0))

    # velocity first: (0.5 * 2 + 1) / 2, (0 - 2) / 2
    assert entity.velocity.tolist() == [1.0, -1.0]
    assert entity.position.tolist() == [2.0, 0.0]


def test_rules_are_zero_without_neighbours():
    entity = Entity((1.0, 1.0), 1.0, (0.0, 0.0))
    for rule in (entity.separation, entity.alignment, entity.cohesion):
        assert rule([]).tolist() == [0.0, 0.0]


def test_speed():
    assert Entity((0.0, 0.0), 1.0, (3.0, 4.0)).speed == pytest.approx(5.0)
