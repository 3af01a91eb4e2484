import numpy as np
import pytest

from errors import ConfigurationError
from particle import Particle


def _particle(surface, position=(1.0, 0.0), mass=1.0, velocity=(0.0, 0.0), **kwargs):
    return Particle(position, mass, velocity, surface, **kwargs)


def test_one_step_on_parabola(parabola):
    particle = _particle(parabola)
    particle.update(0.1)

    assert particle.velocity.tolist() == pytest.approx([-0.4, 0.0])
    assert particle.position.tolist() == pytest.approx([0.6, 0.0])


def test_update_is_deterministic(parabola):
    a = _particle(parabola, position=(0.3, -1.2), velocity=(0.05, 0.02), mass=1.7)
    b = _particle(parabola, position=(0.3, -1.2), velocity=(0.05, 0.02), mass=1.7)
    for _ in range(25):
        a.update(0.01)
        b.update(0.01)

    assert a.position.tobytes() == b.position.tobytes()
    assert a.velocity.tobytes() == b.velocity.tobytes()


def test_doubling_mass_halves_velocity_change(parabola):
    light = _particle(parabola, mass=1.0, velocity=(0.2, 0.1))
    heavy = _particle(parabola, mass=2.0, velocity=(0.2, 0.1))
    light.update(0.1)
    heavy.update(0.1)

    light_delta = light.velocity - np.array([0.2, 0.1])
    heavy_delta = heavy.velocity - np.array([0.2, 0.1])
    np.testing.assert_allclose(heavy_delta, light_delta / 2)


def test_no_neighbours_is_plain_descent(parabola):
    lonely = _particle(parabola, separation_weight=5.0, alignment_weight=5.0, cohesion_weight=5.0)
    plain = _particle(parabola, separation_weight=0.0, alignment_weight=0.0, cohesion_weight=0.0)
    lonely.update(0.1)
    plain.update(0.1)

    assert lonely.velocity.tolist() == plain.velocity.tolist()
    assert lonely.position.tolist() == plain.position.tolist()


def test_flocking_terms_are_blended_before_integrating(parabola):
    particle = _particle(
        parabola, position=(0.0, 0.0), surface_weight=0.0,
        separation_weight=(1.0, 0.0), alignment_weight=(0.0, 1.0), cohesion_weight=0.0,
    )
    left = _particle(parabola, position=(-1.0, 0.0), velocity=(0.0, 0.2))
    right = _particle(parabola, position=(-3.0, 0.0), velocity=(0.0, 0.4))
    particle.neighbours = [left, right]
    particle.update(0.5)

    # separation: mean of (1, 0) and (3, 0); alignment: mean velocity (0, 0.3)
    assert particle.velocity.tolist() == pytest.approx([2.0 * 0.5, 0.3 * 0.5])


def test_cohesion_pulls_toward_neighbour_centre(parabola):
    particle = _particle(
        parabola, position=(0.0, 0.0), surface_weight=0.0,
        separation_weight=0.0, alignment_weight=0.0, cohesion_weight=1.0,
    )
    particle.neighbours = [
        _particle(parabola, position=(2.0, 2.0)),
        _particle(parabola, position=(2.0, 0.0)),
    ]
    particle.update(1.0)

    assert particle.velocity.tolist() == pytest.approx([2.0, 1.0])


def test_radius_tracks_height(parabola):
    at_bottom = _particle(parabola, position=(0.0, 0.0), size_range=10)
    higher = _particle(parabola, position=(1.0, 0.0), size_range=10)

    assert at_bottom.radius == pytest.approx(90 * 0.005)
    assert higher.radius == pytest.approx((90 + 2.0 * 10) * 0.005)


@pytest.mark.parametrize("mass", [0.0, -1.0, float("nan")])
def test_non_positive_mass_is_rejected(parabola, mass):
    with pytest.raises(ConfigurationError):
        _particle(parabola, mass=mass)
