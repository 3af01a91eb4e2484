# particle.py
"""
A particle rolling down an analytic surface.

Each tick the particle takes a steepest-descent step on its surface. When it
has neighbours (the swarm demo) it also blends in separation, alignment and
cohesion before integrating. With no neighbours the flocking terms vanish
and the update is plain gradient descent with momentum.
"""
from typing import List

from constants import (
    DEFAULT_PARTICLE_RULE_WEIGHT, DEFAULT_SIZE_RANGE, DEFAULT_SURFACE_WEIGHT,
    RADIUS_BASE, RADIUS_SCALE,
)
from entity import Entity
from surface import Surface
from vectormath import VectorLike, per_axis, vec_prod, vec_sum, vector

# --- Data Contracts ---
#
# class Particle(Entity):
#   - __init__(self, position, mass, velocity, surface, size_range, weights...):
#     - surface: shared Surface, never copied.
#     - weights: scalars or per-axis pairs, stored as 2-vectors.
#
#   - update(self, dt: float) -> None:
#     - Inputs: dt > 0, the (already time-scaled) step size.
#     - Side Effects: replaces self.velocity and self.position.
#     - Invariants: with identical state and dt the result is identical;
#       there is no randomness in a particle update.
#
#   - radius -> float
#     - Rendering hint derived from the height at the current position,
#       as a percentage of the view box.


class Particle(Entity):
    """
    A particle on a surface, optionally flocking with its neighbours.

    Args:
        position: Initial position (x, y).
        mass (float): Particle mass (> 0).
        velocity: Initial velocity (x, y).
        surface (Surface): The shared surface to descend.
        size_range (float): Spread of the radius hint over the surface height.
        surface_weight, separation_weight, alignment_weight, cohesion_weight:
            Scalar or per-axis weights of each contribution.
    """
    def __init__(
        self,
        position: VectorLike,
        mass: float,
        velocity: VectorLike,
        surface: Surface,
        size_range: float = DEFAULT_SIZE_RANGE,
        surface_weight=DEFAULT_SURFACE_WEIGHT,
        separation_weight=DEFAULT_PARTICLE_RULE_WEIGHT,
        alignment_weight=DEFAULT_PARTICLE_RULE_WEIGHT,
        cohesion_weight=DEFAULT_PARTICLE_RULE_WEIGHT,
    ):
        super().__init__(position, mass, velocity)
        self.surface = surface
        self.size_range = size_range
        self.neighbours: List["Particle"] = []

        self.w_surface = per_axis(surface_weight)
        self.w_separation = per_axis(separation_weight)
        self.w_alignment = per_axis(alignment_weight)
        self.w_cohesion = per_axis(cohesion_weight)

    def update(self, dt: float) -> None:
        surface_delta = vec_prod(self.surface.gradient(self.position), vector(-dt, -dt))
        step = vec_prod(surface_delta, self.w_surface)

        dt_vec = vector(dt, dt)
        for rule, weight in (
            (self.separation, self.w_separation),
            (self.alignment, self.w_alignment),
            (self.cohesion, self.w_cohesion),
        ):
            step = vec_sum(step, vec_prod(vec_prod(rule(self.neighbours), weight), dt_vec))

        self.integrate(step)

    @property
    def height(self) -> float:
        return float(self.surface.height(self.position))

    @property
    def radius(self) -> float:
        return (RADIUS_BASE - self.size_range + self.height * self.size_range) * RADIUS_SCALE
