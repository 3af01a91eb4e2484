# entity.py
"""
Base class for everything that moves in the demos.

An entity is plain state (position, velocity, mass) plus the flocking rules
and the semi-implicit Euler step shared by particles and birds. It holds no
rendering handle: a renderer reads `position` after each tick.
"""
import logging
import math
from typing import List, Sequence

import numpy as np

from errors import ConfigurationError
from vectormath import VectorLike, as_vector, vec_diff, vec_div, vec_prod, vec_sum, vector, zeros

# --- Data Contracts ---
#
# class Entity:
#   - __init__(self, position, mass: float, velocity):
#     - Inputs: position and velocity are 2-component vectors; mass > 0.
#     - Raises: ConfigurationError for a non-positive or non-finite mass.
#     - Invariants: self.mass is [m, m] so it divides 2-vectors elementwise.
#
#   - integrate(self, step) -> None:
#     - Side Effects: velocity <- (velocity * mass + step) / mass,
#       then position <- position + velocity.
#
#   - separation / alignment / cohesion(self, neighbours) -> np.ndarray
#     - Outputs: the rule's vector, or the zero vector for no neighbours.


class Entity:
    """
    Position, velocity and mass of one moving thing.

    Args:
        position: Initial position (x, y).
        mass (float): Mass, or "importance" for birds. Must be positive.
        velocity: Initial velocity (x, y).
    """
    def __init__(self, position: VectorLike, mass: float, velocity: VectorLike):
        if not (mass > 0 and math.isfinite(mass)):
            msg = f"Configuration error: mass must be positive and finite, got {mass}."
            logging.critical(msg)
            raise ConfigurationError(msg)
        self.position = as_vector(position)
        self.velocity = as_vector(velocity)
        self.mass = vector(mass, mass)

    def integrate(self, step: VectorLike) -> None:
        """Semi-implicit Euler: velocity first, then position from the new velocity."""
        self.velocity = vec_div(vec_sum(vec_prod(self.velocity, self.mass), step), self.mass)
        self.position = vec_sum(self.position, self.velocity)

    def separation(self, neighbours: Sequence["Entity"]):
        """Mean offset from each neighbour to this entity."""
        if not neighbours:
            return zeros()
        offsets = [vec_diff(self.position, n.position) for n in neighbours]
        return _mean(offsets)

    def alignment(self, neighbours: Sequence["Entity"]):
        """Mean neighbour velocity."""
        if not neighbours:
            return zeros()
        return _mean([n.velocity for n in neighbours])

    def cohesion(self, neighbours: Sequence["Entity"]):
        """Vector from this entity to the centre of its neighbours."""
        if not neighbours:
            return zeros()
        return vec_diff(_mean([n.position for n in neighbours]), self.position)

    @property
    def speed(self) -> float:
        return float(np.hypot(*self.velocity))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(position={self.position.tolist()}, "
            f"velocity={self.velocity.tolist()}, mass={float(self.mass[0])})"
        )


def _mean(vectors: List[np.ndarray]):
    return as_vector(np.mean(vectors, axis=0))
