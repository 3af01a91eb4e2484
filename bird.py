# bird.py
"""
A bird in a flock.

Birds have no surface. Each tick a bird picks its own neighbours for each
rule, steers by separation, alignment and cohesion, is pulled back towards
the origin and gets a little random jitter.
"""
from typing import TYPE_CHECKING, Dict, List

from entity import Entity
from neighbours import select_neighbours
from vectormath import VectorLike, as_vector, vec_prod, vec_sum, vector

if TYPE_CHECKING:
    from flock import Flock

# --- Data Contracts ---
#
# class Bird(Entity):
#   - __init__(self, position, mass, velocity, flock):
#     - mass is the bird's "importance"; flock is a non-owning reference
#       providing the population, the config and the RNG.
#
#   - update(self, dt: float) -> None:
#     - Side Effects: reselects self.neighbours (grouped per rule), draws
#       two jitter samples from flock.rng, replaces velocity and position.
#     - Invariants: never removes itself; the flock sweeps out birds that
#       left the domain after the whole pass.


class Bird(Entity):
    def __init__(self, position: VectorLike, mass: float, velocity: VectorLike, flock: "Flock"):
        super().__init__(position, mass, velocity)
        self.flock = flock
        self.neighbours: Dict[str, List["Bird"]] = {
            "separation": [], "alignment": [], "cohesion": [],
        }

    def find_neighbours(self) -> None:
        config = self.flock.config
        birds = self.flock.birds
        self.neighbours = {
            "separation": select_neighbours(self, birds, config.separation_k),
            "alignment": select_neighbours(self, birds, config.alignment_k),
            "cohesion": select_neighbours(self, birds, config.cohesion_k),
        }

    def update(self, dt: float) -> None:
        config = self.flock.config
        self.find_neighbours()

        jitter = as_vector((self.flock.rng.random(2) - 0.5) * config.jitter * dt)
        dt_vec = vector(dt, dt)

        contributions = (
            (self.separation(self.neighbours["separation"]), config.separation_weight),
            (self.alignment(self.neighbours["alignment"]), config.alignment_weight),
            (self.cohesion(self.neighbours["cohesion"]), config.cohesion_weight),
            (-self.position, config.center_weight),
        )
        step = jitter
        for term, weight in contributions:
            step = vec_sum(step, vec_prod(vec_prod(term, weight), dt_vec))

        self.integrate(step)
