# simulation.py
"""
Drives a field of particles on a shared surface.

This module defines the Field class, which owns the particle collection for
one session and advances it one tick at a time. With `neighbours` set in the
config the particles also flock (the swarm demo); otherwise each one simply
rolls down the surface (the momentum demo).
"""
import logging
from typing import Callable, List, Optional, Tuple

import numpy as np

from errors import ConfigurationError
from neighbours import select_neighbours
from particle import Particle
from settings import FieldConfig
from surface import make_surface

# --- Data Contracts ---
#
# class Field:
#   - __init__(self, config: Optional[FieldConfig] = None):
#     - Side Effects: builds the surface, seeds the RNG, starts empty.
#
#   - spawn(self, n=None, prange=None, vrange=None, mrange=None) -> None:
#     - Side Effects: replaces the collection with n new particles. Missing
#       arguments come from the config.
#
#   - spawn_one(self, prange=None, vrange=None, mrange=None) -> Particle:
#     - Side Effects: appends one particle to the collection.
#
#   - tick(self, dt: float) -> None:
#     - Side Effects: updates every particle in collection order with
#       dt * time_scale, then calls observers with the field.
#     - Invariants: particle count is unchanged. A particle updated later
#       in the pass sees its neighbours' state from earlier in the same pass.

Observer = Callable[["Field"], None]


class Field:
    """
    A collection of particles sharing one surface.
    """
    def __init__(self, config: Optional[FieldConfig] = None):
        self.particles: List[Particle] = []
        self._observers: List[Observer] = []
        self.configure(config or FieldConfig())

    def configure(self, config: FieldConfig) -> None:
        """Starts a new session with `config`, discarding all particles."""
        self.config = config
        self.surface = make_surface(config.surface["name"], **(config.surface.get("params") or {}))
        # All randomness in a session comes from this generator.
        self.rng = np.random.default_rng(config.seed)
        self.particles = []
        logging.info(
            f"Field configured: surface {self.surface.name}, "
            f"flocking {'on with k=' + str(config.neighbours) if config.neighbours else 'off'}."
        )

    def _sample(self, prange: float, vrange: float, mrange: float) -> Tuple[np.ndarray, np.ndarray, float]:
        position = (self.rng.random(2) - 0.5) * prange
        velocity = (self.rng.random(2) - 0.5) * vrange * self.config.time_scale
        mass = 1 + self.rng.random() * mrange
        return position, velocity, mass

    def _make_particle(self, prange, vrange, mrange) -> Particle:
        config = self.config
        position, velocity, mass = self._sample(
            config.position_range if prange is None else prange,
            config.velocity_range if vrange is None else vrange,
            config.mass_range if mrange is None else mrange,
        )
        return Particle(
            position, mass, velocity, self.surface,
            size_range=config.size_range,
            surface_weight=config.surface_weight,
            separation_weight=config.separation_weight,
            alignment_weight=config.alignment_weight,
            cohesion_weight=config.cohesion_weight,
        )

    def spawn(
        self,
        n: Optional[int] = None,
        prange: Optional[float] = None,
        vrange: Optional[float] = None,
        mrange: Optional[float] = None,
    ) -> None:
        """Replaces the current particles with `n` freshly sampled ones."""
        n = self.config.particle_count if n is None else n
        if n < 0:
            msg = f"Configuration error: cannot spawn {n} particles."
            logging.critical(msg)
            raise ConfigurationError(msg)
        self.particles = [self._make_particle(prange, vrange, mrange) for _ in range(n)]
        logging.info(f"Spawned {n} particles on {self.surface.name}.")

    def spawn_one(
        self,
        prange: Optional[float] = None,
        vrange: Optional[float] = None,
        mrange: Optional[float] = None,
    ) -> Particle:
        particle = self._make_particle(prange, vrange, mrange)
        self.particles.append(particle)
        logging.debug(f"Added particle at {particle.position.tolist()}; {len(self.particles)} total.")
        return particle

    def tick(self, dt: float) -> None:
        """
        Executes one time step for every particle.
        """
        scaled_dt = dt * self.config.time_scale
        k = self.config.neighbours
        for particle in self.particles:
            if k:
                particle.neighbours = select_neighbours(particle, self.particles, k)
            particle.update(scaled_dt)
        for observer in self._observers:
            observer(self)

    def subscribe(self, observer: Observer) -> None:
        """Registers a callback invoked with the field after every tick."""
        self._observers.append(observer)

    def positions(self) -> np.ndarray:
        """Positions as an (N, 2) array, for renderers."""
        return np.array([p.position for p in self.particles], dtype=np.float64).reshape(-1, 2)

    def velocities(self) -> np.ndarray:
        return np.array([p.velocity for p in self.particles], dtype=np.float64).reshape(-1, 2)

    def radii(self) -> np.ndarray:
        """Radius hints (percent of the view box) as an (N,) array."""
        return np.array([p.radius for p in self.particles], dtype=np.float64)
