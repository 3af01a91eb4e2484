# flock.py
"""
Drives a flock of birds inside a square domain.

Birds that fly out of the domain are dropped after the tick in which they
left; there is no wrap-around and no bounce.
"""
import logging
from typing import Callable, List, Optional

import numpy as np

from bird import Bird
from errors import ConfigurationError
from settings import FlockConfig

# --- Data Contracts ---
#
# class Flock:
#   - spawn(self, n=None, prange=None, vrange=None, mrange=None) -> None:
#     - Side Effects: replaces self.birds with n new birds.
#
#   - tick(self, dt: float) -> int:
#     - Side Effects: updates every bird with dt * time_scale, in order,
#       then removes birds outside [-half_extent, half_extent]^2.
#     - Outputs: number of birds removed.
#     - Invariants: removal happens after the full pass, never during it.

Observer = Callable[["Flock"], None]


class Flock:
    """
    The population of birds plus the parameters they all share.
    """
    def __init__(self, config: Optional[FlockConfig] = None):
        self.birds: List[Bird] = []
        self._observers: List[Observer] = []
        self.configure(config or FlockConfig())

    def configure(self, config: FlockConfig) -> None:
        """Starts a new session with `config`, discarding all birds."""
        self.config = config
        self.rng = np.random.default_rng(config.seed)
        self.birds = []
        logging.info(
            f"Flock configured: k = {config.separation_k}/{config.alignment_k}/"
            f"{config.cohesion_k} (separation/alignment/cohesion), "
            f"domain +/-{config.half_extent}."
        )

    def spawn(
        self,
        n: Optional[int] = None,
        prange: Optional[float] = None,
        vrange: Optional[float] = None,
        mrange: Optional[float] = None,
    ) -> None:
        """Replaces the current birds with `n` freshly sampled ones."""
        config = self.config
        n = config.bird_count if n is None else n
        prange = config.position_range if prange is None else prange
        vrange = config.velocity_range if vrange is None else vrange
        mrange = config.mass_range if mrange is None else mrange
        if n < 0:
            msg = f"Configuration error: cannot spawn {n} birds."
            logging.critical(msg)
            raise ConfigurationError(msg)

        birds = []
        for _ in range(n):
            position = (self.rng.random(2) - 0.5) * prange
            velocity = (self.rng.random(2) - 0.5) * vrange * config.time_scale
            importance = 1 + self.rng.random() * mrange
            birds.append(Bird(position, importance, velocity, self))
        self.birds = birds
        logging.info(f"Spawned {n} birds.")

    def in_domain(self, bird: Bird) -> bool:
        half = self.config.half_extent
        x, y = bird.position
        return -half <= x <= half and -half <= y <= half

    def tick(self, dt: float) -> int:
        """
        Executes one time step and sweeps out birds that left the domain.
        """
        scaled_dt = dt * self.config.time_scale
        for bird in self.birds:
            bird.update(scaled_dt)

        before = len(self.birds)
        self.birds = [b for b in self.birds if self.in_domain(b)]
        removed = before - len(self.birds)
        if removed:
            logging.debug(f"{removed} birds left the domain; {len(self.birds)} remain.")

        for observer in self._observers:
            observer(self)
        return removed

    def subscribe(self, observer: Observer) -> None:
        """Registers a callback invoked with the flock after every tick."""
        self._observers.append(observer)

    def positions(self) -> np.ndarray:
        """Positions as an (N, 2) array, for renderers."""
        return np.array([b.position for b in self.birds], dtype=np.float64).reshape(-1, 2)

    def velocities(self) -> np.ndarray:
        return np.array([b.velocity for b in self.birds], dtype=np.float64).reshape(-1, 2)
