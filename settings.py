# settings.py
"""
Per-session parameters for the particle field and the flock.

A config is an immutable snapshot: to change anything, build a new one and
hand it to the orchestrator's `configure`, which starts a new session.
"""
import logging
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, Optional, Tuple

import numpy as np

from constants import (
    DEFAULT_BIRD_COUNT, DEFAULT_JITTER, DEFAULT_PARTICLE_RULE_WEIGHT,
    DEFAULT_SIZE_RANGE, DEFAULT_SURFACE_WEIGHT, DEFAULT_TIME_SCALE,
    DOMAIN_HALF_EXTENT,
)
from errors import ConfigurationError

Weight = Tuple[float, float]


def _fail(msg: str) -> None:
    logging.critical(msg)
    raise ConfigurationError(msg)


def _check_non_negative(config, *names: str) -> None:
    for name in names:
        value = getattr(config, name)
        if value < 0:
            _fail(f"Configuration error: {name} must be >= 0, got {value}.")


def _check_positive(config, *names: str) -> None:
    for name in names:
        value = getattr(config, name)
        if not value > 0:
            _fail(f"Configuration error: {name} must be > 0, got {value}.")


def _normalise_weights(config, *names: str) -> None:
    # Weights may be given as a scalar or a per-axis pair; store pairs.
    for name in names:
        value = getattr(config, name)
        try:
            if np.ndim(value) == 0:
                pair = (float(value), float(value))
            else:
                pair = tuple(float(v) for v in value)
        except (TypeError, ValueError):
            _fail(f"Configuration error: {name} must be numeric, got {value!r}.")
        if len(pair) != 2:
            _fail(f"Configuration error: {name} needs 2 components, got {len(pair)}.")
        object.__setattr__(config, name, pair)


class _FromDict:
    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        """Builds a config from a dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logging.warning(f"Ignoring unknown {cls.__name__} keys: {unknown}")
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class FieldConfig(_FromDict):
    """Parameters of a particle field (momentum and swarm demos)."""

    seed: Optional[int] = None
    surface: Dict[str, Any] = field(default_factory=lambda: {"name": "parabola", "params": {}})

    # Spawning
    particle_count: int = 10
    position_range: float = 4.0
    velocity_range: float = 0.0
    mass_range: float = 0.0

    # Animation
    time_scale: float = DEFAULT_TIME_SCALE
    size_range: float = DEFAULT_SIZE_RANGE

    # Flocking: 0 neighbours turns it off.
    neighbours: int = 0
    surface_weight: Weight = DEFAULT_SURFACE_WEIGHT
    separation_weight: Weight = DEFAULT_PARTICLE_RULE_WEIGHT
    alignment_weight: Weight = DEFAULT_PARTICLE_RULE_WEIGHT
    cohesion_weight: Weight = DEFAULT_PARTICLE_RULE_WEIGHT

    def __post_init__(self):
        _check_non_negative(
            self, "particle_count", "position_range", "velocity_range",
            "mass_range", "neighbours",
        )
        _check_positive(self, "time_scale")
        if not isinstance(self.surface.get("name"), str):
            _fail(f"Configuration error: surface needs a 'name', got {self.surface!r}.")
        params = self.surface.get("params") or {}
        if not isinstance(params, dict):
            _fail(f"Configuration error: surface params must be a mapping, got {params!r}.")
        object.__setattr__(self, "surface", {**self.surface, "params": params})
        _normalise_weights(
            self, "surface_weight", "separation_weight", "alignment_weight", "cohesion_weight"
        )


@dataclass(frozen=True)
class FlockConfig(_FromDict):
    """Parameters of a flock of birds."""

    seed: Optional[int] = None

    # Spawning
    bird_count: int = DEFAULT_BIRD_COUNT
    position_range: float = 1.5
    velocity_range: float = 0.5
    mass_range: float = 0.0

    # Animation and domain
    time_scale: float = DEFAULT_TIME_SCALE
    half_extent: float = DOMAIN_HALF_EXTENT
    jitter: float = DEFAULT_JITTER

    # Neighbours per rule
    separation_k: int = 3
    alignment_k: int = 5
    cohesion_k: int = 8

    separation_weight: Weight = (1.0, 1.0)
    alignment_weight: Weight = (0.5, 0.5)
    cohesion_weight: Weight = (0.5, 0.5)
    center_weight: Weight = (0.1, 0.1)

    def __post_init__(self):
        _check_non_negative(
            self, "bird_count", "position_range", "velocity_range", "mass_range",
            "jitter", "separation_k", "alignment_k", "cohesion_k",
        )
        _check_positive(self, "time_scale", "half_extent")
        _normalise_weights(
            self, "separation_weight", "alignment_weight", "cohesion_weight", "center_weight"
        )
