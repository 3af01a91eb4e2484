# neighbours.py
"""
k-nearest neighbour selection for the flocking rules.

Candidates are ranked by the dot product of their position with the
entity's position. This is not a distance: it favours candidates lying in
the opposite direction from the origin. The demos have always behaved this
way, so it is the default metric; pass `metric` to rank by something else.
"""
import logging
from typing import Callable, List, Optional, Sequence, TypeVar

import numpy as np
from numba import jit

from errors import ConfigurationError

# --- Data Contracts ---
#
# select_neighbours(entity, candidates, k, metric=None) -> list
#   - Inputs:
#     - entity: anything with a `position` attribute.
#     - candidates: the population; may contain `entity` itself.
#     - k: int >= 0, number of neighbours wanted.
#     - metric: optional callable (origin, position) -> float.
#   - Outputs: at most min(k, len(candidates without entity)) candidates,
#     ordered by metric ascending. Ties keep collection order.
#   - Raises: ConfigurationError if k < 0.

T = TypeVar("T")


@jit(nopython=True)
def _rank_by_dot_numba(origin, positions):
    """
    Numba-jitted ranking of `positions` by their dot product with `origin`.

    Returns the indices in ascending metric order. Mergesort keeps the sort
    stable so equal metrics stay in collection order.
    """
    count = positions.shape[0]
    dims = positions.shape[1]
    metric = np.empty(count, dtype=np.float64)
    for i in range(count):
        total = 0.0
        for d in range(dims):
            total += origin[d] * positions[i, d]
        metric[i] = total
    return np.argsort(metric, kind='mergesort')


def select_neighbours(
    entity,
    candidates: Sequence[T],
    k: int,
    metric: Optional[Callable[[np.ndarray, np.ndarray], float]] = None,
) -> List[T]:
    """Returns the k candidates ranking lowest by `metric` relative to `entity`."""
    if k < 0:
        msg = f"Configuration error: neighbour count must be >= 0, got {k}."
        logging.critical(msg)
        raise ConfigurationError(msg)

    others = [c for c in candidates if c is not entity]
    if k == 0 or not others:
        return []

    if metric is None:
        positions = np.array([c.position for c in others], dtype=np.float64)
        origin = np.array(entity.position, dtype=np.float64)
        order = _rank_by_dot_numba(origin, positions)
    else:
        # sorted() is stable, matching the mergesort used above.
        order = sorted(range(len(others)), key=lambda i: metric(entity.position, others[i].position))

    return [others[i] for i in order[:k]]
