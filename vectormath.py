# vectormath.py
"""
Small vector and matrix helpers shared by every other module.

Vectors are float64 NumPy arrays flagged read-only, so a vector handed to an
entity can never be changed in place behind its back. Every function returns
a new array.
"""
import numpy as np
from typing import Sequence, Union

# --- Data Contracts ---
#
# vector(*components) -> np.ndarray
#   - Outputs: 1-D float64 array, read-only.
#
# vec_sum / vec_diff / vec_prod / vec_div(a, b) -> np.ndarray
#   - Inputs: two 1-D sequences of equal length.
#   - Outputs: new read-only 1-D float64 array of the same length.
#   - Invariants: lengths must match (ValueError otherwise). Division by a
#     zero component yields inf/nan rather than raising.
#
# dot(a, b) -> float
# transpose(m) -> np.ndarray, mat_multiply(a, b) -> np.ndarray
#   - Inputs: rectangular 2-D arrays with compatible shapes.

VectorLike = Union[np.ndarray, Sequence[float]]


def _freeze(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


def as_vector(value: VectorLike) -> np.ndarray:
    """Returns `value` as a read-only 1-D float64 array (copying if needed)."""
    array = np.array(value, dtype=np.float64)
    if array.ndim != 1:
        raise ValueError(f"Expected a 1-D vector, got shape {array.shape}.")
    return _freeze(array)


def vector(*components: float) -> np.ndarray:
    """Builds a vector from its components, e.g. ``vector(1.0, 0.0)``."""
    return as_vector(components)


def zeros(n: int = 2) -> np.ndarray:
    return _freeze(np.zeros(n, dtype=np.float64))


def per_axis(value: Union[float, VectorLike], n: int = 2) -> np.ndarray:
    """Replicates a scalar across `n` axes; vectors pass through unchanged."""
    if np.ndim(value) == 0:
        return _freeze(np.full(n, value, dtype=np.float64))
    vec = as_vector(value)
    if vec.shape != (n,):
        raise ValueError(f"Expected {n} components, got {vec.shape[0]}.")
    return vec


def _pair(a: VectorLike, b: VectorLike):
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    if a.shape != b.shape or a.ndim != 1:
        raise ValueError(f"Vector shapes {a.shape} and {b.shape} do not match.")
    return a, b


def vec_sum(a: VectorLike, b: VectorLike) -> np.ndarray:
    a, b = _pair(a, b)
    return _freeze(a + b)


def vec_diff(a: VectorLike, b: VectorLike) -> np.ndarray:
    a, b = _pair(a, b)
    return _freeze(a - b)


def vec_prod(a: VectorLike, b: VectorLike) -> np.ndarray:
    """Elementwise product."""
    a, b = _pair(a, b)
    return _freeze(a * b)


def vec_div(a: VectorLike, b: VectorLike) -> np.ndarray:
    """Elementwise division. A zero in `b` gives inf or nan, not an error."""
    a, b = _pair(a, b)
    with np.errstate(divide='ignore', invalid='ignore'):
        return _freeze(a / b)


def dot(a: VectorLike, b: VectorLike) -> float:
    a, b = _pair(a, b)
    return float(np.dot(a, b))


def transpose(m) -> np.ndarray:
    m = np.asarray(m, dtype=np.float64)
    if m.ndim != 2:
        raise ValueError(f"Expected a 2-D array, got shape {m.shape}.")
    return _freeze(m.T.copy())


def mat_multiply(a, b) -> np.ndarray:
    """Matrix product of two rectangular arrays (rows of `a` dot columns of `b`)."""
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    if a.ndim != 2 or b.ndim != 2 or a.shape[1] != b.shape[0]:
        raise ValueError(f"Cannot multiply arrays of shape {a.shape} and {b.shape}.")
    return _freeze(a @ b)
