# surface.py
"""
Analytic surfaces the particles roll on.

Each surface is a scalar field over 2-D positions with an exact gradient.
The family is small and fixed: a general quadratic form (and the parabola
used by the momentum demo), the Rosenbrock "banana" valley and the negative
log-likelihood of a centred bivariate normal.
"""
import logging
import math
from typing import Any, Dict, Type

from errors import ConfigurationError, UnimplementedSurfaceError
from vectormath import VectorLike, vector

# --- Data Contracts ---
#
# class Surface:
#   - height(self, x: VectorLike) -> float
#   - gradient(self, x: VectorLike) -> np.ndarray (read-only, shape (2,))
#     - Invariants: gradient is the exact partial derivative of height.
#       Parameters are fixed after construction; a surface is shared by
#       reference between all particles of a session.
#
# make_surface(name: str, **params) -> Surface
#   - Raises ConfigurationError for an unknown name.


class Surface:
    """Base class. Evaluating it directly is a programming error."""

    def __init__(self, name: str):
        self.name = name

    def height(self, x: VectorLike) -> float:
        raise UnimplementedSurfaceError(f"Implement height for {self.name}.")

    def gradient(self, x: VectorLike):
        raise UnimplementedSurfaceError(f"Implement gradient for {self.name}.")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class Quadratic(Surface):
    """a·x² + b·y² + c·xy"""

    def __init__(self, a: float, b: float, c: float, name: str = "Quadratic"):
        super().__init__(name)
        self.a = float(a)
        self.b = float(b)
        self.c = float(c)

    def height(self, x: VectorLike) -> float:
        return self.a * x[0] ** 2 + self.b * x[1] ** 2 + self.c * x[0] * x[1]

    def gradient(self, x: VectorLike):
        return vector(
            2 * self.a * x[0] + self.c * x[1],
            2 * self.b * x[1] + self.c * x[0],
        )


class Parabola(Quadratic):
    """The bowl used by the momentum demo."""

    def __init__(self, a: float = 2, b: float = 2, c: float = 0):
        super().__init__(a, b, c, name="Parabola")


class Rosenbrock(Surface):
    """(a - x)² + b(y - x²)², the banana-shaped valley with its minimum at (a, a²)."""

    def __init__(self, a: float = 1, b: float = 100):
        super().__init__("Banana")
        self.a = float(a)
        self.b = float(b)

    def height(self, x: VectorLike) -> float:
        return (self.a - x[0]) ** 2 + self.b * (x[1] - x[0] ** 2) ** 2

    def gradient(self, x: VectorLike):
        return vector(
            -2 * self.a + 2 * x[0] - 4 * self.b * x[0] * x[1] + 4 * self.b * x[0] ** 3,
            2 * self.b * (x[1] - x[0] ** 2),
        )


class BivariateNormalNegLogLik(Surface):
    """
    Negative log-likelihood of a centred bivariate normal.

    Args:
        sdx (float): Standard deviation along x.
        sdy (float): Standard deviation along y.
        cor (float): Correlation, strictly between -1 and 1.
    """

    def __init__(self, sdx: float = 0.5, sdy: float = 0.5, cor: float = 0):
        super().__init__("Bivariate normal negative log-likelihood")
        if sdx <= 0 or sdy <= 0:
            raise ConfigurationError(
                f"Standard deviations must be positive, got sdx={sdx}, sdy={sdy}."
            )
        if not -1 < cor < 1:
            raise ConfigurationError(f"Correlation must lie in (-1, 1), got {cor}.")
        self.sdx = float(sdx)
        self.sdy = float(sdy)
        self.cor = float(cor)

        # Computed once; height and gradient are called for every particle every tick.
        one_minus_r2 = 1 - self.cor * self.cor
        self.log_norm = math.log(2 * math.pi * self.sdx * self.sdy * math.sqrt(one_minus_r2))
        self.fact = 1 / (2 * one_minus_r2)
        self.sdx2 = self.sdx * self.sdx
        self.sdy2 = self.sdy * self.sdy
        self.sdxy = self.sdx * self.sdy

    def height(self, x: VectorLike) -> float:
        term_a = x[0] * x[0] / self.sdx2
        term_b = 2 * self.cor * x[0] * x[1] / self.sdxy
        term_c = x[1] * x[1] / self.sdy2
        return self.log_norm + self.fact * (term_a - term_b + term_c)

    def gradient(self, x: VectorLike):
        ddx = 2 * x[0] / self.sdx2 - 2 * self.cor * x[1] / self.sdxy
        ddy = 2 * x[1] / self.sdy2 - 2 * self.cor * x[0] / self.sdxy
        return vector(self.fact * ddx, self.fact * ddy)


SURFACES: Dict[str, Type[Surface]] = {
    "quadratic": Quadratic,
    "parabola": Parabola,
    "rosenbrock": Rosenbrock,
    "banana": Rosenbrock,
    "binorm": BivariateNormalNegLogLik,
}


def make_surface(name: str, **params: Any) -> Surface:
    """Builds a surface from its registry name and keyword parameters."""
    try:
        cls = SURFACES[name.lower()]
    except KeyError:
        msg = (
            f"Configuration error: unknown surface '{name}'. "
            f"Expected one of {sorted(SURFACES)}."
        )
        logging.critical(msg)
        raise ConfigurationError(msg) from None
    try:
        surface = cls(**params)
    except TypeError as e:
        msg = f"Configuration error: bad parameters for surface '{name}': {e}"
        logging.critical(msg)
        raise ConfigurationError(msg) from e
    logging.debug(f"Surface created: {surface.name} with parameters {params}.")
    return surface
