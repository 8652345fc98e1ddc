"""
Quadrature rules for integrating beam properties.

A rule is a tensor of shape (n, 2): column 0 holds points in [-1, 1],
column 1 the weights.

trapezoidal_quadrature
    Composite trapezoidal rule at arbitrary sample locations.
gauss_legendre_quadrature
    n-point Gauss-Legendre rule.
integrate
    Apply a rule to sampled values.
"""

from torchbeam.quadrature._gauss_legendre_quadrature import (
    gauss_legendre_quadrature,
)
from torchbeam.quadrature._integrate import integrate
from torchbeam.quadrature._trapezoidal_quadrature import (
    trapezoidal_quadrature,
)

__all__ = [
    "gauss_legendre_quadrature",
    "integrate",
    "trapezoidal_quadrature",
]
