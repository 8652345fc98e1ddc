"""
Polynomial bases for spectral beam elements.

Legendre polynomials
--------------------
legendre_polynomial
    P_k(x) by three-term recurrence.
legendre_polynomial_derivative
    P'_k(x).
legendre_gauss_lobatto_points
    Gauss-Lobatto-Legendre nodes: -1, the roots of P'_k, and 1.

Lagrange bases
--------------
lagrange_interpolation_weights
    L_k(x) on an arbitrary node set.
lagrange_derivative_weights
    L'_k(x) on an arbitrary node set.
lagrange_differentiation_matrix
    D[i, k] = L'_k(x_i).

Shape functions
---------------
shape_function_matrices
    GLL basis of p nodes evaluated at n sample points.
transfer_shape_function_matrices
    Basis on one point set evaluated at another.
"""

from torchbeam.polynomial._lagrange_weights import (
    lagrange_derivative_weights,
    lagrange_differentiation_matrix,
    lagrange_interpolation_weights,
)
from torchbeam.polynomial._legendre_gauss_lobatto_points import (
    legendre_gauss_lobatto_points,
)
from torchbeam.polynomial._legendre_polynomial import (
    legendre_polynomial,
    legendre_polynomial_derivative,
)
from torchbeam.polynomial._shape_function_matrices import (
    shape_function_matrices,
    transfer_shape_function_matrices,
)

__all__ = [
    # Legendre
    "legendre_gauss_lobatto_points",
    "legendre_polynomial",
    "legendre_polynomial_derivative",
    # Lagrange
    "lagrange_derivative_weights",
    "lagrange_differentiation_matrix",
    "lagrange_interpolation_weights",
    # Shape functions
    "shape_function_matrices",
    "transfer_shape_function_matrices",
]
