"""
Least-squares fitting of beam reference lines.

least_squares_fit
    Boundary-anchored least-squares control points from a shape-function
    matrix and scattered 3-D samples.
fit_reference_line
    Map locations, build the GLL basis and fit, in one call.
ReferenceLine
    Fitted nodes and control points; evaluates positions and tangents.
solve_dense
    LU solve with partial pivoting, the default dense solver.
"""

from torchbeam.fitting._least_squares_fit import least_squares_fit
from torchbeam.fitting._reference_line import (
    ReferenceLine,
    fit_reference_line,
)
from torchbeam.fitting._solve import solve_dense

__all__ = [
    "ReferenceLine",
    "fit_reference_line",
    "least_squares_fit",
    "solve_dense",
]
