"""Gauss-Legendre rule for smooth section properties."""

import math
import warnings
from typing import Optional

import torch
from torch import Tensor

from torchbeam._exceptions import ConvergenceWarning, OrderError
from torchbeam.polynomial._legendre_polynomial import _legendre_recurrence


def gauss_legendre_quadrature(
    n: int,
    *,
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None,
    max_iterations: int = 100,
    tolerance: Optional[float] = None,
) -> Tensor:
    """
    Gauss-Legendre rule with ``n`` points on [-1, 1].

    Parameters
    ----------
    n : int
        Number of points, ``n >= 1``.
    dtype : torch.dtype
        Data type of the rule.
    device : torch.device, optional
        Device of the rule.
    max_iterations : int
        Newton iteration limit.
    tolerance : float, optional
        Newton step size at which the roots count as converged. Defaults
        to ten machine epsilons of ``dtype``.

    Returns
    -------
    Tensor
        Rule of shape (n, 2) laid out like
        :func:`trapezoidal_quadrature`: ascending points in column 0,
        weights in column 1.

    Raises
    ------
    OrderError
        If ``n < 1``.

    Notes
    -----
    The points are the roots of P_n, found by Newton's method from the
    asymptotic guesses -cos(pi (i + 3/4) / (n + 1/2)). The weights are

        w_i = 2 / ((1 - x_i^2) P'_n(x_i)^2)

    The rule integrates polynomials up to degree 2n - 1 exactly, which
    suits section properties given as smooth functions of position.

    Examples
    --------
    >>> gauss_legendre_quadrature(2)
    tensor([[-0.5774,  1.0000],
            [ 0.5774,  1.0000]], dtype=torch.float64)
    """
    if n < 1:
        raise OrderError(f"n must be at least 1, got {n}")

    if tolerance is None:
        tolerance = 10 * torch.finfo(dtype).eps

    i = torch.arange(n, dtype=dtype, device=device)
    x = -torch.cos(math.pi * (i + 0.75) / (n + 0.5))

    for _ in range(max_iterations):
        p, p_prev = _legendre_recurrence(n, x)
        dp = n * (x * p - p_prev) / (x**2 - 1)

        delta = p / dp
        x = x - delta

        if torch.max(torch.abs(delta)) <= tolerance:
            break
    else:
        warnings.warn(
            f"Gauss-Legendre points for n={n} did not converge in "
            f"{max_iterations} iterations",
            ConvergenceWarning,
        )

    p, p_prev = _legendre_recurrence(n, x)
    dp = n * (x * p - p_prev) / (x**2 - 1)

    weights = 2 / ((1 - x**2) * dp**2)

    return torch.stack([x, weights], dim=-1)
