"""Gauss-Lobatto-Legendre collocation points."""

import math
import warnings
from typing import Optional

import torch
from torch import Tensor

from torchbeam._exceptions import ConvergenceWarning, OrderError
from torchbeam.polynomial._legendre_polynomial import _legendre_recurrence


def legendre_gauss_lobatto_points(
    order: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
    max_iterations: int = 100,
    tolerance: Optional[float] = None,
) -> Tensor:
    """Compute Gauss-Lobatto-Legendre (GLL) points.

    Returns order + 1 points: the endpoints -1 and 1 together with the
    order - 1 roots of P'_order(x).

    Parameters
    ----------
    order : int
        Polynomial order of the interpolant, ``order >= 1``. A basis of
        ``p`` nodes uses ``order = p - 1``.
    dtype : torch.dtype, optional
        Data type. Defaults to float64.
    device : torch.device, optional
        Device for the output tensor.
    max_iterations : int, optional
        Maximum number of Newton iterations. Default 100.
    tolerance : float, optional
        Newton step size at which iteration stops. Defaults to ten times
        the machine epsilon of ``dtype``.

    Returns
    -------
    Tensor
        GLL points in ascending order from -1 to 1. Shape: (order + 1,).

    Raises
    ------
    OrderError
        If ``order < 1``.

    Warns
    -----
    ConvergenceWarning
        If Newton iteration does not reach ``tolerance``.

    Notes
    -----
    The interior points are found by Newton iteration on P'_order,
    starting from the Chebyshev-Gauss-Lobatto points. The second
    derivative follows from Legendre's differential equation:

        P''_k(x) = (2 x P'_k(x) - k (k + 1) P_k(x)) / (1 - x^2)

    Examples
    --------
    >>> legendre_gauss_lobatto_points(2)
    tensor([-1.,  0.,  1.], dtype=torch.float64)
    """
    if order < 1:
        raise OrderError(
            f"order must be at least 1 (two or more nodes), got {order}"
        )

    if max_iterations < 1:
        raise ValueError(
            f"max_iterations must be at least 1, got {max_iterations}"
        )

    if dtype is None:
        dtype = torch.float64

    if tolerance is None:
        tolerance = 10 * torch.finfo(dtype).eps

    j = torch.arange(order + 1, dtype=dtype, device=device)
    x = -torch.cos(math.pi * j / order)
    x[0] = -1.0
    x[order] = 1.0

    if order == 1:
        return x

    interior = x[1:-1]

    for _ in range(max_iterations):
        p, p_prev = _legendre_recurrence(order, interior)

        dp = order * (interior * p - p_prev) / (interior**2 - 1)
        ddp = (2 * interior * dp - order * (order + 1) * p) / (
            1 - interior**2
        )

        delta = dp / ddp
        interior = interior - delta

        if torch.max(torch.abs(delta)) <= tolerance:
            break
    else:
        warnings.warn(
            f"Gauss-Lobatto-Legendre points of order {order} did not "
            f"converge in {max_iterations} iterations. Last step: "
            f"{torch.max(torch.abs(delta)).item():.2e}",
            ConvergenceWarning,
        )

    x = torch.cat([x[:1], interior, x[-1:]])

    return torch.sort(x).values
