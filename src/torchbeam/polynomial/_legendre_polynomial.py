"""Legendre polynomials evaluated by three-term recurrence."""

from typing import Tuple

import torch
from torch import Tensor

from torchbeam._exceptions import OrderError


def _legendre_recurrence(order: int, x: Tensor) -> Tuple[Tensor, Tensor]:
    """Return (P_order(x), P_{order-1}(x)), with P_{-1} = 0."""
    p_prev = torch.zeros_like(x)
    p_curr = torch.ones_like(x)

    for k in range(1, order + 1):
        p_next = ((2 * k - 1) * x * p_curr - (k - 1) * p_prev) / k
        p_prev = p_curr
        p_curr = p_next

    return p_curr, p_prev


def legendre_polynomial(order: int, x: Tensor) -> Tensor:
    """
    Evaluate the Legendre polynomial P_order at ``x``.

    Parameters
    ----------
    order : int
        Polynomial degree, ``order >= 0``.
    x : Tensor
        Evaluation points, any shape.

    Returns
    -------
    Tensor
        P_order(x), same shape as ``x``.

    Notes
    -----
    Uses Bonnet's recurrence

        k P_k(x) = (2k - 1) x P_{k-1}(x) - (k - 1) P_{k-2}(x)
    """
    if order < 0:
        raise OrderError(f"order must be non-negative, got {order}")

    p, _ = _legendre_recurrence(order, x)
    return p


def legendre_polynomial_derivative(order: int, x: Tensor) -> Tensor:
    """
    Evaluate the derivative P'_order at ``x``.

    Parameters
    ----------
    order : int
        Polynomial degree, ``order >= 0``.
    x : Tensor
        Evaluation points in [-1, 1], any shape.

    Returns
    -------
    Tensor
        P'_order(x), same shape as ``x``.

    Notes
    -----
    Away from the endpoints,

        P'_k(x) = k (x P_k(x) - P_{k-1}(x)) / (x^2 - 1)

    and at x = +/-1 the closed form P'_k(+/-1) = (+/-1)^(k-1) k (k+1) / 2
    is used.
    """
    if order < 0:
        raise OrderError(f"order must be non-negative, got {order}")

    if order == 0:
        return torch.zeros_like(x)

    p, p_prev = _legendre_recurrence(order, x)

    endpoint = torch.abs(x) == 1
    denominator = torch.where(endpoint, torch.ones_like(x), x**2 - 1)
    interior = order * (x * p - p_prev) / denominator

    boundary = torch.sign(x) ** (order - 1) * (order * (order + 1) / 2)

    return torch.where(endpoint, boundary, interior)
