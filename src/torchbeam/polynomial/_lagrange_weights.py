"""Lagrange interpolation and derivative weights on arbitrary nodes."""

from typing import Optional, Sequence, Tuple, Union

import torch
from torch import Tensor

from torchbeam._as_tensor import as_vector
from torchbeam._exceptions import DomainError


def _as_nodes(
    nodes: Union[Tensor, Sequence[float]],
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor, Tensor]:
    """Return (nodes, separation, off_diagonal) for a distinct node set.

    ``separation[k, j] = x_k - x_j`` with ones on the diagonal.
    """
    nodes = as_vector(nodes, "nodes", dtype=dtype, device=device)
    p = nodes.shape[0]

    off_diagonal = ~torch.eye(p, dtype=torch.bool, device=nodes.device)
    separation = nodes.unsqueeze(1) - nodes.unsqueeze(0)

    if (separation[off_diagonal] == 0).any():
        raise DomainError(f"nodes must be distinct, got {nodes.tolist()}")

    separation = torch.where(
        off_diagonal, separation, torch.ones_like(separation)
    )

    return nodes, separation, off_diagonal


def lagrange_differentiation_matrix(
    nodes: Union[Tensor, Sequence[float]],
) -> Tensor:
    """Compute the Lagrange differentiation matrix for arbitrary nodes.

    Given p distinct nodes, returns the p x p matrix D with
    D[i, k] = L'_k(x_i), so that (D f)_i is the derivative at x_i of the
    interpolant through the values f.

    Parameters
    ----------
    nodes : Tensor or sequence of float
        Interpolation nodes. Shape: (p,).

    Returns
    -------
    Tensor
        Differentiation matrix D. Shape: (p, p).

    Raises
    ------
    DomainError
        If the nodes are not distinct.

    Notes
    -----
    With barycentric weights w_k = 1 / prod_{j != k} (x_k - x_j),

        D[i, k] = (w_k / w_i) / (x_i - x_k),   i != k
        D[i, i] = -sum_{k != i} D[i, k]

    The diagonal is taken from the negative row sum, so every row sums
    to zero up to rounding.
    """
    nodes, separation, off_diagonal = _as_nodes(nodes)

    # 1 / w_k = prod_{j != k} (x_k - x_j)
    scale = separation.prod(dim=1)

    D = (scale.unsqueeze(1) / scale.unsqueeze(0)) / separation
    D = torch.where(off_diagonal, D, torch.zeros_like(D))

    D.diagonal().copy_(-D.sum(dim=1))

    return D


def _lagrange_weights(
    points: Tensor,
    nodes: Tensor,
    separation: Tensor,
    off_diagonal: Tensor,
) -> Tuple[Tensor, Tensor]:
    """Interpolation and derivative weights, each of shape (p, n)."""
    # distance[q, j] = x_q - x_j
    distance = points.unsqueeze(1) - nodes.unsqueeze(0)

    # ratio[q, k, j] = (x_q - x_j) / (x_k - x_j), j != k
    ratio = distance.unsqueeze(1) / separation.unsqueeze(0)
    ratio = torch.where(off_diagonal, ratio, torch.ones_like(ratio))
    phi = ratio.prod(dim=-1)

    # L'_k(x) = sum_{m != k} 1 / (x_k - x_m) prod_{j != k, m} ratio[k, j]
    inverse_separation = torch.where(
        off_diagonal, 1 / separation, torch.zeros_like(separation)
    )

    dphi = torch.zeros_like(phi)
    for m in range(nodes.shape[0]):
        column = torch.tensor([m], device=ratio.device)
        leave_out = ratio.index_fill(-1, column, 1.0)
        dphi = dphi + inverse_separation[:, m] * leave_out.prod(dim=-1)

    # the weight of the nearest node is the negative sum of the others
    nearest = distance.abs().argmin(dim=1, keepdim=True)
    dphi = dphi.scatter(1, nearest, 0.0)
    dphi = dphi.scatter(1, nearest, -dphi.sum(dim=1, keepdim=True))

    return phi.T, dphi.T


def _evaluate(
    x: Union[Tensor, float, Sequence[float]],
    nodes: Union[Tensor, Sequence[float]],
    derivative: bool,
) -> Tensor:
    nodes, separation, off_diagonal = _as_nodes(nodes)

    points = torch.as_tensor(x, dtype=nodes.dtype, device=nodes.device)
    scalar = points.dim() == 0

    phi, dphi = _lagrange_weights(
        points.reshape(-1), nodes, separation, off_diagonal
    )
    weights = dphi if derivative else phi

    if scalar:
        return weights[:, 0]

    return weights


def lagrange_interpolation_weights(
    x: Union[Tensor, float, Sequence[float]],
    nodes: Union[Tensor, Sequence[float]],
) -> Tensor:
    """
    Evaluate the Lagrange basis of ``nodes`` at ``x``.

    Parameters
    ----------
    x : Tensor, float or sequence of float
        Evaluation point, or a 1-D set of n evaluation points.
    nodes : Tensor or sequence of float
        Distinct interpolation nodes, shape (p,).

    Returns
    -------
    Tensor
        Weights L_k(x), shape (p,) for a scalar ``x`` or (p, n) for a set
        of points (column m holds the weights at ``x[m]``).

    Raises
    ------
    ShapeError
        If ``nodes`` is empty.
    DomainError
        If the nodes are not distinct.

    Notes
    -----
    L_k(x) = prod_{j != k} (x - x_j) / (x_k - x_j)

    The weights sum to one. When ``x`` equals node i the result is the
    unit vector e_i exactly, since every factor of L_i is then 1 and every
    other basis function carries the factor (x - x_i) = 0.

    Examples
    --------
    >>> lagrange_interpolation_weights(0.0, [-1.0, 1.0])
    tensor([0.5000, 0.5000], dtype=torch.float64)
    """
    return _evaluate(x, nodes, derivative=False)


def lagrange_derivative_weights(
    x: Union[Tensor, float, Sequence[float]],
    nodes: Union[Tensor, Sequence[float]],
) -> Tensor:
    """
    Evaluate the derivative of the Lagrange basis of ``nodes`` at ``x``.

    Parameters
    ----------
    x : Tensor, float or sequence of float
        Evaluation point, or a 1-D set of n evaluation points.
    nodes : Tensor or sequence of float
        Distinct interpolation nodes, shape (p,).

    Returns
    -------
    Tensor
        Weights L'_k(x), shape (p,) for a scalar ``x`` or (p, n).

    Notes
    -----
    Uses the sum-of-products form

        L'_k(x) = sum_{m != k} 1 / (x_k - x_m)
                   * prod_{j != k, m} (x - x_j) / (x_k - x_j)

    which divides only by node separations, never by the distance from
    ``x`` to a node, so it holds unchanged on and arbitrarily close to the
    nodes. On node x_i it reproduces row i of
    :func:`lagrange_differentiation_matrix`. The weight of the node nearest
    ``x`` is then replaced by the negative sum of the others, so the
    weights sum to zero up to a single rounding of that sum.

    Examples
    --------
    >>> lagrange_derivative_weights(0.0, [-1.0, 1.0])
    tensor([-0.5000,  0.5000], dtype=torch.float64)
    """
    return _evaluate(x, nodes, derivative=True)
