"""Shape-function and derivative matrices relating two point sets."""

from typing import Optional, Sequence, Tuple, Union

import torch
from torch import Tensor

from torchbeam._as_tensor import as_vector
from torchbeam._exceptions import OrderError, ShapeError
from torchbeam.polynomial._lagrange_weights import (
    _as_nodes,
    _lagrange_weights,
)
from torchbeam.polynomial._legendre_gauss_lobatto_points import (
    legendre_gauss_lobatto_points,
)


def _shape_function_matrices(
    evaluation_points: Tensor,
    nodes: Tensor,
) -> Tuple[Tensor, Tensor]:
    nodes, separation, off_diagonal = _as_nodes(nodes)

    return _lagrange_weights(
        evaluation_points.to(dtype=nodes.dtype, device=nodes.device),
        nodes,
        separation,
        off_diagonal,
    )


def shape_function_matrices(
    n: int,
    p: int,
    evaluation_points: Union[Tensor, Sequence[float]],
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Evaluate the GLL Lagrange basis of ``p`` nodes at ``n`` points.

    Parameters
    ----------
    n : int
        Number of evaluation (sample) points.
    p : int
        Number of nodes; the basis has polynomial order p - 1.
        Requires ``2 <= p <= n``.
    evaluation_points : Tensor or sequence of float
        Points in [-1, 1], shape (n,).
    dtype : torch.dtype, optional
        Data type. Defaults to the points' floating dtype or float64.
    device : torch.device, optional
        Device for the output tensors.

    Returns
    -------
    phi : Tensor
        Shape-function matrix, shape (p, n). ``phi[k, j]`` is the k-th
        basis function at ``evaluation_points[j]``.
    dphi : Tensor
        Derivative matrix, shape (p, n).
    nodes : Tensor
        Gauss-Lobatto-Legendre nodes of order p - 1, shape (p,).

    Raises
    ------
    OrderError
        If ``p < 2`` or ``p > n``.
    ShapeError
        If ``evaluation_points`` does not hold ``n`` points.

    Examples
    --------
    >>> phi, dphi, nodes = shape_function_matrices(3, 2, [-1.0, 0.0, 1.0])
    >>> phi
    tensor([[1.0000, 0.5000, 0.0000],
            [0.0000, 0.5000, 1.0000]], dtype=torch.float64)
    """
    if p < 2 or p > n:
        raise OrderError(
            f"number of nodes p must satisfy 2 <= p <= n, got p={p}, n={n}"
        )

    points = as_vector(
        evaluation_points, "evaluation_points", dtype=dtype, device=device
    )
    if points.shape[0] != n:
        raise ShapeError(
            f"expected {n} evaluation points, got {points.shape[0]}"
        )

    nodes = legendre_gauss_lobatto_points(
        p - 1, dtype=points.dtype, device=points.device
    )

    phi, dphi = _shape_function_matrices(points, nodes)

    return phi, dphi, nodes


def transfer_shape_function_matrices(
    input_points: Union[Tensor, Sequence[float]],
    output_points: Union[Tensor, Sequence[float]],
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor]:
    """
    Shape-function matrices relating two arbitrary point sets.

    The basis is the Lagrange basis on ``output_points``, evaluated at
    each of the ``input_points``.

    Parameters
    ----------
    input_points : Tensor or sequence of float
        Evaluation points in [-1, 1], shape (n,).
    output_points : Tensor or sequence of float
        Distinct basis nodes in [-1, 1], shape (m,).
    dtype : torch.dtype, optional
        Data type. Defaults to the input points' floating dtype or float64.
    device : torch.device, optional
        Device for the output tensors.

    Returns
    -------
    phi : Tensor
        Shape-function matrix, shape (m, n).
    dphi : Tensor
        Derivative matrix, shape (m, n).

    Raises
    ------
    ShapeError
        If either point set is empty.
    DomainError
        If ``output_points`` are not distinct.

    Notes
    -----
    Evaluated at its own nodes the shape-function matrix is the identity
    and the derivative matrix is the transpose of the Lagrange
    differentiation matrix.
    """
    points = as_vector(
        input_points, "input_points", dtype=dtype, device=device
    )
    nodes = as_vector(
        output_points,
        "output_points",
        dtype=points.dtype,
        device=points.device,
    )

    return _shape_function_matrices(points, nodes)
