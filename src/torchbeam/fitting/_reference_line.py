"""Spectral reference line fitted to sampled beam geometry."""

from typing import Callable, Optional, Sequence, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from torchbeam.fitting._least_squares_fit import least_squares_fit
from torchbeam.fitting._solve import solve_dense
from torchbeam.geometry import map_geometric_locations
from torchbeam.polynomial import (
    shape_function_matrices,
    transfer_shape_function_matrices,
)


@tensorclass
class ReferenceLine:
    """Polynomial reference line of a spectral beam element.

    Attributes
    ----------
    nodes : Tensor
        Gauss-Lobatto-Legendre nodes in [-1, 1], shape (p,).
    coefficients : Tensor
        Control points at the nodes, shape (p, 3). The first and last rows
        are the end points of the beam.
    """

    nodes: Tensor
    coefficients: Tensor

    def __call__(self, xi: Union[Tensor, Sequence[float]]) -> Tensor:
        """Positions at normalized points ``xi``, shape (m, 3)."""
        phi, _ = transfer_shape_function_matrices(
            xi, self.nodes, dtype=self.nodes.dtype, device=self.nodes.device
        )
        return phi.T @ self.coefficients

    def tangent(self, xi: Union[Tensor, Sequence[float]]) -> Tensor:
        """Derivatives d/dxi of the positions at ``xi``, shape (m, 3).

        These are tangents with respect to the normalized coordinate; they
        are not normalized to unit length.
        """
        _, dphi = transfer_shape_function_matrices(
            xi, self.nodes, dtype=self.nodes.dtype, device=self.nodes.device
        )
        return dphi.T @ self.coefficients


def fit_reference_line(
    locations: Union[Tensor, Sequence[float]],
    points: Union[Tensor, Sequence[Sequence[float]]],
    p: int,
    *,
    solver: Callable[[Tensor, Tensor], Tensor] = solve_dense,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> ReferenceLine:
    """
    Fit a spectral reference line to sampled beam geometry.

    Parameters
    ----------
    locations : Tensor or sequence of float
        Ascending sample positions along the beam, shape (n,).
    points : Tensor or sequence of sequences
        Sample coordinates, shape (n, 3).
    p : int
        Number of GLL nodes, ``2 <= p <= n``.
    solver : callable, optional
        Dense solver passed to :func:`least_squares_fit`.
    dtype : torch.dtype, optional
        Data type. Defaults to float64.
    device : torch.device, optional
        Device for the computation.

    Returns
    -------
    ReferenceLine
        GLL nodes and fitted control points.

    Raises
    ------
    DomainError
        If the first and last locations are equal.
    OrderError
        If ``p`` is outside [2, n].
    ShapeError
        If ``points`` does not hold one 3-D point per location.

    Examples
    --------
    >>> line = fit_reference_line(
    ...     [0.0, 0.5, 1.0],
    ...     [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [2.0, 0.0, 0.0]],
    ...     2,
    ... )
    >>> line.coefficients
    tensor([[0., 0., 0.],
            [2., 0., 0.]], dtype=torch.float64)
    """
    xi = map_geometric_locations(locations, dtype=dtype, device=device)
    n = xi.shape[0]

    phi, _, nodes = shape_function_matrices(n, p, xi)
    coefficients = least_squares_fit(p, phi, points, solver=solver)

    return ReferenceLine(
        nodes=nodes,
        coefficients=coefficients,
        batch_size=[],
    )
