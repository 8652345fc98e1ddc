"""Non-uniform trapezoidal quadrature from geometric sampling."""

from typing import Optional, Sequence, Union

import torch
from torch import Tensor

from torchbeam.geometry import map_geometric_locations


def trapezoidal_quadrature(
    locations: Union[Tensor, Sequence[float]],
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Composite trapezoidal rule on [-1, 1] for arbitrary sample locations.

    Parameters
    ----------
    locations : Tensor or sequence of float
        Ascending geometric sample locations, shape (n,), n >= 2.
    dtype : torch.dtype, optional
        Data type. Defaults to the input's floating dtype or float64.
    device : torch.device, optional
        Device for the output tensor.

    Returns
    -------
    Tensor
        Quadrature rule, shape (n, 2). Column 0 holds the normalized
        locations, column 1 the weights.

    Raises
    ------
    DomainError
        If the first and last locations are equal (this includes a single
        location).

    Notes
    -----
    With normalized locations xi_i,

        w_0     = (xi_1 - xi_0) / 2
        w_i     = (xi_{i+1} - xi_{i-1}) / 2,   0 < i < n - 1
        w_{n-1} = (xi_{n-1} - xi_{n-2}) / 2

    The weights are non-negative for ascending input and sum to 2.

    Examples
    --------
    >>> trapezoidal_quadrature([0.0, 0.5, 1.0])
    tensor([[-1.0000,  0.5000],
            [ 0.0000,  1.0000],
            [ 1.0000,  0.5000]], dtype=torch.float64)
    """
    xi = map_geometric_locations(locations, dtype=dtype, device=device)

    half_gaps = (xi[1:] - xi[:-1]) / 2

    weights = torch.zeros_like(xi)
    weights[:-1] = weights[:-1] + half_gaps
    weights[1:] = weights[1:] + half_gaps

    return torch.stack([xi, weights], dim=-1)
