"""Mapping of geometric locations onto the normalized domain."""

from typing import Optional, Sequence, Union

import torch
from torch import Tensor

from torchbeam._as_tensor import as_vector
from torchbeam._exceptions import DomainError


def map_geometric_locations(
    locations: Union[Tensor, Sequence[float]],
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Map ascending geometric locations onto [-1, 1].

    Parameters
    ----------
    locations : Tensor or sequence of float
        Sample positions along the reference line, shape (n,), sorted in
        ascending order.
    dtype : torch.dtype, optional
        Data type of the result. Defaults to the input's floating dtype or
        float64.
    device : torch.device, optional
        Device of the result.

    Returns
    -------
    Tensor
        Normalized locations, shape (n,). The first location maps to -1 and
        the last to 1 exactly.

    Raises
    ------
    DomainError
        If the first and last locations are equal.
    ShapeError
        If ``locations`` is empty or not one-dimensional.

    Notes
    -----
    The map is affine:

        xi_i = 2 * (x_i - x_0) / (x_{n-1} - x_0) - 1

    Examples
    --------
    >>> map_geometric_locations([0.0, 2.5, 5.0])
    tensor([-1.,  0.,  1.], dtype=torch.float64)
    """
    x = as_vector(locations, "locations", dtype=dtype, device=device)

    start = x[0]
    end = x[-1]
    if end == start:
        raise DomainError(
            "Invalid geometric locations: domain start and end points are "
            f"equal ({start.item()})"
        )

    return 2 * (x - start) / (end - start) - 1
