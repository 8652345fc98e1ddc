"""Boundary-anchored least-squares fit of polynomial control points."""

from typing import Callable, Optional, Sequence, Union

import torch
from torch import Tensor

from torchbeam._exceptions import OrderError, ShapeError
from torchbeam.fitting._solve import solve_dense


def _as_shape_function_matrix(
    shape_functions: Union[Tensor, Sequence[Sequence[float]]],
    p: int,
    dtype: Optional[torch.dtype],
    device: Optional[torch.device],
) -> Tensor:
    if isinstance(shape_functions, Tensor):
        if shape_functions.dim() != 2:
            raise ShapeError(
                "shape_functions must be a (p, n) matrix, got shape "
                f"{tuple(shape_functions.shape)}"
            )
        if shape_functions.shape[0] != p:
            raise ShapeError(
                f"shape_functions rows ({shape_functions.shape[0]}) do not "
                f"match order p ({p})"
            )
        if dtype is None and shape_functions.is_floating_point():
            dtype = shape_functions.dtype
    else:
        rows = [list(row) for row in shape_functions]
        if len(rows) != p:
            raise ShapeError(
                f"shape_functions rows ({len(rows)}) do not match order "
                f"p ({p})"
            )
        lengths = {len(row) for row in rows}
        if len(lengths) != 1:
            raise ShapeError(
                "Inconsistent number of columns in shape_functions: "
                f"{sorted(lengths)}"
            )
        shape_functions = rows

    if dtype is None:
        dtype = torch.float64

    return torch.as_tensor(shape_functions, dtype=dtype, device=device)


def least_squares_fit(
    p: int,
    shape_functions: Union[Tensor, Sequence[Sequence[float]]],
    points: Union[Tensor, Sequence[Sequence[float]]],
    *,
    solver: Callable[[Tensor, Tensor], Tensor] = solve_dense,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Fit polynomial control points to scattered 3-D samples.

    The fit interpolates the first and last samples exactly and is a
    least-squares fit at the interior samples.

    Parameters
    ----------
    p : int
        Number of control points (polynomial order p - 1), ``p >= 2``.
    shape_functions : Tensor or sequence of sequences
        Shape-function matrix phi, shape (p, n), as returned by
        :func:`torchbeam.polynomial.shape_function_matrices`.
    points : Tensor or sequence of sequences
        Sample coordinates, shape (n, 3).
    solver : callable, optional
        Dense solver ``solver(A, B) -> X``. Defaults to :func:`solve_dense`
        (LU with partial pivoting).
    dtype : torch.dtype, optional
        Data type. Defaults to the shape functions' floating dtype or
        float64.
    device : torch.device, optional
        Device for the computation.

    Returns
    -------
    Tensor
        Control-point coefficients, shape (p, 3). Rows 0 and p - 1 equal
        the first and last samples.

    Raises
    ------
    ShapeError
        If phi does not have p rows, its rows differ in length, or
        ``points`` is not (n, 3).
    OrderError
        If ``p < 2`` or ``p > n``.
    SingularSystemError
        If the default solver cannot factor the system.

    Notes
    -----
    The p x p system A X = B has identity boundary rows,

        A[0, 0] = A[p-1, p-1] = 1,   B[0] = points[0],   B[p-1] = points[n-1]

    and normal-equation interior rows, i = 1, ..., p - 2,

        A[i, j] = sum_k phi[i, k] phi[j, k],   j = 0, ..., p - 1
        B[i]    = sum_k phi[i, k] points[k]

    so the interior control points minimize the residual at the samples
    with the end control points held at the end samples. All three
    coordinate columns are solved together.

    Examples
    --------
    >>> phi = torch.tensor([[1.0, 0.5, 0.0], [0.0, 0.5, 1.0]])
    >>> points = [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [2.0, 0.0, 0.0]]
    >>> least_squares_fit(2, phi, points)
    tensor([[0., 0., 0.],
            [2., 0., 0.]])
    """
    if p < 2:
        raise OrderError(f"p must be at least 2, got {p}")

    phi = _as_shape_function_matrix(shape_functions, p, dtype, device)
    n = phi.shape[1]

    samples = torch.as_tensor(points, dtype=phi.dtype, device=phi.device)
    if samples.dim() != 2 or samples.shape != (n, 3):
        raise ShapeError(
            f"points must have shape ({n}, 3), got {tuple(samples.shape)}"
        )

    if p > n:
        raise OrderError(
            f"p must not exceed the number of samples, got p={p}, n={n}"
        )

    interior = slice(1, p - 1)

    A = torch.zeros((p, p), dtype=phi.dtype, device=phi.device)
    A[0, 0] = 1.0
    A[p - 1, p - 1] = 1.0
    A[interior] = phi[interior] @ phi.T

    B = torch.zeros((p, 3), dtype=phi.dtype, device=phi.device)
    B[0] = samples[0]
    B[p - 1] = samples[n - 1]
    B[interior] = phi[interior] @ samples

    return solver(A, B)
