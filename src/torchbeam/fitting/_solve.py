"""Dense linear solve backing the least-squares fit."""

import torch
from torch import Tensor

from torchbeam._exceptions import ShapeError, SingularSystemError


def solve_dense(
    matrix: Tensor,
    rhs: Tensor,
) -> Tensor:
    """Solve a dense linear system A X = B.

    Parameters
    ----------
    matrix : Tensor
        Square system matrix A, shape (p, p).
    rhs : Tensor
        Right-hand side B, shape (p,) or (p, m) for multiple columns.

    Returns
    -------
    Tensor
        Solution X, same shape as ``rhs``.

    Raises
    ------
    ShapeError
        If ``matrix`` is not square or ``rhs`` does not match it.
    SingularSystemError
        If the LU factorization meets a zero pivot or the solution is not
        finite.

    Notes
    -----
    Uses LU factorization with partial pivoting
    (:func:`torch.linalg.solve_ex`). All right-hand-side columns are
    solved with one factorization. The solve is differentiable with
    respect to both arguments.

    Examples
    --------
    >>> A = torch.tensor([[4.0, 1.0], [1.0, 3.0]], dtype=torch.float64)
    >>> B = torch.tensor([5.0, 4.0], dtype=torch.float64)
    >>> solve_dense(A, B)
    tensor([1., 1.], dtype=torch.float64)
    """
    if matrix.dim() != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ShapeError(
            f"matrix must be square, got shape {tuple(matrix.shape)}"
        )
    if rhs.dim() not in (1, 2) or rhs.shape[0] != matrix.shape[0]:
        raise ShapeError(
            f"rhs of shape {tuple(rhs.shape)} does not match matrix of "
            f"shape {tuple(matrix.shape)}"
        )

    solution, info = torch.linalg.solve_ex(matrix, rhs)

    if info.item() != 0:
        raise SingularSystemError(
            f"LU factorization failed: U[{info.item() - 1}, "
            f"{info.item() - 1}] is exactly zero"
        )
    if not torch.isfinite(solution).all():
        raise SingularSystemError(
            "linear solve produced non-finite values; the system is "
            "numerically singular"
        )

    return solution
