"""Application of a quadrature rule to sampled values."""

import torch
from torch import Tensor

from torchbeam._exceptions import ShapeError


def integrate(
    rule: Tensor,
    values: Tensor,
    *,
    jacobian: float = 1.0,
) -> Tensor:
    """
    Integrate values sampled at the points of a quadrature rule.

    Parameters
    ----------
    rule : Tensor
        Quadrature rule, shape (n, 2), as returned by
        :func:`trapezoidal_quadrature` or :func:`gauss_legendre_quadrature`.
    values : Tensor
        Integrand at the rule's points, shape (n, *value_shape). Section
        properties such as stacks of 6 x 6 matrices integrate entrywise.
    jacobian : float
        Ratio of physical length to the length of [-1, 1]. Default 1.0
        integrates over the normalized domain.

    Returns
    -------
    Tensor
        Integral, shape value_shape.

    Raises
    ------
    ShapeError
        If ``rule`` is not (n, 2) or ``values`` has a different number of
        points.

    Examples
    --------
    >>> rule = trapezoidal_quadrature([0.0, 0.5, 1.0])
    >>> integrate(rule, torch.ones(3, dtype=torch.float64))
    tensor(2., dtype=torch.float64)
    """
    if rule.dim() != 2 or rule.shape[1] != 2:
        raise ShapeError(
            f"rule must have shape (n, 2), got {tuple(rule.shape)}"
        )
    if values.dim() == 0 or values.shape[0] != rule.shape[0]:
        raise ShapeError(
            f"values of shape {tuple(values.shape)} do not match a rule "
            f"with {rule.shape[0]} points"
        )

    dtype = torch.promote_types(rule.dtype, values.dtype)
    weights = rule[:, 1].to(dtype=dtype)
    samples = values.to(dtype=dtype).reshape(values.shape[0], -1)

    return jacobian * (weights @ samples).reshape(values.shape[1:])
