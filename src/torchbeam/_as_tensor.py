"""Conversion of user input to validated tensors."""

from typing import Optional, Sequence, Union

import torch
from torch import Tensor

from torchbeam._exceptions import ShapeError


def as_vector(
    values: Union[Tensor, Sequence[float]],
    name: str,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Convert ``values`` to a non-empty 1-D floating tensor."""
    if dtype is None:
        if isinstance(values, Tensor) and values.is_floating_point():
            dtype = values.dtype
        else:
            dtype = torch.float64

    vector = torch.as_tensor(values, dtype=dtype, device=device)

    if vector.dim() != 1:
        raise ShapeError(
            f"{name} must be one-dimensional, got shape {tuple(vector.shape)}"
        )
    if vector.numel() == 0:
        raise ShapeError(f"{name} must not be empty")

    return vector
