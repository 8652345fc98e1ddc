"""Cross-section property records."""

from typing import Sequence, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from torchbeam._exceptions import DomainError, ShapeError


@tensorclass
class BeamSection:
    """Mass and stiffness of a beam cross-section in the material frame.

    Attributes
    ----------
    position : Tensor
        Position of the section along the element on [0, 1]. Shape () for a
        single section or (m,) for a stack.
    mass_matrix : Tensor
        6 x 6 mass matrix, shape (*batch, 6, 6).
    stiffness_matrix : Tensor
        6 x 6 stiffness matrix, shape (*batch, 6, 6).
    """

    position: Tensor
    mass_matrix: Tensor
    stiffness_matrix: Tensor


def beam_section(
    position: float,
    mass_matrix: Union[Tensor, Sequence[Sequence[float]]],
    stiffness_matrix: Union[Tensor, Sequence[Sequence[float]]],
) -> BeamSection:
    """Create a validated :class:`BeamSection`.

    Raises
    ------
    DomainError
        If ``position`` is outside [0, 1].
    ShapeError
        If either matrix is not 6 x 6.
    """
    if not 0.0 <= float(position) <= 1.0:
        raise DomainError(
            f"section position must lie in [0, 1], got {float(position)}"
        )

    mass = torch.as_tensor(mass_matrix, dtype=torch.float64)
    stiffness = torch.as_tensor(stiffness_matrix, dtype=torch.float64)

    for name, matrix in (
        ("mass_matrix", mass),
        ("stiffness_matrix", stiffness),
    ):
        if matrix.shape != (6, 6):
            raise ShapeError(
                f"{name} must have shape (6, 6), got {tuple(matrix.shape)}"
            )

    return BeamSection(
        position=torch.tensor(float(position), dtype=torch.float64),
        mass_matrix=mass,
        stiffness_matrix=stiffness,
        batch_size=[],
    )


def interpolate_sections(
    sections: Sequence[BeamSection],
    positions: Union[Tensor, Sequence[float]],
) -> BeamSection:
    """
    Linearly interpolate section properties at arbitrary positions.

    Parameters
    ----------
    sections : sequence of BeamSection
        Section table ordered by strictly increasing position, starting at
        0 and ending at 1.
    positions : Tensor or sequence of float
        Query positions in [0, 1], shape (m,).

    Returns
    -------
    BeamSection
        Stacked sections with batch size (m,).

    Raises
    ------
    DomainError
        If the table does not span [0, 1] with increasing positions, or a
        query position is outside [0, 1].

    Notes
    -----
    Quadrature points on [-1, 1] map to section positions through
    s = (xi + 1) / 2.
    """
    if len(sections) < 2:
        raise DomainError(
            f"at least two sections are required, got {len(sections)}"
        )

    s = torch.stack([section.position for section in sections])
    mass_table = torch.stack([section.mass_matrix for section in sections])
    stiffness_table = torch.stack(
        [section.stiffness_matrix for section in sections]
    )

    if s[0] != 0 or s[-1] != 1:
        raise DomainError(
            "section positions must start at 0 and end at 1, got "
            f"{s[0].item()} and {s[-1].item()}"
        )
    if not (s[1:] > s[:-1]).all():
        raise DomainError(
            "section positions must be strictly increasing, got "
            f"{s.tolist()}"
        )

    query = torch.as_tensor(positions, dtype=s.dtype, device=s.device)
    if query.dim() != 1:
        raise ShapeError(
            "positions must be one-dimensional, got shape "
            f"{tuple(query.shape)}"
        )
    if ((query < 0) | (query > 1)).any():
        raise DomainError(
            f"section positions must lie in [0, 1], got {query.tolist()}"
        )

    upper = torch.searchsorted(s, query, right=True).clamp(1, s.shape[0] - 1)
    lower = upper - 1

    alpha = ((query - s[lower]) / (s[upper] - s[lower])).reshape(-1, 1, 1)

    mass = (1 - alpha) * mass_table[lower] + alpha * mass_table[upper]
    stiffness = (1 - alpha) * stiffness_table[lower] + alpha * (
        stiffness_table[upper]
    )

    return BeamSection(
        position=query,
        mass_matrix=mass,
        stiffness_matrix=stiffness,
        batch_size=[query.shape[0]],
    )
