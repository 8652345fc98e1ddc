"""torchbeam: PyTorch spectral discretization of flexible beams."""

from . import (
    beam,
    fitting,
    geometry,
    polynomial,
    quadrature,
)
from ._exceptions import (
    BeamError,
    ConvergenceWarning,
    DomainError,
    OrderError,
    ShapeError,
    SingularSystemError,
)

__all__ = [
    "BeamError",
    "ConvergenceWarning",
    "DomainError",
    "OrderError",
    "ShapeError",
    "SingularSystemError",
    "beam",
    "fitting",
    "geometry",
    "polynomial",
    "quadrature",
]

__version__ = "0.1.0"
