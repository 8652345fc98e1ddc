"""Exception hierarchy for beam discretization."""


class BeamError(Exception):
    """Base class for beam discretization errors."""

    pass


class DomainError(BeamError, ValueError):
    """Invalid parameter domain.

    Raised when a geometric location sequence is degenerate (first and
    last locations coincide) or a position lies outside its valid range.
    """

    pass


class ShapeError(BeamError, ValueError):
    """Inconsistent sizes or shapes.

    Raised when a shape-function matrix disagrees with the requested
    polynomial order, has rows of different lengths, or when point sets
    are empty or mis-sized.
    """

    pass


class OrderError(BeamError, ValueError):
    """Polynomial order outside its valid range (2 <= p <= n)."""

    pass


class SingularSystemError(BeamError, RuntimeError):
    """The dense linear system could not be factored."""

    pass


class ConvergenceWarning(UserWarning):
    """Warning for iterations that stopped before reaching tolerance."""

    pass
