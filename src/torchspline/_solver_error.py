from ._spline_error import SplineError


class SolverError(SplineError):
    """Raised when the derivative system cannot be solved (singular pivot)."""

    pass
