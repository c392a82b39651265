class SplineError(Exception):
    """Base exception for spline construction errors."""

    pass
