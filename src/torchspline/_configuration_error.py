from ._spline_error import SplineError


class ConfigurationError(SplineError):
    """Raised when a spline cannot be built from the supplied input.

    This occurs when:
    - Fewer than 2 control points are given
    - Values, arguments or derivatives differ in length
    - The boundary condition is unknown, or ``"fixed_tangentials"`` is
      missing its boundary derivatives
    - Points have differing component counts
    """

    pass
