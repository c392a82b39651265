"""Cubic Hermite spline module with boundary-condition-driven derivatives."""

from ._cubic_hermite_spline import CubicHermiteSpline, cubic_hermite_spline
from ._cubic_hermite_spline_derivative import cubic_hermite_spline_derivative
from ._cubic_hermite_spline_evaluate import cubic_hermite_spline_evaluate
from ._cubic_hermite_spline_fit import cubic_hermite_spline_fit
from ._cubic_hermite_spline_from_derivatives import (
    cubic_hermite_spline_from_derivatives,
)

__all__ = [
    "CubicHermiteSpline",
    "cubic_hermite_spline",
    "cubic_hermite_spline_derivative",
    "cubic_hermite_spline_evaluate",
    "cubic_hermite_spline_fit",
    "cubic_hermite_spline_from_derivatives",
]
