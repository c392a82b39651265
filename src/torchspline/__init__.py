"""torchspline: piecewise cubic Hermite splines for PyTorch tensors.

The spline passes through a sequence of control points, optionally at
non-uniform arguments, and can be evaluated at any real argument. Values
may be scalars or multi-component points such as 2-D curves.

Convenience Functions
---------------------
cubic_hermite_spline
    Create a spline interpolator from control points (fit + callable).

Cubic Hermite Splines
---------------------
cubic_hermite_spline_fit
    Fit a spline, solving for the derivatives under a boundary condition.
cubic_hermite_spline_from_derivatives
    Build a spline from known derivatives.
cubic_hermite_spline_evaluate
    Evaluate a spline at query arguments, extrapolating outside the domain.
cubic_hermite_spline_derivative
    Evaluate a derivative of a spline at query arguments.

Building Blocks
---------------
build_linear_system
    Derivative system matrix for a boundary condition.
build_right_hand_side
    Derivative system right-hand side for given values.
solve_tridiagonal
    Thomas algorithm.
solve_cyclic_tridiagonal
    Tridiagonal solve with corner entries (Sherman-Morrison).
solve_derivatives
    Derivative at every control point.
hermite_coefficients
    Cubic coefficients from values and derivatives.

Data Types
----------
CubicHermiteSpline
    Piecewise cubic interpolant.
TridiagonalSystem
    Tridiagonal matrix with corner entries.
DataPoint
    Protocol for multi-component values.

Boundary Conditions
-------------------
``"smooth"``, ``"circular"`` and ``"fixed_tangentials"``, listed in
BOUNDARY_CONDITIONS.

Exceptions
----------
SplineError
    Base exception for spline construction.
ConfigurationError
    Invalid construction input.
SolverError
    Singular derivative system.
"""

# Import base exception first
from ._spline_error import SplineError

from ._boundary_condition import BOUNDARY_CONDITIONS
from ._configuration_error import ConfigurationError
from ._cubic_hermite_spline import (
    CubicHermiteSpline,
    cubic_hermite_spline,
    cubic_hermite_spline_derivative,
    cubic_hermite_spline_evaluate,
    cubic_hermite_spline_fit,
    cubic_hermite_spline_from_derivatives,
)
from ._data_point import DataPoint
from ._derivatives import solve_derivatives
from ._hermite_coefficients import hermite_coefficients
from ._linear_system import (
    TridiagonalSystem,
    build_linear_system,
    build_right_hand_side,
)
from ._solve_cyclic_tridiagonal import solve_cyclic_tridiagonal
from ._solve_tridiagonal import solve_tridiagonal
from ._solver_error import SolverError

__all__ = [
    "BOUNDARY_CONDITIONS",
    "ConfigurationError",
    "CubicHermiteSpline",
    "DataPoint",
    "SolverError",
    "SplineError",
    "TridiagonalSystem",
    "build_linear_system",
    "build_right_hand_side",
    "cubic_hermite_spline",
    "cubic_hermite_spline_derivative",
    "cubic_hermite_spline_evaluate",
    "cubic_hermite_spline_fit",
    "cubic_hermite_spline_from_derivatives",
    "hermite_coefficients",
    "solve_cyclic_tridiagonal",
    "solve_derivatives",
    "solve_tridiagonal",
]

__version__ = "0.1.0"
