from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence, Union

from torch import Tensor

from .._boundary_condition import as_boundary_values
from .._configuration_error import ConfigurationError
from .._data_point import as_arguments_tensor, as_values_tensor
from .._derivatives import solve_derivatives
from ._cubic_hermite_spline_from_derivatives import (
    cubic_hermite_spline_from_derivatives,
)

if TYPE_CHECKING:
    from ._cubic_hermite_spline import CubicHermiteSpline


def cubic_hermite_spline_fit(
    values: Union[Tensor, Sequence],
    arguments: Optional[Union[Tensor, Sequence[float]]] = None,
    boundary: str = "smooth",
    boundary_values: Optional[Union[Tensor, Sequence]] = None,
) -> CubicHermiteSpline:
    """
    Fit a cubic Hermite spline through control points.

    Parameters
    ----------
    values : Tensor or sequence
        Values at the control points. A tensor of shape
        (n_points, *value_shape), or a sequence of scalars, tensors,
        ``(x, y)`` tuples or ``DataPoint`` objects.
    arguments : Tensor or sequence, optional
        Arguments of the control points, shape (n_points,). Must be strictly
        increasing; this is not checked. Defaults to ``0, 1, ..., n - 1``.
    boundary : str
        Boundary condition: "smooth", "circular", "fixed_tangentials".
    boundary_values : Tensor or sequence, optional
        For "fixed_tangentials": derivatives ``(d_start, d_end)``, shape
        (2, *value_shape).

    Returns
    -------
    CubicHermiteSpline
        Fitted spline.

    Raises
    ------
    ConfigurationError
        If there are fewer than 2 control points, the number of arguments
        differs from the number of values, or the boundary condition is
        invalid.
    SolverError
        If the derivative system is singular.

    Notes
    -----
    The derivatives come from the cubic spline system for unit spacing,
    so they are per unit of each segment's local parameter. The spline
    passes through every control point for any spacing of the arguments.
    """
    values = as_values_tensor(values)
    n = values.shape[0]

    if n < 2:
        raise ConfigurationError(
            f"Can't create a spline with less than 2 control points, got {n}"
        )

    knots = as_arguments_tensor(
        arguments, n, dtype=values.dtype, device=values.device
    )
    bv = as_boundary_values(boundary, boundary_values, values)

    derivatives = solve_derivatives(values, boundary, bv)

    return cubic_hermite_spline_from_derivatives(
        values,
        knots,
        derivatives,
        boundary=boundary,
        boundary_values=bv,
    )
