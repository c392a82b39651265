from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Optional, Sequence, Union

import torch
from torch import Tensor

from .._boundary_condition import FIXED_TANGENTIALS, as_boundary_values
from .._configuration_error import ConfigurationError
from .._data_point import as_arguments_tensor, as_values_tensor
from .._hermite_coefficients import hermite_coefficients

if TYPE_CHECKING:
    from ._cubic_hermite_spline import CubicHermiteSpline


def cubic_hermite_spline_from_derivatives(
    values: Union[Tensor, Sequence],
    arguments: Optional[Union[Tensor, Sequence[float]]],
    derivatives: Union[Tensor, Sequence],
    boundary: str = "smooth",
    boundary_values: Optional[Union[Tensor, Sequence]] = None,
) -> CubicHermiteSpline:
    """
    Build a cubic Hermite spline from known values and derivatives.

    Use this when the derivative at every control point is already known;
    no linear system is solved.

    Parameters
    ----------
    values : Tensor or sequence
        Values at the control points, shape (n_points, *value_shape).
    arguments : Tensor or sequence, optional
        Arguments of the control points, shape (n_points,). Must be
        strictly increasing. None means ``0, 1, ..., n_points - 1``.
    derivatives : Tensor or sequence
        Derivatives at the control points, same shape as ``values``, per
        unit of the local segment parameter.
    boundary : str
        Boundary condition: "smooth", "circular", "fixed_tangentials".
        Only affects extrapolation here.
    boundary_values : Tensor or sequence, optional
        For "fixed_tangentials": ``(d_start, d_end)``, the slopes used to
        extrapolate below and above the domain.

    Returns
    -------
    CubicHermiteSpline
        Spline.

    Raises
    ------
    ConfigurationError
        If there are fewer than 2 control points, or values, arguments and
        derivatives differ in length.

    Warns
    -----
    RuntimeWarning
        For "fixed_tangentials", if the end derivatives differ from
        ``boundary_values``.
    """
    values = as_values_tensor(values)
    n = values.shape[0]

    if n < 2:
        raise ConfigurationError(
            f"Can't create a spline with less than 2 control points, got {n}"
        )

    derivatives = as_values_tensor(
        derivatives, dtype=values.dtype, device=values.device
    )
    if derivatives.shape != values.shape:
        raise ConfigurationError(
            f"The number of control points needs to equal the number of "
            f"derivatives, got values of shape {tuple(values.shape)} and "
            f"derivatives of shape {tuple(derivatives.shape)}"
        )

    knots = as_arguments_tensor(
        arguments, n, dtype=values.dtype, device=values.device
    )
    bv = as_boundary_values(boundary, boundary_values, values)

    if boundary == FIXED_TANGENTIALS and not torch.allclose(
        torch.stack([derivatives[0], derivatives[-1]]), bv
    ):
        warnings.warn(
            "End derivatives differ from boundary_values; the spline will "
            "not be smooth where extrapolation starts",
            RuntimeWarning,
            stacklevel=2,
        )

    coefficients = hermite_coefficients(values, derivatives)

    from ._cubic_hermite_spline import CubicHermiteSpline

    return CubicHermiteSpline(
        knots=knots.clone(),
        coefficients=coefficients,
        boundary=boundary,
        boundary_values=bv.clone(),
        batch_size=[],
    )
