"""Boundary conditions closing the spline system at the domain edges."""

from __future__ import annotations

from typing import Optional, Sequence, Union

import torch
from torch import Tensor

from ._configuration_error import ConfigurationError
from ._data_point import as_values_tensor

# Second derivative vanishes at both ends; extrapolation continues the
# boundary cubic.
SMOOTH = "smooth"

# First and last control point are adjacent; evaluation is periodic with
# period knots[-1] - knots[0].
CIRCULAR = "circular"

# First derivative prescribed at both ends; extrapolation is linear.
FIXED_TANGENTIALS = "fixed_tangentials"

BOUNDARY_CONDITIONS = (SMOOTH, CIRCULAR, FIXED_TANGENTIALS)


def validate_boundary(boundary: str) -> None:
    if boundary not in BOUNDARY_CONDITIONS:
        raise ConfigurationError(
            f"Unknown boundary condition: {boundary!r}, "
            f"expected one of {BOUNDARY_CONDITIONS}"
        )


def as_boundary_values(
    boundary: str,
    boundary_values: Optional[Union[Tensor, Sequence]],
    values: Tensor,
) -> Tensor:
    """
    Prescribed end derivatives as a tensor of shape (2, *value_shape).

    Parameters
    ----------
    boundary : str
        Boundary condition: "smooth", "circular", "fixed_tangentials".
    boundary_values : Tensor or sequence, optional
        For "fixed_tangentials": the derivatives ``(d_start, d_end)``, either
        a tensor of shape (2, *value_shape) or a pair of points.
        Ignored for the other boundary conditions.
    values : Tensor
        Control point values, shape (n_points, *value_shape).

    Returns
    -------
    Tensor
        ``[d_start, d_end]``, zeros unless ``boundary`` is
        "fixed_tangentials".

    Raises
    ------
    ConfigurationError
        If ``boundary`` is unknown, or ``boundary_values`` is missing or has
        the wrong shape for "fixed_tangentials".
    """
    validate_boundary(boundary)

    value_shape = values.shape[1:]

    if boundary != FIXED_TANGENTIALS:
        return torch.zeros(
            2, *value_shape, dtype=values.dtype, device=values.device
        )

    if boundary_values is None:
        raise ConfigurationError(
            "boundary_values required for fixed_tangentials boundary"
        )

    bv = as_values_tensor(
        boundary_values, dtype=values.dtype, device=values.device
    )

    if bv.shape != (2, *value_shape):
        raise ConfigurationError(
            f"boundary_values must have shape {(2, *value_shape)}, "
            f"got {tuple(bv.shape)}"
        )

    return bv
