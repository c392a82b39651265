"""Cubic Hermite spline derivative evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

from .._boundary_condition import CIRCULAR, FIXED_TANGENTIALS
from .._data_point import as_query_tensor
from ._cubic_hermite_spline_evaluate import _locate_segments, _wrap_circular

if TYPE_CHECKING:
    from ._cubic_hermite_spline import CubicHermiteSpline


def cubic_hermite_spline_derivative(
    spline: CubicHermiteSpline,
    t: Union[Tensor, float],
    order: int = 1,
) -> Tensor:
    """
    Evaluate a derivative of a cubic Hermite spline at query arguments.

    Parameters
    ----------
    spline : CubicHermiteSpline
        Input spline
    t : Tensor or float
        Query arguments, shape (*query_shape) or scalar
    order : int
        Order of derivative (1, 2, or 3). Default is 1.

    Returns
    -------
    derivative_values : Tensor
        Derivative with respect to t, shape (*query_shape, *value_shape).

    Raises
    ------
    ValueError
        If order is not 1, 2, or 3.

    Notes
    -----
    On segment i the spline is p(lam) = a + b*lam + c*lam^2 + d*lam^3 with
    lam = (t - knots[i]) / h, so

    - p'(t) = (b + 2c*lam + 3d*lam^2) / h
    - p''(t) = (2c + 6d*lam) / h^2
    - p'''(t) = 6d / h^3

    Outside the domain the derivative follows the same extrapolation as
    cubic_hermite_spline_evaluate: the boundary cubic for "smooth", the
    wrapped argument for "circular", and the constant slopes ``d_start`` and
    ``d_end`` for "fixed_tangentials".
    """
    if order < 1 or order > 3:
        raise ValueError(f"Derivative order must be 1, 2, or 3, got {order}")

    knots = spline.knots
    coeffs = spline.coefficients
    boundary = spline.boundary

    t = as_query_tensor(t, knots)

    is_scalar = t.dim() == 0
    if is_scalar:
        t = t.unsqueeze(0)

    query_shape = t.shape
    t_flat = t.flatten()

    if boundary == CIRCULAR:
        t_flat = _wrap_circular(t_flat, knots)

    segment_idx, lam, h = _locate_segments(knots, t_flat)

    value_shape = coeffs.shape[2:]
    broadcast = (-1, *([1] * len(value_shape)))
    lam = lam.view(broadcast)
    h = h.view(broadcast)

    b = coeffs[segment_idx, 1]
    c = coeffs[segment_idx, 2]
    d = coeffs[segment_idx, 3]

    if order == 1:
        result = (b + lam * (2 * c + lam * 3 * d)) / h
    elif order == 2:
        result = (2 * c + 6 * d * lam) / h**2
    else:  # order == 3
        result = 6 * d / h**3

    if boundary == FIXED_TANGENTIALS:
        bv = spline.boundary_values

        below = (t_flat < knots[0]).view(broadcast)
        above = (t_flat > knots[-1]).view(broadcast)

        if order == 1:
            result = torch.where(below, bv[0], result)
            result = torch.where(above, bv[1], result)
        else:
            outside = torch.logical_or(below, above)
            result = torch.where(outside, torch.zeros_like(result), result)

    result = result.reshape(*query_shape, *value_shape)

    if is_scalar:
        result = result.squeeze(0)

    return result
