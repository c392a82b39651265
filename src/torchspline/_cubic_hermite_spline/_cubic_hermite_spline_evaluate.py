from __future__ import annotations

from typing import TYPE_CHECKING, Tuple, Union

import torch
from torch import Tensor

from .._boundary_condition import CIRCULAR, FIXED_TANGENTIALS
from .._data_point import as_query_tensor

if TYPE_CHECKING:
    from ._cubic_hermite_spline import CubicHermiteSpline


def _wrap_circular(t: Tensor, knots: Tensor) -> Tensor:
    """Shift t by whole periods into [knots[0], knots[-1]]."""
    t_min = knots[0]
    t_max = knots[-1]
    period = t_max - t_min

    t = torch.where(
        t < t_min, t + torch.ceil((t_min - t) / period) * period, t
    )
    t = torch.where(
        t > t_max, t - torch.ceil((t - t_max) / period) * period, t
    )

    # Rounding in the shift can leave t an ulp outside the domain
    return torch.clamp(t, t_min, t_max)


def _locate_segments(knots: Tensor, t: Tensor) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Segment index, local parameter and width for each query.

    Queries below the domain use the first segment (lam < 0) and queries
    at or above the last knot use the last segment (lam >= 1).
    """
    # We want the segment index i such that knots[i] <= t < knots[i+1]
    segment_idx = torch.searchsorted(knots, t, right=True) - 1

    n_segments = knots.shape[0] - 1
    segment_idx = torch.clamp(segment_idx, 0, n_segments - 1)

    x_i = knots[segment_idx]
    h = knots[segment_idx + 1] - x_i

    return segment_idx, (t - x_i) / h, h


def cubic_hermite_spline_evaluate(
    spline: CubicHermiteSpline,
    t: Union[Tensor, float],
) -> Tensor:
    """
    Evaluate a cubic Hermite spline at query arguments.

    Evaluation is defined for every real argument. Outside
    [knots[0], knots[-1]] the boundary condition decides:

    - ``"smooth"``: the first or last segment's cubic is continued.
    - ``"circular"``: t is shifted by whole periods of
      ``knots[-1] - knots[0]`` into the domain.
    - ``"fixed_tangentials"``: the line through the end point with slope
      ``d_start`` or ``d_end``.

    Parameters
    ----------
    spline : CubicHermiteSpline
        Spline from cubic_hermite_spline_fit or
        cubic_hermite_spline_from_derivatives.
    t : Tensor or float
        Query arguments, shape (*query_shape) or scalar.

    Returns
    -------
    y : Tensor
        Interpolated values, shape (*query_shape, *value_shape).
    """
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

    segment_idx, lam, _ = _locate_segments(knots, t_flat)

    value_shape = coeffs.shape[2:]
    broadcast = (-1, *([1] * len(value_shape)))
    lam = lam.view(broadcast)

    a = coeffs[segment_idx, 0]  # (*query_flat, *value_shape)
    b = coeffs[segment_idx, 1]
    c = coeffs[segment_idx, 2]
    d = coeffs[segment_idx, 3]

    # Horner's method: y = a + lam*(b + lam*(c + lam*d))
    y = a + lam * (b + lam * (c + lam * d))

    if boundary == FIXED_TANGENTIALS:
        bv = spline.boundary_values
        start = coeffs[0, 0]
        end = coeffs[-1].sum(dim=0)  # last segment at lam = 1

        below = (t_flat < knots[0]).view(broadcast)
        above = (t_flat > knots[-1]).view(broadcast)

        y = torch.where(
            below, start + (t_flat - knots[0]).view(broadcast) * bv[0], y
        )
        y = torch.where(
            above, end + (t_flat - knots[-1]).view(broadcast) * bv[1], y
        )

    y = y.reshape(*query_shape, *value_shape)

    if is_scalar:
        y = y.squeeze(0)

    return y
