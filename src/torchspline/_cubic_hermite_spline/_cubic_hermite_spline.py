"""Cubic Hermite spline interpolation."""

from typing import Callable, Optional, Sequence, Union

from tensordict.tensorclass import tensorclass
from torch import Tensor

from ._cubic_hermite_spline_evaluate import cubic_hermite_spline_evaluate
from ._cubic_hermite_spline_fit import cubic_hermite_spline_fit


@tensorclass
class CubicHermiteSpline:
    """Piecewise cubic Hermite interpolant.

    Attributes
    ----------
    knots : Tensor
        Arguments of the control points, shape (n_knots,). Strictly
        increasing.
    coefficients : Tensor
        Polynomial coefficients, shape (n_segments, 4, *value_shape).
        Segment i is evaluated in its local parameter
        lam = (t - knots[i]) / (knots[i+1] - knots[i]) as:
        a[i] + b[i]*lam + c[i]*lam^2 + d[i]*lam^3
        where coefficients[i] = [a, b, c, d].
    boundary : str
        Boundary condition: "smooth", "circular", "fixed_tangentials".
        Also selects how the spline extrapolates.
    boundary_values : Tensor
        Prescribed derivatives ``[d_start, d_end]``, shape
        (2, *value_shape). Zeros unless boundary is "fixed_tangentials".
    """

    knots: Tensor
    coefficients: Tensor
    boundary: str
    boundary_values: Tensor


def cubic_hermite_spline(
    values: Union[Tensor, Sequence],
    arguments: Optional[Union[Tensor, Sequence[float]]] = None,
    boundary: str = "smooth",
    boundary_values: Optional[Union[Tensor, Sequence]] = None,
) -> Callable[[Union[Tensor, float]], Tensor]:
    """Create a cubic Hermite spline interpolator from control points.

    This is a convenience function that fits a spline and returns a
    callable that evaluates it.

    Parameters
    ----------
    values : Tensor or sequence
        Control point values: a tensor of shape (n_points, *value_shape),
        or a sequence of scalars, ``(x, y)`` tuples or ``DataPoint``
        objects.
    arguments : Tensor or sequence, optional
        Arguments of the control points. Must be strictly increasing.
        Defaults to ``0, 1, ..., n_points - 1``.
    boundary : str, optional
        Boundary condition. One of:

        - ``"smooth"``: Zero second derivative at both ends (default).
          Extrapolates by continuing the boundary cubic.
        - ``"circular"``: First and last point are adjacent. Extrapolates
          periodically.
        - ``"fixed_tangentials"``: Derivatives given by ``boundary_values``
          at both ends. Extrapolates linearly.

    boundary_values : Tensor or sequence, optional
        ``(d_start, d_end)`` for ``"fixed_tangentials"``.

    Returns
    -------
    spline : Callable[[Tensor], Tensor]
        Function that evaluates the spline at given arguments.

    Examples
    --------
    >>> import torch
    >>> f = cubic_hermite_spline([(0.0, 0.0), (1.0, 2.0), (3.0, 1.0)])
    >>> f(torch.tensor([0.5, 1.5]))  # two points on the 2-D curve
    """
    fitted = cubic_hermite_spline_fit(
        values,
        arguments,
        boundary=boundary,
        boundary_values=boundary_values,
    )
    return lambda t: cubic_hermite_spline_evaluate(fitted, t)
