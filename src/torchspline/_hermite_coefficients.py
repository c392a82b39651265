import torch
from torch import Tensor

from ._configuration_error import ConfigurationError


def hermite_coefficients(values: Tensor, derivatives: Tensor) -> Tensor:
    """
    Convert values and derivatives to cubic polynomial coefficients.

    Parameters
    ----------
    values : Tensor
        Values at the control points, shape (n_points, *value_shape).
    derivatives : Tensor
        Derivatives at the control points, same shape as ``values``.

    Returns
    -------
    Tensor
        Coefficients, shape (n_points - 1, 4, *value_shape). Segment i is
        a + b*lam + c*lam^2 + d*lam^3 for lam in [0, 1], where
        coefficients[i] = [a, b, c, d].

    Raises
    ------
    ConfigurationError
        If ``values`` and ``derivatives`` have different shapes.

    Notes
    -----
    With p0, p1 the segment's end values and d0, d1 its end derivatives:

        a = p0
        b = d0
        c = 3*(p1 - p0) - 2*d0 - d1
        d = 2*(p0 - p1) + d0 + d1

    so that p(0) = p0, p(1) = p1, p'(0) = d0 and p'(1) = d1.
    """
    if values.shape != derivatives.shape:
        raise ConfigurationError(
            f"values and derivatives must have same shape, "
            f"got {tuple(values.shape)} and {tuple(derivatives.shape)}"
        )

    p0 = values[:-1]
    p1 = values[1:]
    d0 = derivatives[:-1]
    d1 = derivatives[1:]

    a = p0
    b = d0
    c = 3 * (p1 - p0) - 2 * d0 - d1
    d = 2 * (p0 - p1) + d0 + d1

    return torch.stack([a, b, c, d], dim=1)
