"""Assembly of the cubic spline derivative system.

For unit spacing between control points, continuity of the second
derivative at every interior point gives

    d[i-1] + 4*d[i] + d[i+1] = 3*(y[i+1] - y[i-1])

for the derivatives d. The first and last rows depend on the boundary
condition (see https://mathworld.wolfram.com/CubicSpline.html).
"""

from __future__ import annotations

from typing import Optional

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from ._boundary_condition import (
    CIRCULAR,
    FIXED_TANGENTIALS,
    SMOOTH,
    validate_boundary,
)
from ._configuration_error import ConfigurationError


@tensorclass
class TridiagonalSystem:
    """Tridiagonal matrix with optional corner entries.

    The matrix has the form:
        [d0  u0   0  ...   0    c0 ]
        [l0  d1  u1  ...   0     0 ]
        [        ...               ]
        [ 0   0  ...  ln-3 dn-2 un-2]
        [c1   0  ...   0   ln-2 dn-1]

    Attributes
    ----------
    diag : Tensor
        Main diagonal, shape (n,).
    upper : Tensor
        Upper diagonal, shape (n-1,).
    lower : Tensor
        Lower diagonal, shape (n-1,).
    corner : Tensor
        Corner entries ``[A[0, n-1], A[n-1, 0]]``, shape (2,). Non-zero only
        for the circular boundary condition.
    """

    diag: Tensor
    upper: Tensor
    lower: Tensor
    corner: Tensor

    def to_dense(self) -> Tensor:
        """Dense (n, n) matrix."""
        n = self.diag.shape[0]
        matrix = (
            torch.diag(self.diag)
            + torch.diag(self.upper, 1)
            + torch.diag(self.lower, -1)
        )
        if n > 2:
            matrix[0, n - 1] = matrix[0, n - 1] + self.corner[0]
            matrix[n - 1, 0] = matrix[n - 1, 0] + self.corner[1]
        return matrix


def build_linear_system(
    boundary: str,
    n: int,
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None,
) -> TridiagonalSystem:
    """
    Build the derivative system matrix for ``n`` control points.

    Parameters
    ----------
    boundary : str
        Boundary condition: "smooth", "circular", "fixed_tangentials".
    n : int
        Number of control points, at least 2.
    dtype : torch.dtype
        Dtype of the matrix entries. Default is float64.
    device : torch.device, optional
        Device of the matrix entries.

    Returns
    -------
    TridiagonalSystem
        The matrix. It is the same for every scalar dimension.

    Raises
    ------
    ConfigurationError
        If ``n < 2`` or the boundary condition is unknown.

    Notes
    -----
    Interior rows are ``[1, 4, 1]``. The boundary rows are:

    - smooth: ``[2, 1, ...]`` and ``[..., 1, 2]``
    - circular: ``[4, 1, ..., 1]`` and ``[1, ..., 1, 4]``
    - fixed_tangentials: ``[1, 0, ...]`` and ``[..., 0, 1]``, pinning the
      end derivatives to the prescribed values. The matrix is not
      symmetric in this case.
    """
    validate_boundary(boundary)

    if n < 2:
        raise ConfigurationError(
            f"Can't create a spline with less than 2 control points, got {n}"
        )

    diag = [4.0] * n
    upper = [1.0] * (n - 1)
    lower = [1.0] * (n - 1)
    corner = [0.0, 0.0]

    if boundary == SMOOTH:
        diag[0] = 2.0
        diag[-1] = 2.0
    elif boundary == CIRCULAR:
        if n == 2:
            # Both corners coincide with the off-diagonals
            upper[0] = 2.0
            lower[0] = 2.0
        else:
            corner = [1.0, 1.0]
    elif boundary == FIXED_TANGENTIALS:
        diag[0] = 1.0
        upper[0] = 0.0
        diag[-1] = 1.0
        lower[-1] = 0.0

    return TridiagonalSystem(
        diag=torch.tensor(diag, dtype=dtype, device=device),
        upper=torch.tensor(upper, dtype=dtype, device=device),
        lower=torch.tensor(lower, dtype=dtype, device=device),
        corner=torch.tensor(corner, dtype=dtype, device=device),
        batch_size=[],
    )


def build_right_hand_side(
    boundary: str,
    y: Tensor,
    boundary_values: Tensor,
) -> Tensor:
    """
    Build the right-hand side of the derivative system.

    Parameters
    ----------
    boundary : str
        Boundary condition: "smooth", "circular", "fixed_tangentials".
    y : Tensor
        Values, shape (n, n_values). Each column is one scalar dimension.
    boundary_values : Tensor
        ``[d_start, d_end]``, shape (2, n_values). Only read for
        "fixed_tangentials".

    Returns
    -------
    Tensor
        Right-hand side, shape (n, n_values).
    """
    validate_boundary(boundary)

    n = y.shape[0]
    if n < 2:
        raise ConfigurationError(
            f"Can't create a spline with less than 2 control points, got {n}"
        )

    interior = 3 * (y[2:] - y[:-2])  # (n-2, n_values)

    if boundary == CIRCULAR:
        first = 3 * (y[1] - y[-1])
        last = 3 * (y[0] - y[-2])
    elif boundary == SMOOTH:
        first = 3 * (y[1] - y[0])
        last = 3 * (y[-1] - y[-2])
    else:
        first = boundary_values[0].to(y.dtype)
        last = boundary_values[1].to(y.dtype)

    return torch.cat([first.unsqueeze(0), interior, last.unsqueeze(0)], dim=0)
