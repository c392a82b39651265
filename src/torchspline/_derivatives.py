from __future__ import annotations

from typing import Optional, Sequence, Union

import torch
from torch import Tensor

from ._boundary_condition import as_boundary_values
from ._configuration_error import ConfigurationError
from ._linear_system import (
    TridiagonalSystem,
    build_linear_system,
    build_right_hand_side,
)
from ._solve_cyclic_tridiagonal import solve_cyclic_tridiagonal
from ._solve_tridiagonal import solve_tridiagonal


def _solve(system: TridiagonalSystem, rhs: Tensor) -> Tensor:
    if torch.any(system.corner != 0):
        return solve_cyclic_tridiagonal(
            system.diag, system.upper, system.lower, system.corner, rhs
        )
    return solve_tridiagonal(system.diag, system.upper, system.lower, rhs)


def solve_derivatives(
    values: Tensor,
    boundary: str = "smooth",
    boundary_values: Optional[Union[Tensor, Sequence]] = None,
) -> Tensor:
    """
    Solve for the derivative at every control point.

    Parameters
    ----------
    values : Tensor
        Values at the control points, shape (n_points, *value_shape).
    boundary : str
        Boundary condition: "smooth", "circular", "fixed_tangentials".
    boundary_values : Tensor or sequence, optional
        For "fixed_tangentials": derivatives at the first and last control
        point, shape (2, *value_shape).

    Returns
    -------
    Tensor
        Derivatives, shape (n_points, *value_shape) and dtype of ``values``.
        They are per unit of the local segment parameter, i.e. for unit
        spacing between control points.

    Raises
    ------
    ConfigurationError
        If there are fewer than 2 control points or the boundary condition
        is invalid.
    SolverError
        If the system is singular.

    Notes
    -----
    Every scalar component is solved independently against the same
    matrix, in float64. A component whose right-hand side is identically
    zero has zero derivatives and is not passed to the solver.
    """
    n = values.shape[0]
    if n < 2:
        raise ConfigurationError(
            f"Can't create a spline with less than 2 control points, got {n}"
        )

    bv = as_boundary_values(boundary, boundary_values, values)

    y = values.reshape(n, -1).to(torch.float64)  # (n, n_values)
    bv = bv.reshape(2, -1).to(torch.float64)

    system = build_linear_system(
        boundary, n, dtype=torch.float64, device=values.device
    )
    rhs = build_right_hand_side(boundary, y, bv)  # (n, n_values)

    columns = []
    for dimension in range(rhs.shape[1]):
        rhs_dimension = rhs[:, dimension]
        if not torch.any(rhs_dimension != 0):
            columns.append(torch.zeros_like(rhs_dimension))
        else:
            columns.append(_solve(system, rhs_dimension))

    derivatives = torch.stack(columns, dim=-1)

    return derivatives.to(values.dtype).reshape(values.shape)
