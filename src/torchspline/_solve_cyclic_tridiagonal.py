import torch
from torch import Tensor

from ._solve_tridiagonal import solve_tridiagonal
from ._solver_error import SolverError


def solve_cyclic_tridiagonal(
    diag: Tensor,
    upper: Tensor,
    lower: Tensor,
    corner: Tensor,
    rhs: Tensor,
) -> Tensor:
    """
    Solve a cyclic tridiagonal system Ax = b.

    The matrix A is tridiagonal plus two corner entries:
        [d0  u0   0  ...   0    c0 ]
        [l0  d1  u1  ...   0     0 ]
        [        ...               ]
        [c1   0  ...   0   ln-2 dn-1]

    Parameters
    ----------
    diag : Tensor
        Main diagonal, shape (n,)
    upper : Tensor
        Upper diagonal, shape (n-1,)
    lower : Tensor
        Lower diagonal, shape (n-1,)
    corner : Tensor
        Corner entries ``[c0, c1] = [A[0, n-1], A[n-1, 0]]``, shape (2,)
    rhs : Tensor
        Right-hand side, shape (*batch, n)

    Returns
    -------
    Tensor
        Solution x, shape (*batch, n)

    Raises
    ------
    SolverError
        If the system is singular.

    Notes
    -----
    The corners are written as a rank-one update A = T + u v^T with
    u = [g, 0, ..., 0, c1] and v = [1, 0, ..., 0, c0 / g], where g = -d0.
    The Sherman-Morrison formula then gives x from two tridiagonal solves
    with T:

        x = y - (v . y) / (1 + v . z) * z,   T y = b,   T z = u.

    For n < 3 the corners lie on the off-diagonals and are folded into them.
    """
    n = diag.shape[0]

    if n < 3:
        return solve_tridiagonal(
            diag, upper + corner[0], lower + corner[1], rhs
        )

    gamma = -diag[0]

    modified_diag = torch.cat(
        [
            (diag[0] - gamma).unsqueeze(0),
            diag[1:-1],
            (diag[-1] - corner[0] * corner[1] / gamma).unsqueeze(0),
        ]
    )

    u = torch.cat(
        [
            gamma.unsqueeze(0),
            torch.zeros(n - 2, dtype=diag.dtype, device=diag.device),
            corner[1].unsqueeze(0),
        ]
    )

    y = solve_tridiagonal(modified_diag, upper, lower, rhs)
    z = solve_tridiagonal(modified_diag, upper, lower, u)

    v_dot_y = y[..., 0] + corner[0] / gamma * y[..., -1]
    v_dot_z = z[0] + corner[0] / gamma * z[-1]

    denom = 1 + v_dot_z
    if denom == 0:
        raise SolverError("Cyclic tridiagonal system is singular")

    return y - (v_dot_y / denom).unsqueeze(-1) * z
