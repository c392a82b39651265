import torch
from torch import Tensor

from ._configuration_error import ConfigurationError
from ._solver_error import SolverError


def solve_tridiagonal(
    diag: Tensor,
    upper: Tensor,
    lower: Tensor,
    rhs: Tensor,
) -> Tensor:
    """
    Solve a tridiagonal system Ax = b using the Thomas algorithm.

    The matrix A has the form:
        [d0  u0   0   0  ...  0   0 ]
        [l0  d1  u1   0  ...  0   0 ]
        [ 0  l1  d2  u2  ...  0   0 ]
        [        ...                ]
        [ 0   0   0   0  ... ln-2 dn-1]

    Parameters
    ----------
    diag : Tensor
        Main diagonal, shape (n,)
    upper : Tensor
        Upper diagonal, shape (n-1,)
    lower : Tensor
        Lower diagonal, shape (n-1,)
    rhs : Tensor
        Right-hand side, shape (*batch, n)

    Returns
    -------
    Tensor
        Solution x, shape (*batch, n)

    Raises
    ------
    SolverError
        If elimination hits a zero pivot, i.e. the solution is not finite.

    Notes
    -----
    No pivoting is done; the spline matrices are diagonally dominant.
    The sweeps build lists instead of writing in place, so gradients flow
    through the solve.
    """
    n = diag.shape[0]

    if upper.shape[0] != n - 1 or lower.shape[0] != n - 1:
        raise ConfigurationError(
            f"Off-diagonals must have length {n - 1}, "
            f"got {upper.shape[0]} and {lower.shape[0]}"
        )
    if rhs.shape[-1] != n:
        raise ConfigurationError(
            f"Right-hand side must have length {n}, got {rhs.shape[-1]}"
        )

    # (*batch, n) -> (n, *batch)
    rhs_t = rhs.movedim(-1, 0)

    if n == 1:
        x = rhs_t / diag[0]
        if not torch.all(torch.isfinite(x)):
            raise SolverError("Tridiagonal system is singular")
        return x.movedim(0, -1)

    # Forward elimination
    c_prime = [upper[0] / diag[0]]
    d_prime = [rhs_t[0] / diag[0]]

    for i in range(1, n):
        denom = diag[i] - lower[i - 1] * c_prime[i - 1]
        if i < n - 1:
            c_prime.append(upper[i] / denom)
        d_prime.append((rhs_t[i] - lower[i - 1] * d_prime[i - 1]) / denom)

    # Back substitution
    x_reversed = [d_prime[n - 1]]
    for i in range(n - 2, -1, -1):
        x_reversed.append(d_prime[i] - c_prime[i] * x_reversed[-1])

    x = torch.stack(x_reversed[::-1], dim=0)

    if not torch.all(torch.isfinite(x)):
        raise SolverError(
            "Tridiagonal system is singular: elimination hit a zero pivot"
        )

    return x.movedim(0, -1)
