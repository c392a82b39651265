"""Tests for derivative system assembly."""

import pytest
import torch

from torchspline import (
    ConfigurationError,
    TridiagonalSystem,
    build_linear_system,
    build_right_hand_side,
)


def _tensor(rows):
    return torch.tensor(rows, dtype=torch.float64)


class TestBuildLinearSystem:
    def test_returns_tridiagonal_system(self):
        system = build_linear_system("smooth", 5)

        assert isinstance(system, TridiagonalSystem)
        assert system.diag.shape == (5,)
        assert system.upper.shape == (4,)
        assert system.lower.shape == (4,)
        assert system.corner.shape == (2,)
        assert system.diag.dtype == torch.float64

    def test_smooth(self):
        expected = _tensor(
            [
                [2, 1, 0, 0],
                [1, 4, 1, 0],
                [0, 1, 4, 1],
                [0, 0, 1, 2],
            ]
        )

        torch.testing.assert_close(
            build_linear_system("smooth", 4).to_dense(), expected
        )

    def test_smooth_two_points(self):
        torch.testing.assert_close(
            build_linear_system("smooth", 2).to_dense(),
            _tensor([[2, 1], [1, 2]]),
        )

    def test_circular(self):
        expected = _tensor(
            [
                [4, 1, 0, 1],
                [1, 4, 1, 0],
                [0, 1, 4, 1],
                [1, 0, 1, 4],
            ]
        )

        system = build_linear_system("circular", 4)

        torch.testing.assert_close(system.to_dense(), expected)
        torch.testing.assert_close(system.corner, _tensor([1, 1]))

    def test_circular_three_points(self):
        torch.testing.assert_close(
            build_linear_system("circular", 3).to_dense(),
            _tensor([[4, 1, 1], [1, 4, 1], [1, 1, 4]]),
        )

    def test_circular_two_points_folds_corners(self):
        system = build_linear_system("circular", 2)

        torch.testing.assert_close(system.to_dense(), _tensor([[4, 2], [2, 4]]))
        torch.testing.assert_close(system.corner, _tensor([0, 0]))

    def test_fixed_tangentials(self):
        expected = _tensor(
            [
                [1, 0, 0, 0, 0],
                [1, 4, 1, 0, 0],
                [0, 1, 4, 1, 0],
                [0, 0, 1, 4, 1],
                [0, 0, 0, 0, 1],
            ]
        )

        matrix = build_linear_system("fixed_tangentials", 5).to_dense()

        torch.testing.assert_close(matrix, expected)
        assert not torch.equal(matrix, matrix.T)

    def test_fixed_tangentials_three_points(self):
        torch.testing.assert_close(
            build_linear_system("fixed_tangentials", 3).to_dense(),
            _tensor([[1, 0, 0], [1, 4, 1], [0, 0, 1]]),
        )

    def test_fixed_tangentials_two_points(self):
        torch.testing.assert_close(
            build_linear_system("fixed_tangentials", 2).to_dense(),
            torch.eye(2, dtype=torch.float64),
        )

    @pytest.mark.parametrize("boundary", ["smooth", "circular"])
    def test_symmetric(self, boundary):
        matrix = build_linear_system(boundary, 6).to_dense()

        torch.testing.assert_close(matrix, matrix.T)

    def test_dtype(self):
        system = build_linear_system("smooth", 3, dtype=torch.float32)

        assert system.diag.dtype == torch.float32

    @pytest.mark.parametrize("n", [0, 1])
    def test_too_few_points_raises(self, n):
        with pytest.raises(ConfigurationError):
            build_linear_system("smooth", n)

    def test_unknown_boundary_raises(self):
        with pytest.raises(ConfigurationError):
            build_linear_system("natural", 4)


class TestBuildRightHandSide:
    y = _tensor([[0], [1], [4], [9]])
    zeros = torch.zeros(2, 1, dtype=torch.float64)

    def test_smooth(self):
        rhs = build_right_hand_side("smooth", self.y, self.zeros)

        torch.testing.assert_close(rhs, _tensor([[3], [12], [24], [15]]))

    def test_circular(self):
        rhs = build_right_hand_side("circular", self.y, self.zeros)

        torch.testing.assert_close(rhs, _tensor([[-24], [12], [24], [-12]]))

    def test_fixed_tangentials_uses_boundary_values(self):
        boundary_values = _tensor([[2], [5]])

        rhs = build_right_hand_side(
            "fixed_tangentials", self.y, boundary_values
        )

        torch.testing.assert_close(rhs, _tensor([[2], [12], [24], [5]]))

    def test_per_dimension_columns(self):
        """Each column of y gives an independent right-hand side."""
        y = torch.stack([self.y[:, 0], 2 * self.y[:, 0]], dim=-1)

        rhs = build_right_hand_side(
            "smooth", y, torch.zeros(2, 2, dtype=torch.float64)
        )

        assert rhs.shape == (4, 2)
        torch.testing.assert_close(rhs[:, 1], 2 * rhs[:, 0])

    def test_two_points(self):
        y = _tensor([[1], [3]])

        torch.testing.assert_close(
            build_right_hand_side("smooth", y, self.zeros), _tensor([[6], [6]])
        )
        torch.testing.assert_close(
            build_right_hand_side("circular", y, self.zeros),
            _tensor([[0], [0]]),
        )
