"""Tests for conversion of control point values."""

import pytest
import torch

from torchspline import ConfigurationError, DataPoint
from torchspline._data_point import (
    as_arguments_tensor,
    as_query_tensor,
    as_values_tensor,
)


class Vector:
    """Minimal two-component value implementing the DataPoint protocol."""

    scalar_count = 2

    def __init__(self, dx, dy):
        self.components = [dx, dy]

    def __getitem__(self, index):
        return self.components[index]

    def __setitem__(self, index, value):
        self.components[index] = value

    def __add__(self, other):
        return Vector(self[0] + other[0], self[1] + other[1])

    def __rmul__(self, scalar):
        return Vector(scalar * self[0], scalar * self[1])

    def __sub__(self, other):
        return self + (-1 * other)


class TestDataPoint:
    def test_protocol(self):
        assert isinstance(Vector(1.0, 2.0), DataPoint)
        assert not isinstance((1.0, 2.0), DataPoint)
        assert not isinstance(1.0, DataPoint)

    def test_vector_arithmetic(self):
        """Subtraction is addition of the point scaled by -1."""
        difference = Vector(3.0, 1.0) - Vector(1.0, 2.0)

        assert difference[0] == 2.0
        assert difference[1] == -1.0


class TestAsValuesTensor:
    def test_floats(self):
        values = as_values_tensor([0.0, 1.0, 2.5])

        assert values.shape == (3,)
        assert values.dtype == torch.get_default_dtype()

    def test_ints_are_promoted(self):
        values = as_values_tensor(torch.tensor([0, 1, 2]))

        assert values.is_floating_point()

    def test_tensor_dtype_preserved(self):
        values = as_values_tensor(torch.zeros(4, 2, dtype=torch.float64))

        assert values.dtype == torch.float64
        assert values.shape == (4, 2)

    def test_tuples(self):
        values = as_values_tensor([(0.0, 1.0), (2.0, 3.0)], dtype=torch.float64)

        torch.testing.assert_close(
            values, torch.tensor([[0.0, 1.0], [2.0, 3.0]], dtype=torch.float64)
        )

    def test_data_points(self):
        values = as_values_tensor(
            [Vector(0.0, 1.0), Vector(2.0, 3.0)], dtype=torch.float64
        )

        torch.testing.assert_close(
            values, torch.tensor([[0.0, 1.0], [2.0, 3.0]], dtype=torch.float64)
        )

    def test_list_of_tensors_infers_dtype(self):
        values = as_values_tensor(
            [torch.tensor([0.0, 1.0], dtype=torch.float64)] * 3
        )

        assert values.dtype == torch.float64
        assert values.shape == (3, 2)

    def test_ragged_points_raise(self):
        with pytest.raises(ConfigurationError):
            as_values_tensor([(0.0, 1.0), (2.0, 3.0, 4.0)])

    def test_empty_raises(self):
        with pytest.raises(ConfigurationError):
            as_values_tensor([])

    def test_non_numeric_raises(self):
        with pytest.raises(ConfigurationError):
            as_values_tensor([object(), object()])

    def test_scalar_tensor_raises(self):
        with pytest.raises(ConfigurationError):
            as_values_tensor(torch.tensor(1.0))


class TestAsArgumentsTensor:
    def test_default_arguments(self):
        arguments = as_arguments_tensor(None, 4, dtype=torch.float64)

        torch.testing.assert_close(
            arguments, torch.tensor([0.0, 1.0, 2.0, 3.0], dtype=torch.float64)
        )

    def test_sequence(self):
        arguments = as_arguments_tensor([0, 0.1, 0.5], 3, dtype=torch.float32)

        assert arguments.dtype == torch.float32
        assert arguments.shape == (3,)

    def test_length_mismatch_raises(self):
        with pytest.raises(ConfigurationError):
            as_arguments_tensor([0.0, 1.0], 3, dtype=torch.float64)


class TestAsQueryTensor:
    def test_float(self):
        like = torch.zeros(2, dtype=torch.float64)

        t = as_query_tensor(1.5, like)

        assert t.dim() == 0
        assert t.dtype == torch.float64

    def test_tensor(self):
        like = torch.zeros(2, dtype=torch.float64)

        t = as_query_tensor(torch.tensor([1, 2]), like)

        assert t.dtype == torch.float64
