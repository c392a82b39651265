"""Tests for the Hermite-to-cubic coefficient transform."""

import pytest
import torch

from torchspline import ConfigurationError, hermite_coefficients


class TestHermiteCoefficients:
    def test_shape(self):
        values = torch.zeros(5, 2, dtype=torch.float64)
        derivatives = torch.zeros(5, 2, dtype=torch.float64)

        coeffs = hermite_coefficients(values, derivatives)

        assert coeffs.shape == (4, 4, 2)

    def test_known_segment(self):
        values = torch.tensor([1.0, 3.0], dtype=torch.float64)
        derivatives = torch.tensor([0.5, -1.0], dtype=torch.float64)

        coeffs = hermite_coefficients(values, derivatives)

        # a = 1, b = 0.5, c = 3*2 - 1 + 1 = 6, d = 2*(-2) + 0.5 - 1 = -4.5
        torch.testing.assert_close(
            coeffs[0], torch.tensor([1.0, 0.5, 6.0, -4.5], dtype=torch.float64)
        )

    def test_hermite_property(self):
        """Each cubic matches values and derivatives at both ends."""
        torch.manual_seed(0)
        values = torch.randn(6, 3, dtype=torch.float64)
        derivatives = torch.randn(6, 3, dtype=torch.float64)

        coeffs = hermite_coefficients(values, derivatives)
        a, b, c, d = coeffs.unbind(dim=1)

        torch.testing.assert_close(a, values[:-1])
        torch.testing.assert_close(a + b + c + d, values[1:])
        torch.testing.assert_close(b, derivatives[:-1])
        torch.testing.assert_close(b + 2 * c + 3 * d, derivatives[1:])

    def test_shape_mismatch_raises(self):
        values = torch.zeros(5, dtype=torch.float64)
        derivatives = torch.zeros(4, dtype=torch.float64)

        with pytest.raises(ConfigurationError):
            hermite_coefficients(values, derivatives)
