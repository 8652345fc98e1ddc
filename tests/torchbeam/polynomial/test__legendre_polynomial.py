"""Tests for Legendre polynomial evaluation."""

import numpy
import pytest
import torch

from torchbeam import OrderError
from torchbeam.polynomial import (
    legendre_polynomial,
    legendre_polynomial_derivative,
)


class TestLegendrePolynomial:
    """P_k(x) against closed forms and numpy."""

    def test_low_orders(self):
        x = torch.linspace(-1, 1, 9, dtype=torch.float64)
        torch.testing.assert_close(legendre_polynomial(0, x), torch.ones_like(x))
        torch.testing.assert_close(legendre_polynomial(1, x), x)
        torch.testing.assert_close(
            legendre_polynomial(2, x), (3 * x**2 - 1) / 2
        )

    @pytest.mark.parametrize("order", [3, 5, 8, 12])
    def test_matches_numpy(self, order):
        x = torch.linspace(-1, 1, 21, dtype=torch.float64)
        coefficients = [0.0] * order + [1.0]
        expected = numpy.polynomial.legendre.legval(x.numpy(), coefficients)
        torch.testing.assert_close(
            legendre_polynomial(order, x),
            torch.from_numpy(expected),
            atol=1e-13,
            rtol=1e-13,
        )

    def test_value_at_one(self):
        x = torch.tensor([1.0], dtype=torch.float64)
        for order in range(10):
            torch.testing.assert_close(
                legendre_polynomial(order, x),
                torch.ones(1, dtype=torch.float64),
            )

    def test_negative_order(self):
        with pytest.raises(OrderError):
            legendre_polynomial(-1, torch.zeros(1))


class TestLegendrePolynomialDerivative:
    """P'_k(x) against numpy, including the endpoints."""

    @pytest.mark.parametrize("order", [1, 2, 4, 7, 10])
    def test_matches_numpy(self, order):
        x = torch.linspace(-1, 1, 17, dtype=torch.float64)
        coefficients = numpy.polynomial.legendre.legder([0.0] * order + [1.0])
        expected = numpy.polynomial.legendre.legval(x.numpy(), coefficients)
        torch.testing.assert_close(
            legendre_polynomial_derivative(order, x),
            torch.from_numpy(expected),
            atol=1e-11,
            rtol=1e-11,
        )

    @pytest.mark.parametrize("order", [1, 2, 3, 6])
    def test_endpoint_closed_form(self, order):
        x = torch.tensor([-1.0, 1.0], dtype=torch.float64)
        value = order * (order + 1) / 2
        expected = torch.tensor(
            [(-1) ** (order - 1) * value, value], dtype=torch.float64
        )
        torch.testing.assert_close(
            legendre_polynomial_derivative(order, x), expected
        )

    def test_order_zero(self):
        x = torch.linspace(-1, 1, 5, dtype=torch.float64)
        assert torch.equal(
            legendre_polynomial_derivative(0, x), torch.zeros_like(x)
        )
