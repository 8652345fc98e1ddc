"""Tests for Gauss-Lobatto-Legendre points."""

import math

import numpy
import pytest
import torch

from torchbeam import ConvergenceWarning, OrderError
from torchbeam.polynomial import (
    legendre_gauss_lobatto_points,
    legendre_polynomial_derivative,
)


class TestLegendreGaussLobattoPoints:
    """Known node sets."""

    def test_order_1(self):
        """Two nodes are the endpoints."""
        x = legendre_gauss_lobatto_points(1)
        expected = torch.tensor([-1.0, 1.0], dtype=torch.float64)
        assert torch.equal(x, expected)

    def test_order_2(self):
        """Three nodes are [-1, 0, 1]."""
        x = legendre_gauss_lobatto_points(2)
        expected = torch.tensor([-1.0, 0.0, 1.0], dtype=torch.float64)
        torch.testing.assert_close(x, expected, atol=1e-15, rtol=0)

    def test_order_3(self):
        """Interior nodes are +/- 1/sqrt(5)."""
        x = legendre_gauss_lobatto_points(3)
        a = 1 / math.sqrt(5)
        expected = torch.tensor([-1.0, -a, a, 1.0], dtype=torch.float64)
        torch.testing.assert_close(x, expected, atol=1e-15, rtol=0)

    def test_order_4(self):
        """Interior nodes are 0 and +/- sqrt(3/7)."""
        x = legendre_gauss_lobatto_points(4)
        a = math.sqrt(3 / 7)
        expected = torch.tensor(
            [-1.0, -a, 0.0, a, 1.0], dtype=torch.float64
        )
        torch.testing.assert_close(x, expected, atol=1e-15, rtol=0)

    @pytest.mark.parametrize("order", [5, 8, 13, 20])
    def test_matches_numpy_roots(self, order):
        """Interior nodes are the roots of P'_order."""
        coefficients = numpy.polynomial.legendre.legder([0.0] * order + [1.0])
        roots = numpy.sort(numpy.polynomial.legendre.legroots(coefficients))
        expected = torch.from_numpy(numpy.concatenate([[-1.0], roots, [1.0]]))

        x = legendre_gauss_lobatto_points(order)

        torch.testing.assert_close(x, expected, atol=1e-12, rtol=0)


class TestLegendreGaussLobattoPointsProperties:
    """Structural properties for a range of orders."""

    @pytest.mark.parametrize("p", list(range(2, 31)))
    def test_count_sorted_endpoints(self, p):
        x = legendre_gauss_lobatto_points(p - 1)
        assert x.shape == (p,)
        assert (x[1:] > x[:-1]).all()
        assert x[0].item() == -1.0
        assert x[-1].item() == 1.0

    @pytest.mark.parametrize("order", [3, 6, 11, 16])
    def test_symmetry(self, order):
        x = legendre_gauss_lobatto_points(order)
        torch.testing.assert_close(x, -x.flip(0), atol=1e-14, rtol=0)

    @pytest.mark.parametrize("order", [2, 5, 9, 15])
    def test_interior_are_derivative_roots(self, order):
        x = legendre_gauss_lobatto_points(order)
        residual = legendre_polynomial_derivative(order, x[1:-1])
        torch.testing.assert_close(
            residual, torch.zeros_like(residual), atol=1e-10, rtol=0
        )

    def test_dtype(self):
        x = legendre_gauss_lobatto_points(4, dtype=torch.float32)
        assert x.dtype == torch.float32
        a = math.sqrt(3 / 7)
        expected = torch.tensor([-1.0, -a, 0.0, a, 1.0], dtype=torch.float32)
        torch.testing.assert_close(x, expected, atol=1e-6, rtol=0)


class TestLegendreGaussLobattoPointsErrors:
    """Invalid orders and non-convergence."""

    @pytest.mark.parametrize("order", [0, -1])
    def test_order_below_one(self, order):
        with pytest.raises(OrderError, match="at least 1"):
            legendre_gauss_lobatto_points(order)

    def test_max_iterations_below_one(self):
        with pytest.raises(ValueError, match="max_iterations"):
            legendre_gauss_lobatto_points(4, max_iterations=0)

    def test_warns_without_convergence(self):
        with pytest.warns(ConvergenceWarning, match="did not converge"):
            x = legendre_gauss_lobatto_points(12, max_iterations=1)
        assert x.shape == (13,)
