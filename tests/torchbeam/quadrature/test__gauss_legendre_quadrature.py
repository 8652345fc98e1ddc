import numpy
import pytest
import torch

from torchbeam import ConvergenceWarning, OrderError
from torchbeam.polynomial import legendre_polynomial
from torchbeam.quadrature import gauss_legendre_quadrature, integrate


class TestGaussLegendreQuadrature:
    @pytest.mark.parametrize("n", [2, 3, 5, 8, 16])
    def test_matches_numpy(self, n):
        rule = gauss_legendre_quadrature(n)
        x, w = numpy.polynomial.legendre.leggauss(n)

        assert rule.shape == (n, 2)
        torch.testing.assert_close(
            rule[:, 0], torch.from_numpy(x), atol=1e-14, rtol=0
        )
        torch.testing.assert_close(
            rule[:, 1], torch.from_numpy(w), atol=1e-13, rtol=0
        )

    def test_single_point(self):
        rule = gauss_legendre_quadrature(1)
        torch.testing.assert_close(
            rule, torch.tensor([[0.0, 2.0]], dtype=torch.float64)
        )

    def test_exact_for_degree_2n_minus_1(self):
        rule = gauss_legendre_quadrature(3)
        x = rule[:, 0]
        values = torch.stack([x**4, x**5, 3 * x**2 - 1], dim=-1)

        torch.testing.assert_close(
            integrate(rule, values),
            torch.tensor([0.4, 0.0, 0.0], dtype=torch.float64),
            atol=1e-14,
            rtol=0,
        )

    def test_dtype(self):
        rule = gauss_legendre_quadrature(4, dtype=torch.float32)
        assert rule.dtype == torch.float32

    def test_invalid_order(self):
        with pytest.raises(OrderError):
            gauss_legendre_quadrature(0)

    @pytest.mark.parametrize("n", [4, 7, 12])
    def test_points_are_legendre_roots(self, n):
        rule = gauss_legendre_quadrature(n)
        torch.testing.assert_close(
            legendre_polynomial(n, rule[:, 0]),
            torch.zeros(n, dtype=torch.float64),
            atol=1e-13,
            rtol=0,
        )

    def test_iteration_limit_warns(self):
        with pytest.warns(ConvergenceWarning, match="did not converge"):
            rule = gauss_legendre_quadrature(12, max_iterations=1)

        assert rule.shape == (12, 2)
