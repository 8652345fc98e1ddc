import pytest
import torch

from torchbeam import ShapeError
from torchbeam.quadrature import integrate, trapezoidal_quadrature


class TestIntegrate:
    def test_linear_function(self):
        rule = trapezoidal_quadrature([0.0, 0.3, 1.0])
        values = 2 * rule[:, 0] + 1

        torch.testing.assert_close(
            integrate(rule, values),
            torch.tensor(2.0, dtype=torch.float64),
        )

    def test_jacobian(self):
        """Integral over a beam of length 4 has jacobian 4 / 2."""
        rule = trapezoidal_quadrature([0.0, 1.0, 2.5, 4.0])
        values = torch.full((4,), 3.0, dtype=torch.float64)

        torch.testing.assert_close(
            integrate(rule, values, jacobian=2.0),
            torch.tensor(12.0, dtype=torch.float64),
        )

    def test_matrix_valued(self):
        rule = trapezoidal_quadrature([0.0, 0.5, 1.0])
        eye = torch.eye(6, dtype=torch.float64)
        values = torch.stack([eye, 2 * eye, 3 * eye])

        result = integrate(rule, values)

        assert result.shape == (6, 6)
        torch.testing.assert_close(result, 4 * eye)

    def test_promotes_dtype(self):
        rule = trapezoidal_quadrature([0.0, 1.0])
        values = torch.ones(2, dtype=torch.float32)

        assert integrate(rule, values).dtype == torch.float64

    def test_invalid_rule(self):
        with pytest.raises(ShapeError):
            integrate(torch.ones(3, 3), torch.ones(3))

    def test_mismatched_values(self):
        rule = trapezoidal_quadrature([0.0, 0.5, 1.0])
        with pytest.raises(ShapeError):
            integrate(rule, torch.ones(4, dtype=torch.float64))

    def test_scalar_values(self):
        rule = trapezoidal_quadrature([0.0, 0.5, 1.0])
        with pytest.raises(ShapeError):
            integrate(rule, torch.tensor(1.0))
