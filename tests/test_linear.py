import pytest

from multicalc.errors import DimensionMismatch, DomainError, SingularSystem
from multicalc.solvers.linear import LinearSystem, solve, solve_quadratic


def test_two_by_two():
    assert solve([[1, 1], [1, -1]], [3, 1]) == pytest.approx([2.0, 1.0])


def test_three_by_three():
    coefficients = [[2, 1, -1], [-3, -1, 2], [-2, 1, 2]]
    constants = [8, -11, -3]
    assert solve(coefficients, constants) == pytest.approx([2.0, 3.0, -1.0])


def test_single_equation():
    assert solve([[4]], [2]) == pytest.approx([0.5])


def test_linear_system_object():
    system = LinearSystem([[3, 2], [1, 2]], [7, 5])
    assert system.size == 2
    assert system.solve() == pytest.approx([1.0, 2.0])


@pytest.mark.parametrize("coefficients, constants", [
    ([[1, 2], [2, 4]], [3, 6]),
    ([[1, 2], [2, 4]], [3, 7]),
    ([[0, 0], [0, 0]], [0, 0]),
])
def test_singular_systems(coefficients, constants):
    with pytest.raises(SingularSystem):
        solve(coefficients, constants)


def test_zero_leading_pivot_is_reported_without_row_exchange():
    with pytest.raises(SingularSystem):
        solve([[0, 1], [1, 0]], [1, 1])


@pytest.mark.parametrize("coefficients, constants", [
    ([], []),
    ([[1, 2]], [1]),
    ([[1, 2], [3, 4]], [1]),
    ([[1, 2], [3]], [1, 2]),
])
def test_shape_errors(coefficients, constants):
    with pytest.raises(DimensionMismatch):
        solve(coefficients, constants)


def test_quadratic_real_roots():
    assert solve_quadratic(1, -3, 2) == pytest.approx((2.0, 1.0))


def test_quadratic_double_root():
    assert solve_quadratic(1, 2, 1) == (-1.0, -1.0)


def test_quadratic_complex_roots():
    first, second = solve_quadratic(1, 0, 1)
    assert first == pytest.approx(1j)
    assert second == pytest.approx(-1j)


def test_quadratic_requires_leading_coefficient():
    with pytest.raises(DomainError):
        solve_quadratic(0, 2, 1)


def test_small_magnitude_system_is_not_singular():
    assert solve([[1e-13, 0], [0, 1e-13]], [1e-13, 1e-13]) == pytest.approx([1.0, 1.0])


def test_scaled_three_by_three():
    scale = 1e-14
    coefficients = [[2 * scale, scale, -scale], [-3 * scale, -scale, 2 * scale], [-2 * scale, scale, 2 * scale]]
    constants = [8 * scale, -11 * scale, -3 * scale]
    assert solve(coefficients, constants) == pytest.approx([2.0, 3.0, -1.0])


def test_tolerance_scales_with_large_coefficients():
    with pytest.raises(SingularSystem):
        solve([[1e20, 1e20], [1, 1 + 1e-9]], [1, 1])
