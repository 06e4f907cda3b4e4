import numpy as np
import pytest

from brownian2d.errors import InvalidParameterError, NumericOverflowError
from brownian2d.models import generate_trajectory, independent_generators


@pytest.mark.parametrize("n_points", [2, 3, 17, 1000])
def test_trajectory_starts_at_origin(rng, n_points):
    tr = generate_trajectory(n_points, 0.1414, rng, tau=0.01)
    assert tr.x[0] == 0.0
    assert tr.y[0] == 0.0
    assert len(tr) == tr.x.size == tr.y.size == n_points
    assert tr.dx.size == tr.dy.size == tr.n_steps == n_points - 1
    assert np.all(np.isfinite(tr.x)) and np.all(np.isfinite(tr.y))


def test_positions_accumulate_steps(rng):
    tr = generate_trajectory(100, 2.0, rng)
    np.testing.assert_allclose(np.diff(tr.x), tr.dx, rtol=1e-12, atol=1e-12)
    np.testing.assert_allclose(np.diff(tr.y), tr.dy, rtol=1e-12, atol=1e-12)


def test_same_seed_is_bit_identical():
    a = generate_trajectory(5000, 0.3, np.random.default_rng(7))
    b = generate_trajectory(5000, 0.3, np.random.default_rng(7))
    assert np.array_equal(a.x, b.x)
    assert np.array_equal(a.y, b.y)
    assert np.array_equal(a.dx, b.dx)


def test_different_seeds_differ():
    a = generate_trajectory(100, 0.3, np.random.default_rng(1))
    b = generate_trajectory(100, 0.3, np.random.default_rng(2))
    assert not np.array_equal(a.x, b.x)


def test_trajectory_is_read_only(rng):
    tr = generate_trajectory(10, 1.0, rng)
    with pytest.raises(ValueError):
        tr.x[3] = 42.0
    with pytest.raises(ValueError):
        tr.dx[0] = 42.0


def test_zero_scale_is_stationary(rng):
    tr = generate_trajectory(50, 0.0, rng)
    assert np.all(tr.x == 0.0)
    assert np.all(tr.y == 0.0)


def test_step_variance_per_axis(rng):
    k = 0.5
    tr = generate_trajectory(100_001, k, rng)
    assert np.var(tr.dx) == pytest.approx(k**2, rel=0.02)
    assert np.var(tr.dy) == pytest.approx(k**2, rel=0.02)
    assert abs(np.mean(tr.dx)) < 5 * k / np.sqrt(100_000)


def test_axes_are_independent(rng):
    tr = generate_trajectory(10_001, 1.0, rng)
    assert abs(np.corrcoef(tr.dx, tr.dy)[0, 1]) < 0.05


def test_time_axis(rng):
    tr = generate_trajectory(4, 1.0, rng, tau=0.5)
    np.testing.assert_allclose(tr.time, [0.0, 0.5, 1.0, 1.5])


@pytest.mark.parametrize("n_points", [1, 0, -3])
def test_too_few_points(rng, n_points):
    with pytest.raises(InvalidParameterError):
        generate_trajectory(n_points, 1.0, rng)


@pytest.mark.parametrize("k", [-1.0, float("nan")])
def test_invalid_scale(rng, k):
    with pytest.raises(InvalidParameterError):
        generate_trajectory(10, k, rng)


def test_infinite_scale_overflows(rng):
    with pytest.raises(NumericOverflowError):
        generate_trajectory(10, float("inf"), rng)


def test_huge_scale_overflows(rng):
    with pytest.raises(NumericOverflowError):
        generate_trajectory(1000, 1e308, rng)


def test_independent_generators():
    g1, g2, g3 = independent_generators(123, 3)
    draws = [g.standard_normal(8) for g in (g1, g2, g3)]
    assert not np.array_equal(draws[0], draws[1])
    assert not np.array_equal(draws[1], draws[2])

    again = independent_generators(123, 3)
    assert np.array_equal(again[0].standard_normal(8), draws[0])


def test_independent_generators_count():
    with pytest.raises(InvalidParameterError):
        independent_generators(1, 0)
