import numpy as np
import pytest

from brownian2d.errors import NumericOverflowError
from brownian2d.metrics import (compute_displacements, cumulative_squared_displacement,
                                step_squared_displacement, theoretical_msd)
from brownian2d.models import Trajectory, generate_trajectory


@pytest.fixture
def small_trajectory():
    dx = np.array([1.0, -2.0, 0.5])
    dy = np.array([0.0, 1.0, 3.0])
    x = np.concatenate(([0.0], np.cumsum(dx)))
    y = np.concatenate(([0.0], np.cumsum(dy)))
    return Trajectory(x=x, y=y, dx=dx, dy=dy, tau=0.1)


def test_step_squared_displacement(small_trajectory):
    np.testing.assert_allclose(step_squared_displacement(small_trajectory), [1.0, 5.0, 9.25])


def test_cumulative_squared_displacement(small_trajectory):
    # pozițiile: (0,0), (1,0), (-1,1), (-0.5,4)
    np.testing.assert_allclose(cumulative_squared_displacement(small_trajectory),
                               [0.0, 1.0, 2.0, 16.25])


def test_theoretical_msd_scenario():
    msd = theoretical_msd(1.0, 0.01, 2000)
    assert msd.shape == (2000,)
    assert msd[0] == 0.0
    assert msd[1999] == pytest.approx(79.96)


def test_theoretical_msd_dims():
    np.testing.assert_allclose(theoretical_msd(2.0, 1.0, 3, dims=1), [0.0, 4.0, 8.0])


def test_compute_displacements(rng):
    tr = generate_trajectory(2000, 0.1414, rng, tau=0.01)
    ds = compute_displacements(tr, 1.0)
    assert ds.step_sq.shape == (1999,)
    assert ds.cum_sq.shape == ds.msd_theory.shape == (2000,)
    assert ds.cum_sq[0] == 0.0
    assert np.all(ds.step_sq >= 0.0)
    with pytest.raises(ValueError):
        ds.cum_sq[1] = 0.0


def test_squares_overflow_is_detected():
    # pozițiile sunt finite, dar pătratul lor depășește float64
    dx = np.array([1e200, 1.0])
    dy = np.array([0.0, 0.0])
    tr = Trajectory(x=np.concatenate(([0.0], np.cumsum(dx))),
                    y=np.zeros(3), dx=dx, dy=dy, tau=1.0)
    with pytest.raises(NumericOverflowError, match="step_sq"):
        compute_displacements(tr, 1.0)


def test_theoretical_msd_overflow_is_detected(small_trajectory):
    with pytest.raises(NumericOverflowError, match="msd_theory"):
        compute_displacements(small_trajectory, 1e308)
