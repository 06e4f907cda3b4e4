import math

import numpy as np
import pytest

from brownian2d.config import SimConfig
from brownian2d.errors import InvalidParameterError, NumericOverflowError
from brownian2d.simulator import Simulator


def test_scenario(scenario_config):
    result = Simulator(scenario_config).run()

    assert result.params.k == pytest.approx(math.sqrt(0.02))
    assert result.params.k == pytest.approx(0.1414, abs=1e-4)
    assert result.displacements.msd_theory[1999] == pytest.approx(79.96)
    assert len(result.trajectory) == 2000
    assert result.displacements.step_sq.size == 1999
    assert result.estimate.relative_error < 0.1
    assert result.autocorrelation.at(0) == 1.0


def test_scenario_reproducible(scenario_config):
    a = Simulator(scenario_config).run()
    b = Simulator(scenario_config).run()
    assert np.array_equal(a.trajectory.x, b.trajectory.x)
    assert np.array_equal(a.trajectory.y, b.trajectory.y)
    assert np.array_equal(a.displacements.step_sq, b.displacements.step_sq)
    assert a.estimate == b.estimate


def test_injected_generator(scenario_config):
    a = Simulator(scenario_config, rng=np.random.default_rng(5)).run()
    b = Simulator(scenario_config, rng=np.random.default_rng(5)).run()
    c = Simulator(scenario_config).run()
    assert np.array_equal(a.trajectory.x, b.trajectory.x)
    assert not np.array_equal(a.trajectory.x, c.trajectory.x)


def test_physical_path(water_config):
    result = Simulator(water_config).run()
    assert result.params.source == "stokes-einstein"
    assert result.estimate.D == result.params.D
    assert result.trajectory.x[0] == 0.0 and result.trajectory.y[0] == 0.0


def test_two_points():
    result = Simulator(SimConfig(N=2, tau=0.01, D=1.0, seed=3)).run()
    assert result.trajectory.n_steps == 1
    assert not math.isnan(result.estimate.standard_error)
    assert result.estimate.standard_error == 0.0
    assert math.isnan(result.independence)


def test_max_lag_from_config():
    result = Simulator(SimConfig(N=500, tau=0.01, D=1.0, seed=3, max_lag=20)).run()
    np.testing.assert_array_equal(result.autocorrelation.lags, np.arange(-20, 21))


@pytest.mark.parametrize(
    "cfg",
    [
        SimConfig(N=100, tau=0.01, D=0.0),
        SimConfig(N=100, tau=0.01, d=0.0, eta=1e-3, T=293.0),
        SimConfig(N=100, tau=0.01, d=1e-6, eta=0.0, T=293.0),
        SimConfig(N=100, tau=0.01, d=1e-6, eta=1e-3, T=0.0),
        SimConfig(N=1, tau=0.01, D=1.0),
    ],
)
def test_invalid_config_draws_nothing(cfg):
    rng = np.random.default_rng(11)
    state = rng.bit_generator.state
    with pytest.raises(InvalidParameterError):
        Simulator(cfg, rng=rng).run()
    assert rng.bit_generator.state == state


def test_overflow_aborts_run():
    # D finit, dar 2 D τ = inf ⇒ k infinit
    with pytest.raises(NumericOverflowError):
        Simulator(SimConfig(N=10, tau=10.0, D=1e308, seed=1)).run()


def test_squared_displacement_overflow_aborts_run():
    # k = sqrt(1.6e308) e finit, pozițiile la fel, dar dx^2 + dy^2 și 4 D t nu
    with pytest.raises(NumericOverflowError):
        Simulator(SimConfig(N=20000, tau=1.0, D=8e307, seed=1)).run()


def test_to_frame(scenario_config):
    df = Simulator(scenario_config).run().to_frame()
    assert list(df.columns) == ["t", "x", "y", "cum_sq", "msd_theory"]
    assert len(df) == 2000
    assert df["t"].iloc[-1] == pytest.approx(19.99)
    assert df["cum_sq"].iloc[0] == 0.0


def test_msd_fit_present(scenario_config):
    fit = Simulator(scenario_config).run().msd_fit
    assert fit is not None
    assert fit.n_points == 2000
    assert fit.D_fit > 0
