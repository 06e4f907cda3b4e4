import numpy as np
import pytest

from brownian2d.config import SimConfig

SEED = 20240917


@pytest.fixture
def rng():
    return np.random.default_rng(SEED)


@pytest.fixture
def scenario_config() -> SimConfig:
    """N=2000, τ=0.01 s, D=1.0 m^2/s, seed fix."""
    return SimConfig(N=2000, tau=0.01, D=1.0, seed=SEED)


@pytest.fixture
def water_config() -> SimConfig:
    """Sferă de 1 µm în apă la 293 K (parametrii scriptului de laborator)."""
    return SimConfig(N=2000, tau=0.01, d=1.0e-6, eta=1.0e-3, T=293.0, kB=1.38e-23, seed=SEED)
