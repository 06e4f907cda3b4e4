# src/brownian2d/metrics.py

# Despre NumPy (np):
#  - Toate calculele sunt vectorizate, fără bucle Python; complexitate O(N).
#  - Nu există aleator aici: rezultatele depind doar de traiectorie și de D, τ.
#  - Unități: r^2 în [m^2], t în [s].

from dataclasses import dataclass

import numpy as np

from .config import DIMS
from .errors import NumericOverflowError
from .models import Trajectory


def _frozen(a: np.ndarray) -> np.ndarray:
    a.flags.writeable = False
    return a


@dataclass(frozen=True)
class DisplacementSeries:
    """
    step_sq    : dx^2 + dy^2 pentru fiecare pas, shape (N-1,)  [m^2]
    cum_sq     : x^2 + y^2 față de origine, shape (N,)         [m^2], cum_sq[0] = 0
    msd_theory : 2 * dims * D * t, shape (N,)                   [m^2]
    """

    step_sq: np.ndarray
    cum_sq: np.ndarray
    msd_theory: np.ndarray


def step_squared_displacement(traj: Trajectory) -> np.ndarray:
    """
    Pătratul deplasării la fiecare pas individual.

    Returnează
    ----------
    np.ndarray, shape (N-1,)
        dx[t]^2 + dy[t]^2 [m^2]. Pentru pași gaussieni i.i.d. cu deviația k pe
        axă, step_sq / k^2 ~ χ²(2) (exponențial, medie 2 k^2 = 4 D τ).
    """
    return traj.dx ** 2 + traj.dy ** 2


def cumulative_squared_displacement(traj: Trajectory) -> np.ndarray:
    """Distanța la pătrat față de origine, x[t]^2 + y[t]^2, shape (N,) [m^2]."""
    return traj.x ** 2 + traj.y ** 2


def theoretical_msd(D: float, tau: float, n_points: int, dims: int = DIMS) -> np.ndarray:
    """
    MSD teoretic (Einstein):  ⟨r^2(t)⟩ = 2 * dims * D * t,  t = n τ.

    Nu depinde de nicio extragere aleatoare; pentru dims = 2: 4 D t.
    """
    t = tau * np.arange(n_points)
    return 2.0 * dims * D * t


def compute_displacements(traj: Trajectory, D: float) -> DisplacementSeries:
    """
    Toate seriile derivate din traiectorie, calculate o singură dată.

    Ridică NumericOverflowError dacă un pătrat (sau 4 D t) depășește float64,
    chiar dacă pozițiile însele sunt finite.
    """
    with np.errstate(over="ignore", invalid="ignore"):
        step_sq = step_squared_displacement(traj)
        cum_sq = cumulative_squared_displacement(traj)
        msd_theory = theoretical_msd(D, traj.tau, len(traj))
    for name, a in (("step_sq", step_sq), ("cum_sq", cum_sq), ("msd_theory", msd_theory)):
        if not np.all(np.isfinite(a)):
            raise NumericOverflowError(f"{name} conține valori nefinite (depășire float64).")
    return DisplacementSeries(
        step_sq=_frozen(step_sq),
        cum_sq=_frozen(cum_sq),
        msd_theory=_frozen(msd_theory),
    )
