# src/brownian2d/simulator.py

# Despre NumPy (np):
#  - Tipul de bază este np.ndarray (tablouri 1D: x, y, dx, dy, r^2).
#  - Operațiile sunt vectorizate (cumsum, FFT), fără bucle Python pe pași.
#  - Aleatorul vine dintr-un np.random.Generator propriu fiecărei rulări
#    (np.random.default_rng(seed)); starea globală np.random NU e folosită.
#  - Unități: toate mărimile din cod sunt în SI (m, s, kg), iar array-urile
#    păstrează aceste unități implicit prin valori; comentariile indică unitățile.

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd

from .analyze import (Autocorrelation, DiffusionEstimate, MsdFit, autocorrelation,
                      estimate_diffusion, fit_msd_slope, independence_fraction)
from .config import SimConfig
from .metrics import DisplacementSeries, compute_displacements
from .models import Trajectory, generate_trajectory
from .physics import ResolvedParameters, resolve_parameters

log = logging.getLogger(__name__)

# Fereastra de laguri pe care raportăm fracțiunea de "independență".
INDEPENDENCE_MAX_LAG = 50


@dataclass(frozen=True)
class SimulationResult:
    """Tot ce produce o rulare; read-only, fără persistență pe disc."""

    config: SimConfig
    params: ResolvedParameters
    trajectory: Trajectory
    displacements: DisplacementSeries
    estimate: DiffusionEstimate
    autocorrelation: Autocorrelation
    independence: float
    msd_fit: Optional[MsdFit]

    def to_frame(self) -> pd.DataFrame:
        """Serii temporale pe coloane: t, x, y, cum_sq, msd_theory (unități SI)."""
        tr, ds = self.trajectory, self.displacements
        return pd.DataFrame({
            't': tr.time,
            'x': tr.x,
            'y': tr.y,
            'cum_sq': ds.cum_sq,
            'msd_theory': ds.msd_theory,
        })


class Simulator:
    """
    ORCHESTRATORUL SIMULĂRII (SRP)
    ------------------------------
    • Rezolvă parametrii (D, k) din SimConfig; validare ÎNAINTE de orice aleator.
    • Generează traiectoria (un singur pas, un singur generator).
    • Calculează seriile de deplasare și MSD-ul teoretic.
    • Estimează D̂ ± SE și autocorelația lui dx.

    Fiecare etapă depinde strict de precedenta; o eroare oprește rularea
    (nu se întoarce niciun rezultat parțial). Nu se fac reîncercări.

    Obiectul nu ține stare între rulări: `run()` produce un SimulationResult nou.
    """

    def __init__(self, cfg: SimConfig, rng: Optional[np.random.Generator] = None):
        self.cfg = cfg
        # Rezolvare parametri (poate ridica InvalidParameterError)
        self.params = resolve_parameters(cfg)
        # Generator propriu; cu același seed ⇒ traiectorii identice bit cu bit
        self.rng = rng if rng is not None else np.random.default_rng(cfg.seed)

    def run(self) -> SimulationResult:
        cfg, p = self.cfg, self.params
        log.info("Simulare: N=%d, tau=%g s, D=%.6g m^2/s", cfg.N, p.tau, p.D)

        trajectory = generate_trajectory(cfg.N, p.k, self.rng, tau=p.tau)
        displacements = compute_displacements(trajectory, p.D)
        estimate = estimate_diffusion(displacements.step_sq, p.D, p.tau)

        acf = autocorrelation(trajectory.dx, max_lag=cfg.max_lag)
        independence = independence_fraction(acf, max_lag=INDEPENDENCE_MAX_LAG)
        log.info("Autocorelație dx: %.1f%% din lagurile 1..%d în ±2/sqrt(N)",
                 100.0 * independence, INDEPENDENCE_MAX_LAG)

        msd_fit = fit_msd_slope(trajectory.time, displacements.cum_sq)

        return SimulationResult(
            config=cfg,
            params=p,
            trajectory=trajectory,
            displacements=displacements,
            estimate=estimate,
            autocorrelation=acf,
            independence=independence,
            msd_fit=msd_fit,
        )
