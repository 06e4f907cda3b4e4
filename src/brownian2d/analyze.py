# src/brownian2d/analyze.py
"""
Estimarea coeficientului de difuzie și validarea independenței pașilor.

Calculează, pe baza seriilor din `metrics`:
  - D̂ = ⟨dx^2 + dy^2⟩ / (2 * dims * τ)
  - eroarea standard:  std(step_sq) / (2 * dims * τ * sqrt(N-1))
  - eroarea relativă:  |D - D̂| / D   (doar diagnostic; NU e o condiție de eșec)

Suplimentar:
  - autocorelația normată a lui dx (convenția xcorr 'coeff': fără centrare,
    împărțit la valoarea de la lag 0 ⇒ exact 1 la lag 0);
  - fracțiunea coeficienților de la lag ≠ 0 aflați în banda ±2/sqrt(N);
  - fit liniar al lui r^2(t) pentru o singură particulă (panta ≈ 2 * dims * D).
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd

from .config import DIMS
from .errors import InvalidParameterError
from .physics import require_positive

log = logging.getLogger(__name__)

# ------------------------- Estimare D -------------------------


@dataclass(frozen=True)
class DiffusionEstimate:
    D_hat: float            # [m^2/s]
    standard_error: float   # [m^2/s]
    relative_error: float   # adimensional
    D: float                # valoarea de referință [m^2/s]
    n_steps: int

    @property
    def actual_error(self) -> float:
        """D - D̂ [m^2/s] (cu semn)."""
        return self.D - self.D_hat

    @property
    def relative_standard_error(self) -> float:
        return self.standard_error / self.D


def estimate_diffusion(step_sq: np.ndarray, D: float, tau: float,
                       dims: int = DIMS) -> DiffusionEstimate:
    """
    Estimează D din media pătratelor pașilor.

    Parametri
    ---------
    step_sq : np.ndarray, shape (N-1,)
        dx^2 + dy^2 pentru fiecare pas [m^2].
    D : float
        Coeficientul de referință [m^2/s] (pentru eroarea relativă).
    tau : float
        Intervalul de timp [s].

    Detalii
    -------
    • std de eșantion (ddof=1, ca `std` din MATLAB); pentru N = 2 (un singur
      pas) std este 0, deci eroarea standard e 0, nu NaN.
    • D̂ → D și SE → 0 ca 1/sqrt(N); pentru N finit NU ne așteptăm la D̂ = D.
    """
    D = require_positive("D", D)
    tau = require_positive("tau", tau)
    step_sq = np.asarray(step_sq, dtype=float)
    n = step_sq.size
    if n < 1:
        raise InvalidParameterError("Este nevoie de cel puțin un pas (N >= 2).")

    denom = 2.0 * dims * tau
    D_hat = float(step_sq.mean() / denom)
    std = float(step_sq.std(ddof=1)) if n > 1 else 0.0
    se = std / (denom * math.sqrt(n))
    rel = abs(D - D_hat) / D

    log.info("D_hat=%.6g m^2/s, SE=%.3g, eroare relativă=%.2f%%", D_hat, se, 100.0 * rel)
    return DiffusionEstimate(D_hat=D_hat, standard_error=se, relative_error=rel,
                             D=D, n_steps=n)


# ------------------------- Autocorelație -------------------------


@dataclass(frozen=True)
class Autocorrelation:
    lags: np.ndarray          # întregi, simetrici: -L..L
    coefficients: np.ndarray  # coefficients[lags == 0] == 1.0
    n_samples: int            # lungimea seriei analizate

    def at(self, lag: int) -> float:
        idx = int(lag) + (self.lags.size - 1) // 2
        if not 0 <= idx < self.lags.size:
            raise KeyError(lag)
        return float(self.coefficients[idx])

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({"lag": self.lags, "coefficient": self.coefficients})


def autocorrelation(series: np.ndarray, max_lag: Optional[int] = None) -> Autocorrelation:
    """
    Autocorelația normată a unei serii (tipic dx) la laguri întregi.

    c(m) = Σ_n s[n+m] s[n] / Σ_n s[n]^2,   m = -L..L,  L = min(max_lag, len-1)

    • Calcul prin FFT (zero-padding la 2^p >= 2 len - 1) ⇒ O(N log N).
    • Fără scăderea mediei (convenția xcorr 'coeff').
    • Lag 0 este exact 1.0 prin construcție; pentru o serie identic nulă
      (k = 0) coeficienții de la lag ≠ 0 sunt 0.
    • Seria de intrare nu este modificată.
    """
    s = np.asarray(series, dtype=float)
    n = s.size
    if n < 1:
        raise InvalidParameterError("Autocorelația cere o serie nevidă.")
    if max_lag is None:
        L = n - 1
    else:
        if max_lag < 0:
            raise InvalidParameterError(f"max_lag trebuie să fie >= 0 (primit {max_lag}).")
        L = min(int(max_lag), n - 1)

    peak = float(np.max(np.abs(s)))
    if peak == 0.0 or L == 0:
        half = np.zeros(L + 1)
    else:
        # normare la max|s|: pașii fizici (~1e-7 m) nu mai dau underflow la pătrat
        n_fft = 1 << int(math.ceil(math.log2(2 * n - 1)))
        f = np.fft.rfft(s / peak, n_fft)
        c = np.fft.irfft(f * np.conj(f), n_fft)[: L + 1]
        half = c / c[0]
    half[0] = 1.0

    coeffs = np.concatenate((half[:0:-1], half))
    lags = np.arange(-L, L + 1)
    coeffs.flags.writeable = False
    lags.flags.writeable = False
    return Autocorrelation(lags=lags, coefficients=coeffs, n_samples=n)


def independence_band(n_samples: int) -> float:
    """Banda ±2/sqrt(N) în care cad ~95% din coeficienți pentru pași independenți."""
    return 2.0 / math.sqrt(n_samples)


def independence_fraction(acf: Autocorrelation, max_lag: Optional[int] = None,
                          band: Optional[float] = None) -> float:
    """
    Fracțiunea coeficienților cu 1 <= |lag| <= max_lag aflați în ±band.
    Întoarce NaN dacă nu există niciun lag ≠ 0 (ex. N = 2).
    """
    if band is None:
        band = independence_band(acf.n_samples)
    mask = acf.lags != 0
    if max_lag is not None:
        mask &= np.abs(acf.lags) <= max_lag
    if not np.any(mask):
        return float("nan")
    return float(np.mean(np.abs(acf.coefficients[mask]) <= band))


# ------------------------- Fitting -------------------------


@dataclass(frozen=True)
class MsdFit:
    slope: float      # [m^2/s]
    intercept: float  # [m^2]
    D_fit: float      # slope / (2 * dims) [m^2/s]
    n_points: int


def try_linear_fit(t_sel: np.ndarray, y_sel: np.ndarray):
    """Întoarce (m, b) sau None dacă sunt prea puține puncte."""
    if t_sel.size < 2:
        return None
    m, b = np.polyfit(t_sel, y_sel, deg=1)
    return float(m), float(b)


def fit_msd_slope(time: np.ndarray, cum_sq: np.ndarray, dims: int = DIMS) -> Optional[MsdFit]:
    """
    Fit liniar r^2(t) = m t + b pe întreaga traiectorie.

    Pentru o singură particulă curba e foarte zgomotoasă, deci D_fit = m / (2 dims)
    e mult mai imprecis decât D̂ din pași; îl raportăm doar comparativ.
    """
    t = np.asarray(time, dtype=float)
    y = np.asarray(cum_sq, dtype=float)
    fit = try_linear_fit(t, y)
    if fit is None:
        log.debug("Fit MSD: insuficiente puncte, skip.")
        return None
    m, b = fit
    return MsdFit(slope=m, intercept=b, D_fit=m / (2.0 * dims), n_points=int(t.size))
