# src/brownian2d/models.py

# Despre NumPy (np):
#  - Tipul de bază este np.ndarray (aici tablouri 1D: x, y, dx, dy).
#  - Operațiile sunt vectorizate (cumsum în loc de bucle Python).
#  - Zgomotul gaussian vine dintr-un np.random.Generator INJECTAT
#    (rng.standard_normal); nu atingem starea globală np.random.*.
#  - Unități: toate mărimile din cod sunt în SI (m, s), iar array-urile
#    păstrează aceste unități implicit prin valori; comentariile indică unitățile.

import logging
import math
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from .config import DIMS
from .errors import InvalidParameterError, NumericOverflowError

log = logging.getLogger(__name__)


def _frozen(a: np.ndarray) -> np.ndarray:
    a.flags.writeable = False
    return a


@dataclass(frozen=True)
class Trajectory:
    """
    Traiectoria unei singure particule în planul XY.
    Ține:
      - x, y   : poziții absolute (shape = (N,))     [m],  x[0] = y[0] = 0
      - dx, dy : pașii individuali (shape = (N-1,))  [m]
      - tau    : intervalul dintre puncte            [s]

    Relația dintre ele: x[t] = x[t-1] + dx[t-1] (analog pentru y).
    Toate tablourile sunt read-only; traiectoria se produce o singură dată,
    complet, și nu se mai modifică.
    """

    x: np.ndarray
    y: np.ndarray
    dx: np.ndarray
    dy: np.ndarray
    tau: float

    def __len__(self):
        return self.x.shape[0]

    @property
    def n_steps(self) -> int:
        return self.dx.shape[0]

    @property
    def time(self) -> np.ndarray:
        """Timpii discreți t = n τ, n = 0..N-1 [s]."""
        return self.tau * np.arange(len(self))

    @property
    def final_position(self):
        return float(self.x[-1]), float(self.y[-1])


def generate_trajectory(n_points: int, k: float, rng: np.random.Generator,
                        tau: float = 1.0) -> Trajectory:
    """
    Generează o traiectorie gaussiană 2D pornind din origine.

    Parametri
    ---------
    n_points : int
        Numărul de puncte N (>= 2) ⇒ N-1 pași.
    k : float
        Deviația standard per axă a unui pas [m], k = sqrt(2 D τ). k = 0 e valid
        (particulă staționară în origine).
    rng : np.random.Generator
        Sursa de aleator (explicită, cu seed). Fiecare rulare trebuie să aibă
        propriul generator.
    tau : float
        Intervalul de timp [s], păstrat doar pentru axa de timp.

    Algoritm
    --------
    η ~ N(0, 1), shape (N-1, 2): coloana 0 → x, coloana 1 → y. Fiecare pas și
    fiecare axă primesc o extragere proprie (nicio valoare refolosită).
    x = [0, cumsum(k η_x)],  y = [0, cumsum(k η_y)].

    Ridică
    ------
    InvalidParameterError : N < 2, k < 0 sau NaN.
    NumericOverflowError  : k infinit sau poziții ne-finite.
    """
    if isinstance(n_points, bool) or int(n_points) != n_points or n_points < 2:
        raise InvalidParameterError(f"N trebuie să fie un întreg >= 2 (primit {n_points!r}).")
    k = float(k)
    if math.isnan(k) or k < 0.0:
        raise InvalidParameterError(f"k trebuie să fie >= 0 (primit {k!r}).")
    if math.isinf(k):
        raise NumericOverflowError("Scala pasului k este infinită.")

    n_steps = int(n_points) - 1
    eta = rng.standard_normal(size=(n_steps, DIMS))

    with np.errstate(over="ignore", invalid="ignore"):
        steps = k * eta                              # [m]
        dx = np.ascontiguousarray(steps[:, 0])
        dy = np.ascontiguousarray(steps[:, 1])
        x = np.concatenate(([0.0], np.cumsum(dx)))   # scan explicit din origine
        y = np.concatenate(([0.0], np.cumsum(dy)))

    if not (np.all(np.isfinite(x)) and np.all(np.isfinite(y))):
        raise NumericOverflowError(
            f"Traiectoria conține valori ne-finite (k={k:.6g} m este prea mare)."
        )

    log.debug("Traiectorie generată: %d pași, k=%.6g m", n_steps, k)
    return Trajectory(x=_frozen(x), y=_frozen(y), dx=_frozen(dx), dy=_frozen(dy),
                      tau=float(tau))


def independent_generators(seed: Optional[int], count: int) -> List[np.random.Generator]:
    """
    `count` generatoare independente derivate din același seed (SeedSequence.spawn).
    Pentru rulări paralele: fiecare rulare primește generatorul ei, nimic partajat.
    """
    if count < 1:
        raise InvalidParameterError(f"count trebuie să fie >= 1 (primit {count}).")
    children = np.random.SeedSequence(seed).spawn(count)
    return [np.random.default_rng(s) for s in children]
