# src/brownian2d/physics.py

# Despre NumPy (np):
#  - Aici NU există aleator: rezolvarea lui D și a lui k e deterministă
#    (aceleași intrări ⇒ exact același D, bit cu bit).
#  - Unități: toate mărimile din cod sunt în SI (m, s, kg), iar array-urile
#    păstrează aceste unități implicit prin valori; comentariile indică unitățile.

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Optional

from .config import SimConfig
from .errors import InvalidParameterError

log = logging.getLogger(__name__)


# =============================================================================
# STOKES–EINSTEIN
# -----------------------------------------------------------------------------
# Sferă de diametru d într-un fluid vâscos (regim Stokes, fără inerție):
#   γ = 3 π η d              [kg/s]   (frecarea Stokes, cu raza a = d/2: 6 π η a)
#   D = k_B T / γ            [m^2/s]
#
# Proporționalități (exacte în virgulă mobilă pentru factori de 2):
#   D ∝ T,   D ∝ 1/η,   D ∝ 1/d.
# =============================================================================

def stokes_drag(eta: float, d: float) -> float:
    """Coeficientul de frecare Stokes γ = 3 π η d [kg/s]."""
    return 3.0 * math.pi * eta * d


def stokes_einstein(kB: float, T: float, eta: float, d: float) -> float:
    """D = k_B T / (3 π η d) [m^2/s]."""
    return kB * T / stokes_drag(eta, d)


# =============================================================================
# SCALA PASULUI (random walk gaussian, per axă)
# -----------------------------------------------------------------------------
#   dx, dy ~ N(0, k^2) i.i.d.,   k = sqrt(2 D τ)
#   ⇒ ⟨dx^2⟩ = ⟨dy^2⟩ = 2 D τ  și  ⟨dx^2 + dy^2⟩ = 4 D τ.
#
# Notă: varianta "polară" (pas de modul fix sqrt(4 D τ), unghi uniform) dă același
# ⟨dr^2⟩, dar NU o amestecăm cu metoda gaussiană; aici folosim doar k = sqrt(2 D τ).
# =============================================================================

def step_scale(D: float, tau: float) -> float:
    """Deviația standard per axă a unui pas, k = sqrt(2 D τ) [m]."""
    return math.sqrt(2.0 * D * tau)


@dataclass(frozen=True)
class ResolvedParameters:
    """
    Rezultatul rezolvării parametrilor.

    D      : coeficientul de difuzie folosit în simulare [m^2/s]
    k      : deviația standard per axă a pasului [m]
    tau    : intervalul de timp [s]
    source : "direct" sau "stokes-einstein"
    gamma  : frecarea Stokes 3 π η d [kg/s] (doar pe calea fizică, pentru raport)
    """

    D: float
    k: float
    tau: float
    source: str
    gamma: Optional[float] = None


def require_positive(name: str, value) -> float:
    # bool e subclasă de int; nu îl acceptăm ca număr.
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameterError(f"{name} trebuie să fie un număr real, nu {value!r}.")
    value = float(value)
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidParameterError(f"{name} trebuie să fie finit și > 0 (primit {value!r}).")
    return value


def _require_steps(N) -> int:
    if isinstance(N, bool) or not isinstance(N, numbers.Integral):
        raise InvalidParameterError(f"N trebuie să fie un întreg, nu {N!r}.")
    if N < 2:
        raise InvalidParameterError(f"N trebuie să fie >= 2 (primit {N}).")
    return int(N)


def resolve_parameters(cfg: SimConfig) -> ResolvedParameters:
    """
    Validează configurația și calculează (D, k).

    Reguli
    ------
    • N întreg >= 2, τ > 0 finit.
    • Exact una din căi: D direct SAU setul complet (d, η, T) + k_B.
    • Set fizic parțial (ex. doar T) ⇒ eroare.
    • D direct + set fizic complet ⇒ acceptat doar dacă valorile coincid
      în limita `cfg.consistency_rtol`; se folosește D direct.

    Ridică
    ------
    InvalidParameterError, înainte de orice extragere aleatoare.
    """
    _require_steps(cfg.N)
    tau = require_positive("tau", cfg.tau)

    D_direct = None if cfg.D is None else require_positive("D", cfg.D)

    gamma = None
    D_physical = None
    if cfg.physical:
        missing = [name for name, v in (("d", cfg.d), ("eta", cfg.eta), ("T", cfg.T)) if v is None]
        if missing:
            raise InvalidParameterError(
                f"Set fizic incomplet: lipsesc {', '.join(missing)} (sunt necesari d, eta, T)."
            )
        d = require_positive("d", cfg.d)
        eta = require_positive("eta", cfg.eta)
        T = require_positive("T", cfg.T)
        kB = require_positive("kB", cfg.kB)
        gamma = stokes_drag(eta, d)
        if not (gamma > 0.0 and math.isfinite(gamma)):
            raise InvalidParameterError(
                f"Frecarea Stokes 3πηd nu e finită și pozitivă (gamma={gamma!r})."
            )
        D_physical = kB * T / gamma
        if not math.isfinite(D_physical) or D_physical <= 0.0:
            raise InvalidParameterError(
                f"D derivat din Stokes–Einstein nu e finit și pozitiv (D={D_physical!r})."
            )

    if D_direct is None and D_physical is None:
        raise InvalidParameterError("Lipsește D: dă fie D direct, fie d, eta și T.")

    if D_direct is not None and D_physical is not None:
        rtol = require_positive("consistency_rtol", cfg.consistency_rtol)
        if not math.isclose(D_direct, D_physical, rel_tol=rtol):
            raise InvalidParameterError(
                f"Configurație ambiguă: D={D_direct:.6g} dar Stokes–Einstein dă "
                f"{D_physical:.6g} (rtol={rtol:g})."
            )
        log.debug("D direct coincide cu Stokes–Einstein (rtol=%g)", rtol)

    if D_direct is not None:
        D, source = D_direct, "direct"
    else:
        D, source = D_physical, "stokes-einstein"

    k = step_scale(D, tau)
    log.info("D=%.6g m^2/s (%s), k=%.6g m", D, source, k)
    return ResolvedParameters(D=D, k=k, tau=tau, source=source, gamma=gamma)


# =============================================================================
# VERIFICĂRI TEORETICE (ghid numeric)
# -----------------------------------------------------------------------------
#  • O singură particulă, 2D:  MSD(t) = ⟨x^2 + y^2⟩ = 4 D t.
#    Curba r^2(t) a UNEI traiectorii fluctuează în jurul dreptei 4 D t; abaterile
#    mari sunt normale (nu e o eroare).
#  • Estimatorul pe pași:  D̂ = ⟨dx^2 + dy^2⟩ / (4 τ).
#    (dx^2 + dy^2)/k^2 ~ χ²(2) ⇒ pătratul pasului e exponențial, cu std = medie;
#    eroarea standard a lui D̂ este ≈ D / sqrt(N-1) ⇒ scade ca 1/sqrt(N).
#  • Autocorelația lui dx: 1 la lag 0; la lag ≠ 0 ≈ 0, în banda ±2/sqrt(N).
#    Un vârf central lat sau vârfuri secundare ⇒ pași corelați (bug de generator).
# =============================================================================
