# src/brownian2d/config.py

# Despre NumPy (np):
#  - Tipul de bază este np.ndarray (tablouri numerice 1D pentru x, y, dx, dy).
#  - Zgomotul gaussian se generează cu un np.random.Generator explicit
#    (np.random.default_rng(seed)); NU folosim starea globală np.random.*.
#  - Unități: toate mărimile din cod sunt în SI (m, s, kg), iar array-urile
#    păstrează aceste unități implicit prin valori; comentariile indică unitățile.

from dataclasses import dataclass
from typing import Optional

# Constanta lui Boltzmann [J/K] (valoare exactă SI 2019).
KB = 1.380649e-23

# Spațiu bidimensional: ⟨r^2(t)⟩ = 2 * DIMS * D * t = 4 D t.
DIMS = 2

# Sistemul de referință al scriptului de laborator: sferă de 1 µm în apă la 293 K.
DEFAULT_N = 2000
DEFAULT_TAU = 0.01
DEFAULT_DIAMETER = 1.0e-6
DEFAULT_VISCOSITY = 1.0e-3
DEFAULT_TEMPERATURE = 293.0
# Valoarea rotunjită din scriptul de laborator (CLI o folosește implicit).
DEFAULT_KB = 1.38e-23


@dataclass(frozen=True)
class SimConfig:
    """
    ============================================================================
    CONFIGURAȚIA SIMULĂRII: O SINGURĂ PARTICULĂ ÎN 2D
    ============================================================================

    SCOP
    ----
    Reunește parametrii *numerici* și *fizici* ai unei rulări. Restul codului
    citește exclusiv din acest obiect ⇒ setările sunt centralizate, ușor de
    reprodus și de documentat. Obiectul e imutabil (frozen).

    CĂI DE REZOLVARE A LUI D  (exact una activă)
    --------------------------------------------
    a) direct:             D [m^2/s]
    b) Stokes–Einstein:    D = k_B T / (3 π η d)
       cu d [m] diametrul particulei, η [Pa·s] vâscozitatea dinamică,
       T [K] temperatura absolută.

    Dacă se dau ambele, valorile trebuie să coincidă în limita
    `consistency_rtol`; altfel configurația e ambiguă (InvalidParameterError).

    MODEL
    -----
    Random walk gaussian (overdamped), pe fiecare axă independent:
        x_{n+1} = x_n + k η_x,   y_{n+1} = y_n + k η_y,   k = sqrt(2 D τ)
    ⇒ ⟨dx^2 + dy^2⟩ = 4 D τ  și  MSD(t) = 4 D t.

    UNITĂȚI (SI)
    ------------
      τ  [s]       – intervalul dintre pași
      d  [m]       – diametrul particulei
      η  [Pa·s]    – vâscozitatea dinamică
      T  [K]       – temperatura
      k_B[J/K]     – const. Boltzmann
    """

    # -----------------------
    # NUCLEU (DISCRETIZARE)
    # -----------------------

    N: int = DEFAULT_N
    # Numărul de puncte ale traiectoriei (inclusiv originea) ⇒ N-1 pași.
    # Trebuie N >= 2 (altfel media/eroarea standard nu sunt definite).

    tau: float = DEFAULT_TAU
    # Intervalul de timp dintre doi pași τ [s]; timpul total este ~ N * τ.

    # --------------
    # FIZICĂ (SI)
    # --------------

    D: Optional[float] = None
    # Coeficientul de difuzie [m^2/s], dacă e dat direct.

    d: Optional[float] = None
    # Diametrul particulei [m]. D ∝ 1/d.

    eta: Optional[float] = None
    # Vâscozitatea dinamică [Pa·s]. D ∝ 1/η.

    T: Optional[float] = None
    # Temperatura absolută [K]. D ∝ T.

    kB: float = KB
    # Constanta lui Boltzmann [J/K].

    consistency_rtol: float = 1e-6
    # Toleranța relativă când sunt date atât D cât și (d, η, T).

    # ------------
    # ALGORITM
    # ------------

    seed: Optional[int] = None
    # Sămânța pentru np.random.default_rng(seed). None ⇒ entropie de la OS.

    max_lag: Optional[int] = None
    # Fereastra simetrică pentru autocorelație; None ⇒ toate lagurile.

    # ---------------
    # VIZUALIZARE
    # ---------------

    enable_vpython: bool = False
    # Dacă True, CLI-ul desenează graficele VPython după simulare (pasiv).

    viz_scale: float = 0.0   # 0 => auto-scale
    # Factor *strict grafic* pentru animație (nu afectează datele).

    viz_trail: bool = True
    # Dacă True, animația desenează traseul particulei.

    @property
    def physical(self) -> bool:
        """True dacă măcar un parametru fizic (d, η, T) este setat."""
        return any(v is not None for v in (self.d, self.eta, self.T))
