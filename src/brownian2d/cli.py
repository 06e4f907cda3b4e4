# src/brownian2d/cli.py

# Despre NumPy (np):
#  - Reproductibilitate: --seed construiește np.random.default_rng(seed) în Simulator.
#  - Unități: toate mărimile din linia de comandă sunt în SI (m, s, Pa·s, K).

import argparse
import logging
import sys

from . import config as C
from .config import SimConfig
from .errors import InvalidParameterError, NumericOverflowError
from .report import format_report
from .simulator import Simulator

log = logging.getLogger(__name__)


def parse_args(argv=None):
    """
    Parsează argumentele din linia de comandă.
    Expunem parametrii numerici/fizici ai simulării + opțiuni de vizualizare.
    """
    p = argparse.ArgumentParser(description='2D Brownian motion: o particulă, D̂ și autocorelație')

    # --- DISCRETIZARE ---
    p.add_argument('--N', type=int, default=C.DEFAULT_N,
                   help="Numărul de puncte ale traiectoriei (inclusiv originea), N >= 2.")
    p.add_argument('--tau', type=float, default=C.DEFAULT_TAU,
                   help="Intervalul de timp dintre pași τ [s].")

    # --- PARAMETRI FIZICI (SI) ---
    p.add_argument('--D', type=float, default=None,
                   help="Coeficient de difuzie direct [m^2/s]. Exclusiv cu --d/--eta/--T "
                        "(sau consistent cu ei în limita --rtol).")
    p.add_argument('--d', type=float, default=None,
                   help=f"Diametrul particulei [m] (implicit {C.DEFAULT_DIAMETER:g} dacă lipsește --D).")
    p.add_argument('--eta', type=float, default=None,
                   help=f"Vâscozitatea dinamică [Pa·s] (implicit {C.DEFAULT_VISCOSITY:g}, apă).")
    p.add_argument('--T', type=float, default=None,
                   help=f"Temperatura [K] (implicit {C.DEFAULT_TEMPERATURE:g}).")
    p.add_argument('--kB', type=float, default=C.DEFAULT_KB,
                   help=f"Constanta lui Boltzmann [J/K] (implicit {C.DEFAULT_KB:g}; valoarea exactă SI e {C.KB:g}).")
    p.add_argument('--rtol', type=float, default=1e-6,
                   help="Toleranța relativă când se dau atât --D cât și --d/--eta/--T.")

    # --- ALGORITM ---
    p.add_argument('--seed', type=int, default=None,
                   help="Sămânța RNG pentru reproducibilitate (np.random.default_rng(seed)).")
    p.add_argument('--max-lag', type=int, default=None,
                   help="Fereastra simetrică a autocorelației (implicit toate lagurile).")

    # --- VIZUALIZARE (doar grafic; nu afectează fizica) ---
    p.add_argument('--enable-vpython', action='store_true',
                   help="Dacă este setat, desenează graficele VPython după simulare.")
    p.add_argument('--no-animate', action='store_true',
                   help="Cu --enable-vpython: fără animația traiectoriei, doar graficele.")
    p.add_argument('--viz-scale', type=float, default=0.0,
                   help='Factor de scalare pe ecran (0=auto-scale).')
    p.add_argument('--no-trail', action='store_true',
                   help='Nu desena traseul particulei în animație.')

    p.add_argument('-v', '--verbose', action='store_true', help="Logging la nivel DEBUG.")
    return p.parse_args(argv)


def build_config(a) -> SimConfig:
    """
    Construiește SimConfig din argumente.
    Dacă nu s-a dat nici --D, nici vreun parametru fizic, folosim sistemul de
    referință (sferă de 1 µm în apă la 293 K); parametrii fizici dați parțial
    sunt completați cu valorile implicite.
    """
    physical = (a.d, a.eta, a.T)
    if a.D is None or any(v is not None for v in physical):
        d = C.DEFAULT_DIAMETER if a.d is None else a.d
        eta = C.DEFAULT_VISCOSITY if a.eta is None else a.eta
        T = C.DEFAULT_TEMPERATURE if a.T is None else a.T
    else:
        d = eta = T = None

    return SimConfig(
        N=a.N, tau=a.tau,
        D=a.D, d=d, eta=eta, T=T, kB=a.kB,
        consistency_rtol=a.rtol,
        seed=a.seed, max_lag=a.max_lag,
        enable_vpython=a.enable_vpython,
        viz_scale=a.viz_scale, viz_trail=not a.no_trail,
    )


def main(argv=None):
    """
    Flux:
      1) Parsează argumentele.
      2) Construiește SimConfig (centralizează setările).
      3) Rulează simularea și afișează raportul.
      4) Opțional, desenează graficele VPython.
    """
    a = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if a.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = build_config(a)
    try:
        result = Simulator(cfg).run()
    except (InvalidParameterError, NumericOverflowError) as e:
        print(f"Eroare: {e}", file=sys.stderr)
        return 2

    print(format_report(result))

    if cfg.enable_vpython:
        from .vis import show_result
        show_result(result, animate=not a.no_animate,
                    viz_scale=cfg.viz_scale, viz_trail=cfg.viz_trail)
    return 0


if __name__ == '__main__':
    sys.exit(main())
