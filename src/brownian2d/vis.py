# src/brownian2d/vis.py

# Despre NumPy (np):
#  - Tipul de bază este np.ndarray (x, y, r^2, coeficienți).
#  - Histogramele se calculează cu np.histogram (25 de bine, ca în scriptul de laborator).
#  - Unități: toate mărimile sunt în SI (m, s); vizualul aplică DOAR o scalare grafică.

"""
VIZUALIZARE VPYTHON (OPȚIONALĂ)
===============================
Scop:
  - să vedem traiectoria particulei și graficele de validare, fără a schimba datele.
  - pozițiile se pot scala DOAR pentru ecran (viz_scale), ca să fie vizibile.

Grafice (consumă doar SimulationResult):
  1) animația traiectoriei în planul XY (start verde, final roșu);
  2) r^2(t) simulat vs MSD teoretic 4 D t;
  3) x(t) și y(t);
  4) histograma lui dx (gaussiană) și a lui dx^2 + dy^2 (χ² cu 2 grade de libertate);
  5) autocorelația lui dx vs lag (vârf unic la 0 ⇒ pași independenți).

Dependență:
  - Necesită `vpython` (pip install vpython).
"""

from __future__ import annotations
import numpy as np

HIST_BINS = 25


def _vec_from_point(p, scale, vector):
    """RO: Construiește un vector VPython dintr-un punct 2D, cu z=0."""
    x, y = (np.asarray(p, float) * scale).tolist()
    return vector(x, y, 0.0)


# ---------- Animație 2D cu VPython ----------

def animate_trajectory(
    x: np.ndarray,
    y: np.ndarray,
    viz_scale: float = 0.0,
    viz_trail: bool = True,
    fps: int = 60,
):
    """
    RO: Animează traiectoria unei particule în planul XY.

    Parametri
    ---------
    x, y : np.ndarray, shape (N,)
        Pozițiile la momentele 0..N-1 (în metri).
    viz_scale : float
        0.0 => auto-scale (distanța maximă față de origine ≈ 5 unități vizuale);
        >0  => zoom fix (doar grafic).
    viz_trail : bool
        Desenează traseul parcurs.
    fps : int
        Cadre pe secundă (rate(fps)); nu sincronizăm “în timp real”.
    """
    try:
        from vpython import canvas, vector, sphere, color, rate
    except Exception as e:
        raise RuntimeError('VPython is not installed. Run `pip install vpython`.') from e

    pts = np.column_stack([x, y])

    if viz_scale == 0.0:
        rmax = float(np.sqrt((pts ** 2).sum(axis=1)).max())
        viz_scale = 5.0 / (rmax + 1e-30)

    canvas(title='Brownian 2D: o particulă', width=900, height=600,
           background=color.black)

    # Start (verde) și final (roșu), ca referință
    sphere(pos=_vec_from_point(pts[0], viz_scale, vector), radius=0.08, color=color.green)
    sphere(pos=_vec_from_point(pts[-1], viz_scale, vector), radius=0.08, color=color.red)

    ball = sphere(pos=_vec_from_point(pts[0], viz_scale, vector), radius=0.05,
                  color=color.cyan, make_trail=viz_trail, retain=len(pts))

    for k in range(1, len(pts)):
        rate(fps)
        ball.pos = _vec_from_point(pts[k], viz_scale, vector)


# ---------- Curbe 2D (VPython graph + gcurve) ----------

MAX_PLOTTED_POINTS = 5000


def plot_curves(x: np.ndarray, curves, title: str, xtitle: str, ytitle: str):
    """RO: Curbe y(x) pe același grafic; `curves` = [(etichetă, y, "red"), ...]."""
    try:
        from vpython import graph, gcurve, color
    except Exception as e:
        raise RuntimeError('VPython is not installed. Run `pip install vpython`.') from e

    g = graph(title=title, xtitle=xtitle, ytitle=ytitle, width=900, height=400)
    stride = max(1, len(x) // MAX_PLOTTED_POINTS)
    for label, y, col in curves:
        gc = gcurve(graph=g, color=getattr(color, col), label=label)
        # gcurve acceptă o listă de perechi; o singură trimitere către browser
        gc.data = [[float(a), float(b)] for a, b in zip(x[::stride], y[::stride])]
    return g


def plot_histogram_vpython(values: np.ndarray, title: str, xlabel: str,
                           bins: int = HIST_BINS):
    """RO: Histogramă cu bare verticale (gvbars); frecvențe absolute."""
    try:
        from vpython import graph, gvbars, color
    except Exception as e:
        raise RuntimeError('VPython is not installed. Run `pip install vpython`.') from e

    counts, edges = np.histogram(np.asarray(values, float), bins=bins)
    centers = 0.5 * (edges[:-1] + edges[1:])
    width = float(edges[1] - edges[0]) if len(edges) > 1 else 1.0

    g = graph(title=title, xtitle=xlabel, ytitle="Frecvență",
              width=600, height=400, fast=False)
    bars = gvbars(graph=g, delta=0.9 * width, color=color.blue)
    for c, n in zip(centers, counts):
        bars.plot(float(c), int(n))
    return g


def show_result(result, animate: bool = True, viz_scale: float = 0.0,
                viz_trail: bool = True):
    """
    RO: Toate graficele pentru un SimulationResult (pasiv, nu modifică datele).
    """
    tr, ds, acf = result.trajectory, result.displacements, result.autocorrelation

    if animate:
        animate_trajectory(tr.x, tr.y, viz_scale=viz_scale, viz_trail=viz_trail)

    t = tr.time
    plot_curves(t, [("teoretic 4Dt", ds.msd_theory, "red"),
                    ("simulat", ds.cum_sq, "blue")],
                title="Deplasarea la pătrat vs timp (1 particulă, 2D)",
                xtitle="t [s]", ytitle="r^2 [m^2]")
    plot_curves(t, [("x", tr.x, "blue"), ("y", tr.y, "red")],
                title="Poziția vs timp", xtitle="t [s]", ytitle="poziție [m]")
    plot_histogram_vpython(tr.dx, title="Distribuția deplasărilor pe X",
                           xlabel="dx [m]")
    plot_histogram_vpython(ds.step_sq, title="Distribuția pătratului pașilor",
                           xlabel="dx^2 + dy^2 [m^2]")
    plot_curves(acf.lags, [("dx", acf.coefficients, "black")],
                title="Autocorelația deplasărilor pe X",
                xtitle="lag", ytitle="coeficient de corelație")
