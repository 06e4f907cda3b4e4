# src/brownian2d/report.py
"""
Raport text pentru o rulare (consumă doar SimulationResult; nu calculează nimic nou).

Secțiuni:
  - PARAMETRI FIZICI     : d, T, η (dacă D vine din Stokes–Einstein), τ
  - COEFICIENT DE DIFUZIE: D teoretic, D̂, SE, eroare absolută/relativă
  - STATISTICI SIMULARE  : N, timp total, poziția finală, r^2 final vs MSD teoretic
  - INDEPENDENȚA PAȘILOR : fracțiunea coeficienților în banda ±2/sqrt(N)
  - ÎNTREBĂRI DE ANALIZĂ și NOTE IMPORTANTE: textul de interpretare pentru studenți
"""

import math

import pandas as pd

from .simulator import INDEPENDENCE_MAX_LAG, SimulationResult

RULE = "=" * 40


def _section(title: str) -> list:
    return ["", RULE, f"  {title}", RULE]


def summary_frame(result: SimulationResult) -> pd.DataFrame:
    """Mărimile scalare ale raportului, ca tabel (quantity, value, unit)."""
    est, tr, ds = result.estimate, result.trajectory, result.displacements
    fx, fy = tr.final_position
    rows = [
        ("D_theory", est.D, "m^2/s"),
        ("D_hat", est.D_hat, "m^2/s"),
        ("standard_error", est.standard_error, "m^2/s"),
        ("actual_error", est.actual_error, "m^2/s"),
        ("relative_error", est.relative_error, "1"),
        ("n_steps", est.n_steps, "1"),
        ("total_time", len(tr) * tr.tau, "s"),
        ("final_x", fx, "m"),
        ("final_y", fy, "m"),
        ("final_distance", math.hypot(fx, fy), "m"),
        ("final_sq_displacement", float(ds.cum_sq[-1]), "m^2"),
        ("msd_theory_final", float(ds.msd_theory[-1]), "m^2"),
        ("independence_fraction", result.independence, "1"),
    ]
    if result.msd_fit is not None:
        rows.append(("D_msd_fit", result.msd_fit.D_fit, "m^2/s"))
    return pd.DataFrame(rows, columns=["quantity", "value", "unit"])


def format_report(result: SimulationResult) -> str:
    cfg, p, est = result.config, result.params, result.estimate
    tr, ds = result.trajectory, result.displacements
    fx, fy = tr.final_position
    lines = []

    lines += _section("PARAMETRI FIZICI")
    if p.source == "stokes-einstein":
        lines.append(f"Diametrul particulei: {cfg.d:.2e} m")
        lines.append(f"Temperatura: {cfg.T:.1f} K")
        lines.append(f"Vâscozitatea: {cfg.eta:.2e} Pa·s")
        lines.append(f"Frecarea Stokes (3πηd): {p.gamma:.4e} kg/s")
    else:
        lines.append("D dat direct (fără Stokes–Einstein)")
    lines.append(f"Pasul de timp (tau): {p.tau:.4f} s")
    lines.append(f"Scala pasului k = sqrt(2 D tau): {p.k:.4e} m")

    lines += _section("COEFICIENT DE DIFUZIE")
    lines.append(f"D teoretic:      {est.D:.4e} m²/s")
    lines.append(f"D simulat:       {est.D_hat:.4e} m²/s")
    lines.append(f"Eroare standard: {est.standard_error:.4e} m²/s "
                 f"({100.0 * est.relative_standard_error:.1f}% din D)")
    lines.append(f"Eroare absolută: {est.actual_error:.4e} m²/s")
    lines.append(f"Eroare relativă: {100.0 * est.relative_error:.2f}%")
    if result.msd_fit is not None:
        lines.append(f"D din fit r²(t): {result.msd_fit.D_fit:.4e} m²/s (o singură particulă, zgomotos)")

    lines += _section("STATISTICI SIMULARE")
    lines.append(f"Număr de pași: {est.n_steps}")
    lines.append(f"Timp total simulat: {len(tr) * tr.tau:.2f} s")
    lines.append(f"Poziția finală: ({fx:.4e}, {fy:.4e}) m")
    lines.append(f"Distanța finală față de origine: {math.hypot(fx, fy):.4e} m")
    lines.append(f"Deplasarea la pătrat finală: {ds.cum_sq[-1]:.4e} m²")
    lines.append(f"MSD teoretic la timpul final: {ds.msd_theory[-1]:.4e} m²")

    lines += _section("INDEPENDENȚA PAȘILOR")
    if math.isnan(result.independence):
        lines.append("Autocorelație dx: prea puțini pași pentru laguri ≠ 0")
    else:
        lines.append(f"Autocorelație dx: {100.0 * result.independence:.1f}% din lagurile "
                     f"1..{INDEPENDENCE_MAX_LAG} în ±2/sqrt(N) (așteptat ≈ 95%)")

    lines += _section("ÎNTREBĂRI DE ANALIZĂ")
    lines.append("Î1. Se potrivește dreapta teoretică cu deplasarea simulată?")
    lines.append("    Da, curba simulată fluctuează în jurul dreptei 4 D t.")
    lines.append("    Abaterile sunt așteptate pentru traiectoria unei singure particule,")
    lines.append("    din cauza naturii stocastice a mișcării browniene.")
    lines.append("")
    lines.append("Î2. Este D estimat de încredere?")
    lines.append(f"    D simulat = {est.D_hat:.4e} m²/s")
    lines.append(f"    D teoretic = {est.D:.4e} m²/s")
    lines.append(f"    Eroare standard = {est.standard_error:.4e} "
                 f"({100.0 * est.relative_standard_error:.1f}% din D)")
    lines.append(f"    Pentru o singură particulă cu N={len(tr)} puncte, o abatere e normală.")
    lines.append("    Încrederea crește prin:")
    lines.append("    - mărirea numărului de pași (N)")
    lines.append("    - medierea pe un ansamblu de particule")

    lines += _section("NOTE IMPORTANTE")
    lines.append("• Curbele MSD ale unei singure particule sunt inerent zgomotoase")
    lines.append("• Graficul de autocorelație confirmă independența statistică a pașilor")
    lines.append("• Rulați simularea de mai multe ori pentru a observa variabilitatea")
    lines.append("• Fără --seed, fiecare rulare produce o traiectorie aleatoare diferită")
    lines.append(RULE)
    return "\n".join(lines)
