# src/pkcalc/report.py
"""Text rendering of a CalculationResult for the results panel."""
from __future__ import annotations

from typing import Optional

from .config import PLACEHOLDER
from .types import CalculationResult

DISCLAIMERS = (
    "This tool is for educational / project use only, not clinical dosing advice.",
    "Tetracycline group pharmacokinetics vary by compound. Use measured concentration "
    "data or literature values for Vd, Cl, F, or t1/2 when available.",
    "Dosing adjustment for renal/hepatic impairment is educational; doxycycline is less "
    "renally eliminated and often does not need renal adjustment.",
)


def fmt(value: Optional[float], places: int) -> str:
    """Fixed-point text, or the placeholder for a missing value."""
    if value is None:
        return PLACEHOLDER
    return f"{value:.{places}f}"


def summary_lines(result: CalculationResult) -> list[str]:
    r = result.rates
    return [
        f"K estimates: from t1/2 = {fmt(r.from_half_life, 4)} 1/hr; "
        f"from Cl/Vd = {fmt(r.from_clearance, 4)}; "
        f"from terminal slope = {fmt(r.from_terminal_slope, 4)}",
        f"Selected k used = {fmt(r.selected, 4)} 1/hr",
        f"Half-life (t1/2) = {fmt(result.half_life, 2)} hr",
        f"AUC (trapezoidal) = {fmt(result.auc, 3)} mg·hr/L",
        f"AUC∞ (extrapolated) = {fmt(result.auc_inf, 3)} mg·hr/L",
        f"Cmax = {fmt(result.cmax, 3)} mg/L at Tmax = {result.tmax:g} hr",
        f"Loading dose (LD) estimate = {fmt(result.loading_dose, 1)} mg (LD = Css_target · Vd / F)",
        f"Maintenance dose rate = {fmt(result.maintenance_rate, 1)} mg/hr",
        f"Maintenance dose per interval (MD) = {fmt(result.maintenance_dose, 1)} mg "
        f"(MD = Css · Cl · tau / F)",
    ]
