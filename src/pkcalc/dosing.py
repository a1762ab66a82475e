# src/pkcalc/dosing.py
from __future__ import annotations

from typing import Optional

from .config import LN2


def half_life_from_k(k: Optional[float]) -> Optional[float]:
    """t½ = 0.693 / k (h), or None without a usable k."""
    return LN2 / k if k else None


def auc_extrapolated(auc: float, clast: float, k: Optional[float]) -> Optional[float]:
    """
    AUC from 0 to infinity: AUC(0-last) + Clast / k.
    None without a usable k.
    """
    return auc + clast / k if k else None


def loading_dose(css_target: float, Vd_L: float, F: float) -> float:
    """
    LD = Css_target * Vd / F   (mg)
    Assumes immediate distribution. F = 0 is read as 1 to keep the division
    defined, not as a pharmacological default.
    """
    return css_target * Vd_L / _or_one(F)


def maintenance_rate(css_target: float, Cl_L_per_h: float,
                     k: Optional[float] = None, Vd_L: float = 0.0) -> float:
    """
    Maintenance dose rate (mg/h) = Css_target * Cl.

    Without a clearance, Cl is rebuilt as k * Vd when both are known;
    otherwise the rate is 0.
    """
    if Cl_L_per_h:
        return css_target * Cl_L_per_h
    return css_target * (k * Vd_L if k and Vd_L else 0.0)


def maintenance_dose(rate_mg_per_h: float, tau_h: float, F: float) -> float:
    """
    Maintenance dose per interval: MD = rate * tau / F   (mg)
    tau = 0 and F = 0 are each read as 1.
    """
    return rate_mg_per_h * _or_one(tau_h) / _or_one(F)


# --------------------------
# Denominator guard
# --------------------------
def _or_one(x: float) -> float:
    return x if x else 1.0
