# src/pkcalc/calculate.py
import logging

from .types import CalculationInput, CalculationResult
from .parsing import parse_points
from .metrics import auc_trapz, cmax_tmax, clast
from .elimination import estimate_rates
from .dosing import (
    half_life_from_k, auc_extrapolated,
    loading_dose, maintenance_rate, maintenance_dose,
)

logger = logging.getLogger(__name__)


def run_calculation(inputs: CalculationInput) -> CalculationResult:
    """
    High-level wrapper: parse the points, integrate, estimate k and derive
    the dosing quantities for one form submission.

    Never raises on bad points or degenerate parameters; quantities that
    cannot be computed come back as None.
    """
    p = inputs.params
    samples = parse_points(inputs.points_csv)
    auc = auc_trapz(samples)

    rates = estimate_rates(samples, p)
    k = rates.selected

    last_c = clast(samples)
    c_max, t_max = cmax_tmax(samples)
    md_rate = maintenance_rate(p.css_target_mg_per_L, p.Cl_L_per_h, k=k, Vd_L=p.Vd_L)

    logger.debug("%s: %d points, AUC %.4g, k %s (slope %s, Cl/Vd %s, t1/2 %s)",
                 inputs.drug_name, len(samples), auc, k,
                 rates.from_terminal_slope, rates.from_clearance, rates.from_half_life)

    return CalculationResult(
        inputs=inputs,
        samples=samples,
        auc=auc,
        auc_inf=auc_extrapolated(auc, last_c, k),
        rates=rates,
        half_life=half_life_from_k(k),
        cmax=c_max,
        tmax=t_max,
        last_concentration=last_c,
        loading_dose=loading_dose(p.css_target_mg_per_L, p.Vd_L, p.F),
        maintenance_rate=md_rate,
        maintenance_dose=maintenance_dose(md_rate, p.tau_h, p.F),
    )
