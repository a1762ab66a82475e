# src/pkcalc/elimination.py
"""
Elimination rate constant (k, 1/h) candidates and the rule that picks one.

Three independent estimates are available on the form:
  - from the literature half-life:  k = ln2 / t½
  - from clearance and volume:      k = Cl / Vd
  - from the measured points:       k = -slope of ln(C) vs t over the
                                    terminal phase

Measured data wins over parameter-derived values: the terminal slope is used
when it can be estimated, then Cl/Vd, then t½.
"""
from typing import Optional, Sequence, Tuple

import numpy as np
from scipy import stats

from .config import LN2, TERMINAL_MAX_POINTS, TERMINAL_MIN_POINTS
from .helpers import to_arrays
from .types import PatientDosingParameters, RateEstimate, Sample


def k_from_half_life(t_half_h: float) -> Optional[float]:
    """k = 0.693 / t½, or None when t½ is 0."""
    return LN2 / t_half_h if t_half_h else None


def k_from_clearance(Cl_L_per_h: float, Vd_L: float) -> Optional[float]:
    """k = Cl / Vd, or None when either is 0."""
    return Cl_L_per_h / Vd_L if Cl_L_per_h and Vd_L else None


def terminal_fit(samples: Sequence[Sample]) -> Tuple[Optional[float], int]:
    """
    Estimate k from the terminal phase by log-linear regression.

    Uses the last (up to) TERMINAL_MAX_POINTS samples with a positive
    concentration and fits ln(C) = a + slope * t by ordinary least squares.

    Returns
    -------
    k : -slope, or None if fewer than TERMINAL_MIN_POINTS positive samples
        exist, all fitted times coincide, or the slope is not negative
    n : number of points fitted (0 when k is None)
    """
    t, C = to_arrays(samples)
    positive = C > 0
    if int(np.count_nonzero(positive)) < TERMINAL_MIN_POINTS:
        return None, 0
    t_fit = t[positive][-TERMINAL_MAX_POINTS:]
    log_c_fit = np.log(C[positive][-TERMINAL_MAX_POINTS:])

    # linregress refuses a zero-variance x; that case has no slope anyway
    if np.all(t_fit == t_fit[0]):
        return None, 0
    slope = float(stats.linregress(t_fit, log_c_fit).slope)

    k = -slope
    if not k > 0:
        return None, 0
    return k, int(t_fit.size)


def terminal_k(samples: Sequence[Sample]) -> Optional[float]:
    """k from the terminal log-linear slope (see terminal_fit)."""
    return terminal_fit(samples)[0]


def select_rate(*candidates: Optional[float]) -> Optional[float]:
    """First candidate that is defined, in the order given."""
    for k in candidates:
        if k is not None:
            return k
    return None


def estimate_rates(samples: Sequence[Sample], params: PatientDosingParameters) -> RateEstimate:
    """
    Compute all three k candidates and select one.

    Priority: terminal slope, then Cl/Vd, then half-life.
    """
    k_t12 = k_from_half_life(params.t_half_h)
    k_clv = k_from_clearance(params.Cl_L_per_h, params.Vd_L)
    k_slope, n_terminal = terminal_fit(samples)
    return RateEstimate(
        from_half_life=k_t12,
        from_clearance=k_clv,
        from_terminal_slope=k_slope,
        selected=select_rate(k_slope, k_clv, k_t12),
        n_terminal=n_terminal,
    )
