# src/pkcalc/metrics.py
from typing import Sequence, Tuple

import numpy as np

from .helpers import to_arrays
from .types import Sample


def auc_trapz(samples: Sequence[Sample]) -> float:
    """
    Area Under the Curve (AUC) via the linear trapezoidal rule (mg*h/L).

    Samples are used in the order given. Out-of-order times give negative
    partial areas; fewer than two samples give 0.
    """
    t, C = to_arrays(samples)
    if t.size < 2:
        return 0.0
    return float(np.trapezoid(C, t))


def cmax_tmax(samples: Sequence[Sample]) -> Tuple[float, float]:
    """
    Return Cmax (mg/L) and Tmax (h).

    The first occurrence of a tied maximum wins. The peak starts at (0, 0), so
    an empty profile, or one without a positive concentration, gives (0, 0).
    """
    t, C = to_arrays(samples)
    if not np.any(C > 0):
        return 0.0, 0.0
    idx = int(np.nanargmax(C))
    return float(C[idx]), float(t[idx])


def clast(samples: Sequence[Sample]) -> float:
    """Concentration of the last sample (0 when there are none)."""
    return float(samples[-1].concentration) if samples else 0.0
