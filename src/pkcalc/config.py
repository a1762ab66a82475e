# src/pkcalc/config.py
import os

from .types import CalculationInput, PatientDosingParameters

# ln(2), rounded the way the dosing handouts round it. Keep the literal value:
# reported half-lives and k(t½) are expected to match hand calculations.
LN2 = 0.693

# Terminal log-linear fit: use the last TERMINAL_MAX_POINTS positive samples,
# and give up below TERMINAL_MIN_POINTS.
TERMINAL_MAX_POINTS = 4
TERMINAL_MIN_POINTS = 2

# Shown in place of any value that could not be computed.
PLACEHOLDER = "-"

DEFAULT_DRUG_NAME = "Tetracycline"
DEFAULT_POINTS_CSV = "0:0,1:2.1,2:3.5,4:2.2,6:1.1,8:0.6"

DEFAULT_PARAMS = PatientDosingParameters(
    dose_mg=500.0,
    route="oral",
    F=0.6,              # oral bioavailability, editable
    Vd_L=40.0,
    Cl_L_per_h=4.0,
    t_half_h=8.0,
    ka_per_h=1.2,
    tau_h=12.0,
    css_target_mg_per_L=2.0,
)

LOG_LEVEL = os.environ.get("PKCALC_LOG_LEVEL", "WARNING").upper()


def default_input() -> CalculationInput:
    """The form's initial state."""
    return CalculationInput(params=DEFAULT_PARAMS, points_csv=DEFAULT_POINTS_CSV,
                            drug_name=DEFAULT_DRUG_NAME)
