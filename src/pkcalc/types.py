# src/pkcalc/types.py
from dataclasses import dataclass
from typing import Literal, Optional, Sequence, get_args

# Time is in HOURS and concentration in mg/L everywhere.
Route = Literal["oral", "iv"]
ROUTES: tuple[str, ...] = get_args(Route)


@dataclass(frozen=True)
class Sample:
    """One measured point of the concentration-time curve."""
    time: float
    concentration: float


@dataclass(frozen=True)
class PatientDosingParameters:
    """
    Scalar inputs of the calculator. No cross-field checks are made: degenerate
    values (zero F, zero Cl, ...) are handled by the formulas that use them.

    dose_mg             : administered dose, mg
    route               : "oral" or "iv" (IV bolus)
    F                   : bioavailability fraction, (0, 1]
    Vd_L                : volume of distribution, L
    Cl_L_per_h          : clearance, L/h
    t_half_h            : literature half-life, h (0 = unknown)
    ka_per_h            : absorption rate constant, 1/h (kept for display only)
    tau_h               : dosing interval, h
    css_target_mg_per_L : desired average steady-state concentration, mg/L
    """
    dose_mg: float
    route: Route
    F: float
    Vd_L: float
    Cl_L_per_h: float
    t_half_h: float
    ka_per_h: float
    tau_h: float
    css_target_mg_per_L: float

    def __post_init__(self):
        if self.route not in ROUTES:
            raise ValueError(f"route must be one of {ROUTES} (got {self.route!r}).")


@dataclass(frozen=True)
class CalculationInput:
    """Everything the form submits: parameters, raw points text, drug name."""
    params: PatientDosingParameters
    points_csv: str
    drug_name: str = "Tetracycline"


@dataclass(frozen=True)
class RateEstimate:
    """
    Candidate elimination rate constants (1/h). Each is None when its inputs
    are degenerate; `selected` is the first defined of terminal slope, Cl/Vd,
    half-life.
    """
    from_half_life: Optional[float]
    from_clearance: Optional[float]
    from_terminal_slope: Optional[float]
    selected: Optional[float]
    n_terminal: int = 0  # points used by the terminal fit


@dataclass(frozen=True)
class CalculationResult:
    """Snapshot of one form submission."""
    inputs: CalculationInput
    samples: Sequence[Sample]
    auc: float                      # linear trapezoid over the samples, mg*h/L
    auc_inf: Optional[float]        # auc + Clast / k
    rates: RateEstimate
    half_life: Optional[float]      # from rates.selected
    cmax: float
    tmax: float
    last_concentration: float
    loading_dose: float             # mg
    maintenance_rate: float         # mg/h
    maintenance_dose: float         # mg per interval

    def summary(self) -> str:
        """Human-readable result block, as shown on the form."""
        from .report import summary_lines
        title = f"{self.inputs.drug_name} - Pharmacokinetic Calculator"
        return "\n".join([title, ""] + summary_lines(self))
