from dataclasses import replace

import pytest

from pkcalc.calculate import run_calculation
from pkcalc.config import DEFAULT_PARAMS, DEFAULT_POINTS_CSV, PLACEHOLDER, default_input
from pkcalc.report import fmt, summary_lines
from pkcalc.types import CalculationInput, PatientDosingParameters


def test_default_form_values():
    inputs = default_input()
    p = inputs.params
    assert (p.dose_mg, p.route, p.F, p.Vd_L, p.Cl_L_per_h) == (500, "oral", 0.6, 40, 4)
    assert (p.t_half_h, p.ka_per_h, p.tau_h, p.css_target_mg_per_L) == (8, 1.2, 12, 2)
    assert inputs.points_csv == DEFAULT_POINTS_CSV
    assert inputs.drug_name == "Tetracycline"


def test_unknown_route_rejected():
    with pytest.raises(ValueError):
        replace(DEFAULT_PARAMS, route="im")


def test_default_run():
    """
    End-to-end on the form defaults: k comes from the terminal slope and the
    dose estimates follow Css, Vd, Cl, tau and F.
    """
    r = run_calculation(default_input())
    assert len(r.samples) == 6
    assert r.auc == pytest.approx(14.55)
    assert (r.cmax, r.tmax) == (3.5, 2.0)
    assert r.last_concentration == 0.6

    k = r.rates.selected
    assert k == r.rates.from_terminal_slope
    assert r.half_life == pytest.approx(0.693 / k)
    assert r.auc_inf == pytest.approx(14.55 + 0.6 / k)

    assert r.loading_dose == pytest.approx(2 * 40 / 0.6)
    assert r.maintenance_rate == pytest.approx(8.0)
    assert r.maintenance_dose == pytest.approx(160.0)


def test_malformed_points_fail_soft():
    """
    Bad text leaves no samples: zero AUC, peak (0, 0), and k falls back to
    Cl/Vd.
    """
    r = run_calculation(replace(default_input(), points_csv="abc"))
    assert r.samples == ()
    assert r.auc == 0.0
    assert (r.cmax, r.tmax) == (0.0, 0.0)
    assert r.rates.from_terminal_slope is None
    assert r.rates.selected == pytest.approx(0.1)
    assert r.auc_inf == pytest.approx(0.0)


def test_everything_degenerate():
    params = PatientDosingParameters(
        dose_mg=0.0, route="iv", F=0.0, Vd_L=0.0, Cl_L_per_h=0.0, t_half_h=0.0,
        ka_per_h=0.0, tau_h=0.0, css_target_mg_per_L=2.0,
    )
    r = run_calculation(CalculationInput(params=params, points_csv=""))
    assert r.rates.selected is None
    assert r.half_life is None
    assert r.auc_inf is None
    assert r.loading_dose == 0.0
    assert r.maintenance_rate == 0.0
    assert r.maintenance_dose == 0.0


def test_maintenance_rate_uses_selected_k_without_clearance():
    inputs = replace(default_input(), params=replace(DEFAULT_PARAMS, Cl_L_per_h=0.0))
    r = run_calculation(inputs)
    assert r.maintenance_rate == pytest.approx(2.0 * r.rates.selected * 40.0)


def test_repeated_runs_are_identical():
    inputs = default_input()
    assert run_calculation(inputs) == run_calculation(inputs)


def test_fmt():
    assert fmt(None, 4) == PLACEHOLDER
    assert fmt(0.086625, 4) == "0.0866"
    assert fmt(133.3333, 1) == "133.3"


def test_summary_lines_default_run():
    lines = summary_lines(run_calculation(default_input()))
    text = "\n".join(lines)
    assert "from t1/2 = 0.0866" in text
    assert "from Cl/Vd = 0.1000" in text
    assert "Cmax = 3.500 mg/L at Tmax = 2 hr" in text
    assert "AUC (trapezoidal) = 14.550" in text
    assert "(LD) estimate = 133.3 mg" in text
    assert "Maintenance dose rate = 8.0 mg/hr" in text
    assert "(MD) = 160.0 mg" in text


def test_summary_lines_show_placeholder_for_missing_values():
    params = replace(DEFAULT_PARAMS, Cl_L_per_h=0.0, t_half_h=0.0)
    r = run_calculation(CalculationInput(params=params, points_csv="abc"))
    text = "\n".join(summary_lines(r))
    assert f"Selected k used = {PLACEHOLDER} 1/hr" in text
    assert f"Half-life (t1/2) = {PLACEHOLDER} hr" in text
    assert f"AUC∞ (extrapolated) = {PLACEHOLDER} mg·hr/L" in text


def test_result_summary_has_title():
    r = run_calculation(default_input())
    assert r.summary().splitlines()[0] == "Tetracycline - Pharmacokinetic Calculator"
