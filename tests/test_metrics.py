import pytest

from pkcalc.metrics import auc_trapz, cmax_tmax, clast
from pkcalc.parsing import parse_points
from pkcalc.types import Sample


def test_auc_hand_calculation():
    """
    AUC = (0 + 2.1)/2 * 1 + (2.1 + 3.5)/2 * 1 = 1.05 + 2.8 = 3.85
    """
    samples = [Sample(0, 0), Sample(1, 2.1), Sample(2, 3.5)]
    assert auc_trapz(samples) == pytest.approx(3.85)


def test_auc_default_profile():
    """
    1.05 + 2.8 + (3.5+2.2)/2*2 + (2.2+1.1)/2*2 + (1.1+0.6)/2*2 = 14.55
    """
    samples = parse_points("0:0,1:2.1,2:3.5,4:2.2,6:1.1,8:0.6")
    assert auc_trapz(samples) == pytest.approx(14.55)


def test_auc_fewer_than_two_samples_is_zero():
    assert auc_trapz([]) == 0.0
    assert auc_trapz([Sample(3.0, 7.0)]) == 0.0


def test_auc_does_not_resort():
    """
    Backwards time steps give a negative area: (1 + 1)/2 * (0 - 2) = -2.
    """
    assert auc_trapz([Sample(2.0, 1.0), Sample(0.0, 1.0)]) == pytest.approx(-2.0)


def test_cmax_tmax_default_profile():
    samples = parse_points("0:0,1:2.1,2:3.5,4:2.2,6:1.1,8:0.6")
    assert cmax_tmax(samples) == (3.5, 2.0)


def test_cmax_tie_returns_first_time():
    samples = [Sample(1.0, 5.0), Sample(2.0, 5.0), Sample(3.0, 1.0)]
    assert cmax_tmax(samples) == (5.0, 1.0)


def test_cmax_starts_from_zero():
    """No positive concentration: the peak stays at (0, 0)."""
    assert cmax_tmax([]) == (0.0, 0.0)
    assert cmax_tmax([Sample(2.0, 0.0), Sample(4.0, 0.0)]) == (0.0, 0.0)


def test_clast():
    assert clast([]) == 0.0
    assert clast([Sample(0.0, 1.0), Sample(8.0, 0.6)]) == 0.6
