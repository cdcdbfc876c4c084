import numpy as np
import pytest

from accrete.util import misc


def test_effect_limit_scalar():
    assert misc.effect_limit_scalar(1.0) == pytest.approx(0.5**0.25)
    assert misc.effect_limit_scalar(0.0) == 0.0


def test_effect_limits_bracket_orbit():
    inner, outer = misc.effect_limits(1.0, 0.1, 1e-6, 0.2)
    assert inner < 0.9 < 1.1 < outer


def test_critical_limit():
    assert misc.critical_limit(1.0, 0.0, 1.0) == pytest.approx(1.2e-5)
    # Further out the threshold drops
    assert misc.critical_limit(5.0, 0.0, 1.0) < misc.critical_limit(1.0, 0.0, 1.0)


def test_dust_density_falls_off():
    rho1 = misc.dust_density(2e-3, 1.0, 1.0)
    assert rho1 == pytest.approx(2e-3 * np.exp(-5.0))
    assert misc.dust_density(2e-3, 1.0, 5.0) < rho1


def test_gas_density_limits():
    # At the critical mass the gas ratio is 1, far above it tends to K
    assert misc.gas_mass_density(1.0, 1.0, 1.0) == pytest.approx(1.0)
    assert misc.gas_mass_density(1.0, 1e-12, 1.0) == pytest.approx(
        misc.GAS_DUST_RATIO, rel=1e-3
    )


def test_merge_orbits_between_inputs():
    a, e, clamped = misc.merge_orbits(1e-5, 1.0, 0.05, 3e-5, 1.5, 0.1)
    assert 1.0 < a < 1.5
    assert type(a) is float
    assert 0.0 <= e < 1.0
    assert not clamped


def test_merge_orbits_clamps_radial_orbits():
    a, e, clamped = misc.merge_orbits(1.0, 1.0, 1.0, 1.0, 2.0, 1.0)
    assert clamped
    assert e == 0.0
    assert a == pytest.approx(4.0 / 3.0)


def test_bode_reference_term():
    A, B, alpha = 0.4, 2.0, 1.3
    assert misc.bode_sma(0, A, B, alpha) == pytest.approx(
        A * (B + misc.blagg_correction(alpha))
    )
    assert misc.bode_sma(1, A, B, alpha) > misc.bode_sma(0, A, B, alpha)


def test_main_sequence_luminosity():
    assert misc.main_sequence_luminosity(1.0) == pytest.approx(1.0)
    assert misc.main_sequence_luminosity(0.5) == pytest.approx(0.5**4.025)
    assert misc.main_sequence_luminosity(2.0) == pytest.approx(2.0**4.4)


def test_fold_angle():
    assert misc.fold_angle(190.0) == pytest.approx(170.0)
    assert misc.fold_angle(370.0) == pytest.approx(10.0)
    assert misc.fold_angle(-10.0) == pytest.approx(10.0)
