"""
Physical relations used by the accretion model. Everything here works on plain
floats in AU and solar masses so the growth loops never touch astropy units.
"""

import numpy as np

# Dust density falloff, rho = A * sqrt(M) * exp(-ALPHA * a**(1/N))
DUST_ALPHA = 5.0
DUST_N = 3.0

# Gas to dust ratio once a body is past its critical mass
GAS_DUST_RATIO = 50.0

# Critical mass coefficient, B * (perihelion * sqrt(L))**-0.75
CRITICAL_MASS_COEFF = 1.2e-5

# Blagg law constants
BODE_RATIO = 1.7275
BODE_BETA = 0.9879
BODE_B = 2.025

CONVERGENCE_TOLERANCE = 1e-4


class AccretionWarning(UserWarning):
    """
    Recoverable numerical or configuration anomaly during an accretion run
    """


def effect_limit_scalar(mass):
    """
    Reduced mass scalar that sets how far past its orbit a body can sweep
    Args:
        mass (float):
            Body mass in solar masses
    Returns:
        float
    """
    return (mass / (1.0 + mass)) ** 0.25


def effect_limits(sma, eccentricity, mass, cloud_eccentricity):
    """
    Range of orbital distances a body can gravitationally sweep
    Args:
        sma (float):
            Semi-major axis in AU
        eccentricity (float):
            Orbital eccentricity
        mass (float):
            Body mass in solar masses
        cloud_eccentricity (float):
            Eccentricity of the dust cloud particles
    Returns:
        inner (float):
            Inner edge of the swept region in AU
        outer (float):
            Outer edge of the swept region in AU
    """
    s = effect_limit_scalar(mass)
    inner = sma * (1.0 - eccentricity) * (1.0 - s) / (1.0 + cloud_eccentricity)
    outer = sma * (1.0 + eccentricity) * (1.0 + s) / (1.0 - cloud_eccentricity)
    return inner, outer


def critical_limit(sma, eccentricity, luminosity):
    """
    Mass above which a body starts holding on to gas
    Args:
        sma (float):
            Semi-major axis in AU
        eccentricity (float):
            Orbital eccentricity
        luminosity (float):
            Stellar luminosity in solar luminosities
    Returns:
        float:
            Critical mass in solar masses
    """
    perihelion = sma * (1.0 - eccentricity)
    temp = perihelion * np.sqrt(luminosity)
    return CRITICAL_MASS_COEFF * temp**-0.75


def dust_density(density_constant, stellar_mass, sma):
    return density_constant * np.sqrt(stellar_mass) * np.exp(
        -DUST_ALPHA * sma ** (1.0 / DUST_N)
    )


def gas_mass_density(dust_rho, critical_mass, last_mass):
    """
    Total (dust plus gas) density seen by a body heavier than its critical mass
    """
    return (
        GAS_DUST_RATIO
        * dust_rho
        / (1.0 + np.sqrt(critical_mass / last_mass) * (GAS_DUST_RATIO - 1.0))
    )


def blagg_correction(theta):
    """
    Blagg's periodic correction term f(theta) for the Titius-Bode progression
    """
    return 0.249 + 0.86 * (
        np.cos(theta) / (3.0 - np.cos(2.0 * theta))
        + 1.0 / (6.0 - 4.0 * np.cos(theta - np.pi / 6.0))
    )


def bode_sma(n, A, B, alpha, beta=BODE_BETA):
    """
    Semi-major axis of the n-th term of a Blagg law progression
    Args:
        n (int):
            Index of the term, 0 being the reference orbit
        A (float):
            Scale in AU
        B (float):
            Offset added to the correction term
        alpha (float):
            Phase of the correction term in radians
        beta (float):
            Phase advance per term in radians
    Returns:
        float:
            Semi-major axis in AU
    """
    return A * (B + blagg_correction(alpha + n * beta)) * BODE_RATIO**n


def merge_orbits(m1, a1, e1, m2, a2, e2):
    """
    Combine two orbits conserving mass and angular momentum

    Returns:
        a (float):
            Merged semi-major axis, between a1 and a2
        e (float):
            Merged eccentricity
        clamped (bool):
            True when the combination produced e >= 1 and e was reset to 0
    """
    mass = m1 + m2
    a = mass / (m1 / a1 + m2 / a2)
    h = m1 * np.sqrt(a1) * np.sqrt(1.0 - e1**2) + m2 * np.sqrt(a2) * np.sqrt(
        1.0 - e2**2
    )
    e_sq = 1.0 - (h / (mass * np.sqrt(a))) ** 2
    e_sq = max(0.0, e_sq)
    if e_sq >= 1.0:
        return float(a), 0.0, True
    return float(a), float(np.sqrt(e_sq)), False


def main_sequence_luminosity(mass):
    """
    Simple main-sequence mass-luminosity relation, solar units in and out
    """
    if mass < 1.0:
        n = 1.75 * (mass - 0.1) + 3.325
    else:
        n = 0.5 * (2.0 - mass) + 4.4
    return mass**n


def fold_angle(angle):
    """
    Fold an angle in degrees into [0, 180]
    """
    angle = angle % 360.0
    if angle > 180.0:
        angle = 360.0 - angle
    return angle
