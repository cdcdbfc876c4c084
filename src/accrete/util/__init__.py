__all__ = [
    "AccretionWarning",
    "RandomSource",
    "effect_limit_scalar",
    "effect_limits",
    "critical_limit",
    "dust_density",
    "gas_mass_density",
    "blagg_correction",
    "bode_sma",
    "merge_orbits",
    "main_sequence_luminosity",
    "fold_angle",
]

from .misc import (
    AccretionWarning,
    effect_limit_scalar,
    effect_limits,
    critical_limit,
    dust_density,
    gas_mass_density,
    blagg_correction,
    bode_sma,
    merge_orbits,
    main_sequence_luminosity,
    fold_angle,
)
from .random import RandomSource
