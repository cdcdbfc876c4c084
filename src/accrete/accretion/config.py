import copy


DEFAULTS = {
    "seed": 0,
    "cloud_eccentricity": 0.2,
    "dust_density": 2.0e-3,
    "protoplanet_seed_mass": 1.0e-15,
    "protoplanet_seeds": [],
    "generate_bode_seeds": False,
    "protoplanet_count": 20,
    "override_outer_planet_limit": 0.0,
    "inclination_mean": 0.0,
    "inclination_std_dev": 1.5,
    "random_axial_tilt": False,
    "verbose": False,
}


class Config:
    """
    Settings for one accretion run

    Args:
        config_dict (dict):
            Overrides for any of the keys in DEFAULTS. Unknown keys raise a
            ValueError.
    """

    def __init__(self, config_dict=None):
        config_dict = {} if config_dict is None else dict(config_dict)
        unknown = set(config_dict) - set(DEFAULTS)
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        for att, value in DEFAULTS.items():
            setattr(self, att, copy.deepcopy(config_dict.get(att, value)))

        self.cloud_eccentricity = min(max(float(self.cloud_eccentricity), 0.0), 0.9)
        self.protoplanet_seeds = [
            (float(sma), float(ecc)) for sma, ecc in self.protoplanet_seeds
        ]
        self.protoplanet_count = int(self.protoplanet_count)
        self.inclination_mean = abs(float(self.inclination_mean)) % 180.0
        self.inclination_std_dev = abs(float(self.inclination_std_dev))

    def __repr__(self):
        vals = ", ".join(f"{key}={val!r}" for key, val in self.to_dict().items())
        return f"{type(self).__name__}({vals})"

    def __eq__(self, other):
        if not isinstance(other, Config):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def to_dict(self):
        return {att: copy.deepcopy(getattr(self, att)) for att in DEFAULTS}

    def replace(self, **changes):
        """
        Copy of this config with some values changed
        """
        params = self.to_dict()
        params.update(changes)
        return Config(params)
