from dataclasses import dataclass

from accrete.util.misc import effect_limits


@dataclass
class Protoplanet:
    """
    A growing body before it is promoted to, or merged into, a planet.
    Masses are in solar masses and sma in AU.

    added_mass, added_dust_mass and added_gas_mass hold the sweep computed by
    the last growth step that has not been committed to the body yet.
    """

    sma: float
    eccentricity: float
    mass: float
    dust_mass: float = 0.0
    gas_mass: float = 0.0
    critical_mass: float = 0.0
    effect_limit_inner: float = 0.0
    effect_limit_outer: float = 0.0
    active: bool = True
    added_mass: float = 0.0
    added_dust_mass: float = 0.0
    added_gas_mass: float = 0.0
    iterations: int = 0

    def set_effect_limits(self, cloud_eccentricity, mass=None):
        mass = self.mass if mass is None else mass
        self.effect_limit_inner, self.effect_limit_outer = effect_limits(
            self.sma, self.eccentricity, mass, cloud_eccentricity
        )

    def commit(self):
        """
        Move the pending sweep into the body's mass
        """
        self.mass += self.added_mass
        self.dust_mass += self.added_dust_mass
        self.gas_mass += self.added_gas_mass
        self.added_mass = 0.0
        self.added_dust_mass = 0.0
        self.added_gas_mass = 0.0

    def to_planet_dict(self):
        return {
            "a": self.sma,
            "e": self.eccentricity,
            "dust_mass": self.dust_mass,
            "gas_mass": self.gas_mass,
        }
