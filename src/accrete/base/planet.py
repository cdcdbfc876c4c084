import astropy.constants as const
import astropy.units as u
import numpy as np
import pandas as pd


class Planet:
    """
    Class for a planet as it leaves the accretion model: an orbit and a mass
    split into dust and gas. Orbit and masses are stored as floats in AU and
    solar masses, dump_params adds the units.
    """

    def __init__(self, planet_dict, star=None) -> None:
        self.inc = 0.0
        self.W = 0.0
        self.w = 0.0
        self.M0 = 0.0
        self.axial_tilt = None
        for att, value in planet_dict.items():
            setattr(self, att, value)
        self.star = star

    def __repr__(self):
        """
        Make dataframe with planet attributes
        """
        params = self.dump_params()
        res = {}
        for key, val in params.items():
            if type(val) == u.Quantity:
                res[key] = val.value
            else:
                res[key] = val

        p_df = pd.DataFrame(res, index=[0])

        return f"{type(self).__name__} object\n{p_df}"

    @property
    def mass(self):
        return self.dust_mass + self.gas_mass

    @property
    def perihelion(self):
        return self.a * (1.0 - self.e)

    @property
    def aphelion(self):
        return self.a * (1.0 + self.e)

    def dump_params(self):
        params = {
            "a": self.a * u.AU,
            "e": self.e,
            "mass": (self.mass * u.M_sun).to(u.M_earth),
            "dust_mass": (self.dust_mass * u.M_sun).to(u.M_earth),
            "gas_mass": (self.gas_mass * u.M_sun).to(u.M_earth),
            "inc": self.inc * u.deg,
            "W": self.W * u.rad,
            "w": self.w * u.rad,
            "M0": self.M0 * u.rad,
        }
        if self.star is not None:
            params["T"] = self.period()
        return params

    def period(self):
        """
        Orbital period from Kepler's third law
        Returns:
            T (astropy Quantity):
                Period in days
        """
        mu = const.G * (self.star.mass + self.mass * u.M_sun)
        return (2 * np.pi * np.sqrt((self.a * u.AU) ** 3 / mu)).to(u.d)
