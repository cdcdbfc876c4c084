import astropy.units as u
import numpy as np
import pandas as pd


class System:
    """
    Class for a single system. Must have a star and a list of planets.
    """

    def __init__(self, star=None, planets=None, disk=None) -> None:
        self.star = star
        self.planets = planets
        self.disk = disk
        if self.planets is not None:
            self.planet_cleanup()

        self.origin = "Base"

    def __repr__(self):
        name = self.star.name if self.star is not None else "Unknown star"
        return f"{name}\tOrigin:{self.origin}\n\nPlanets:\n{self.get_p_df()}"

    def planet_cleanup(self):
        self.pInds = np.arange(len(self.planets))
        # Sort the planets in the system by semi-major axis
        a_vals = [planet.a for planet in self.planets]
        order = np.argsort(a_vals, kind="stable")
        self.planets = [self.planets[i] for i in order]
        self.pInds = self.pInds[order]

    def getpattr(self, attr):
        # Return array of all planet's attribute value, e.g. all semi-major
        # axis values
        vals = [planet.dump_params()[attr] for planet in self.planets]
        if vals and type(vals[0]) == u.Quantity:
            return u.Quantity(vals)
        return vals

    def get_p_df(self):
        patts = ["a", "e", "mass", "dust_mass", "gas_mass", "inc", "W", "w", "M0"]
        if not self.planets:
            return pd.DataFrame(columns=patts)
        p_df = pd.DataFrame()
        for att in patts:
            pattr = self.getpattr(att)
            if type(pattr) == u.Quantity:
                p_df[att] = pattr.value
            else:
                p_df[att] = pattr
        return p_df
