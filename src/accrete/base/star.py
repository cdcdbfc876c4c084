import astropy.units as u
import numpy as np


class Star:
    """
    The star of a system. Only the properties the accretion model reads are
    kept here.

    Args:
        star_dict (dict):
            Must contain "mass" and "luminosity". "ecosphere", "dust_zone" and
            "protoplanet_zone" are optional. Bare numbers are taken to be in
            solar units and AU.
    """

    def __init__(self, star_dict):
        self.name = star_dict.get("name", "Star")
        self.mass = u.Quantity(star_dict["mass"], u.M_sun)
        self.luminosity = u.Quantity(star_dict["luminosity"], u.L_sun)
        if "ecosphere" in star_dict:
            self.ecosphere = u.Quantity(star_dict["ecosphere"], u.AU)
        else:
            self.ecosphere = np.sqrt(self.luminosity.to_value(u.L_sun)) * u.AU
        cube_root = self.mass.to_value(u.M_sun) ** (1 / 3)
        self.protoplanet_zone = u.Quantity(
            star_dict.get("protoplanet_zone", (0.3 * cube_root, 50 * cube_root)), u.AU
        )
        self.dust_zone = u.Quantity(
            star_dict.get("dust_zone", (0.0, 200 * cube_root)), u.AU
        )

    def __repr__(self):
        return (
            f"{type(self).__name__} object\n{self.name}\t"
            f"M:{self.mass:.3f}\tL:{self.luminosity:.3f}\t"
            f"eco:{self.ecosphere:.3f}"
        )

    def dump_params(self):
        params = {
            "mass": self.mass,
            "luminosity": self.luminosity,
            "ecosphere": self.ecosphere,
            "pz_inner": self.protoplanet_zone[0],
            "pz_outer": self.protoplanet_zone[1],
            "dust_inner": self.dust_zone[0],
            "dust_outer": self.dust_zone[1],
        }
        return params
