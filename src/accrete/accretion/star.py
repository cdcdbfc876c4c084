import astropy.units as u

from accrete.base.star import Star
from accrete.util.misc import main_sequence_luminosity


class AccretionStar(Star):
    """
    Main-sequence star described by its mass alone. Luminosity follows a
    simple mass-luminosity relation and the zones scale with the cube root of
    the mass.

    Args:
        mass (float or astropy Quantity):
            Stellar mass, solar masses if a bare number
        name (str):
            Name of the star
    """

    def __init__(self, mass, name="Star"):
        mass = u.Quantity(mass, u.M_sun).to_value(u.M_sun)
        if mass <= 0:
            raise ValueError(f"Stellar mass must be positive, got {mass}")
        super().__init__(
            {"name": name, "mass": mass, "luminosity": main_sequence_luminosity(mass)}
        )
