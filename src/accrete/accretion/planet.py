from accrete.base.planet import Planet


class AccretionPlanet(Planet):
    """
    Planet promoted from a protoplanet. Carries orbit and masses in AU and
    solar masses until finalize assigns its orientation.
    """

    @classmethod
    def from_protoplanet(cls, protoplanet, star=None):
        return cls(protoplanet.to_planet_dict(), star)

    def dump_params(self):
        params = super().dump_params()
        if self.axial_tilt is not None:
            params["axial_tilt"] = self.axial_tilt
        return params

    def finalize(self, rng, config):
        """
        Draw the orbital orientation, and optionally the axial tilt, once the
        planet's orbit and mass are fixed

        Args:
            rng (RandomSource):
                Random stream of the run
            config (Config):
                Supplies the inclination distribution and axial tilt flag
        """
        inc = rng.near(config.inclination_mean, 3.0 * config.inclination_std_dev)
        self.inc = abs(inc) % 180.0
        self.W = rng.two_pi()
        self.w = rng.two_pi()
        self.M0 = rng.two_pi()
        if config.random_axial_tilt:
            self.axial_tilt = rng.tilt(self.a)
