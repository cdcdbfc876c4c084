from accrete.accretion.generator import Generator
from accrete.base.system import System


class AccretionSystem(System):
    """
    A system built by running the accretion model around a star

    Args:
        star (Star):
            Central star
        config (Config or dict):
            Run configuration
        schedule (str):
            "sequential" or "semi-parallel"
        bands (list):
            Optional explicit initial dust bands
    """

    def __init__(self, star, config=None, schedule="sequential", bands=None):
        self.generator = Generator(star, config, bands=bands)
        planets = self.generator.generate(schedule)
        super().__init__(
            star=star, planets=list(planets), disk=self.generator.dust_field
        )
        self.schedule = schedule
        self.seed = self.generator.seed
        self.protoplanet_count = self.generator.protoplanet_count
        self.origin = "Accretion"

    def __repr__(self):
        return (
            f"{self.star.name}\tseed:{self.seed}\tschedule:{self.schedule}\n"
            f"{len(self.planets)} planets from {self.protoplanet_count} "
            f"protoplanets\n\nPlanets:\n{self.get_p_df()}"
        )
