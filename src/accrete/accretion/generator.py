import warnings

import astropy.units as u

from accrete.accretion.config import Config
from accrete.accretion.dust import DustField
from accrete.accretion.engine import AccretionEngine
from accrete.accretion.seeds import SeedPlanner
from accrete.util.misc import AccretionWarning
from accrete.util.random import RandomSource

MAX_PASSES = 10000
MAX_FALLBACK_DRAWS = 100000

SCHEDULES = ("sequential", "semi-parallel")


class Generator:
    """
    Runs the accretion model for one star.

    Args:
        star (Star):
            Supplies mass, luminosity, ecosphere, dust zone and protoplanet zone
        config (Config or dict):
            Run configuration, a dict is turned into a Config
        bands (list):
            Optional explicit initial dust band layout, see DustField.from_bands.
            Defaults to one band of dust and gas across the star's dust zone.
    """

    def __init__(self, star, config=None, bands=None):
        if config is None or isinstance(config, dict):
            config = Config(config)
        else:
            config = config.replace()
        self.star = star
        self.config = config
        self.bands = bands

        self.stellar_mass = star.mass.to_value(u.M_sun)
        self.luminosity = star.luminosity.to_value(u.L_sun)
        self.ecosphere = star.ecosphere.to_value(u.AU)
        self.dust_zone = tuple(star.dust_zone.to_value(u.AU))
        pz_inner, pz_outer = star.protoplanet_zone.to_value(u.AU)
        if 0 < config.override_outer_planet_limit < pz_outer:
            pz_outer = config.override_outer_planet_limit
        self.protoplanet_zone = (float(pz_inner), float(pz_outer))

        self.seed = None
        self.rng = None
        self.dust_field = None
        self.engine = None
        self.passes = 0
        self.fallback_draws = 0

    @property
    def planets(self):
        return [] if self.engine is None else self.engine.planets

    @property
    def protoplanet_count(self):
        return 0 if self.engine is None else self.engine.protoplanet_count

    def generate(self, schedule="sequential"):
        """
        Run the model and return the planets sorted by semi-major axis

        Args:
            schedule (str):
                "sequential" grows each seed to completion before the next.
                "semi-parallel" grows every seed, plus protoplanet_count random
                ones, a step at a time in round robin passes.
        Returns:
            list:
                AccretionPlanets
        """
        if schedule not in SCHEDULES:
            raise ValueError(
                f"Unknown schedule {schedule!r}, must be one of {SCHEDULES}"
            )
        self.rng = RandomSource(self.config.seed)
        self.seed = self.rng.seed
        self.passes = 0
        self.fallback_draws = 0
        planner = SeedPlanner(
            self.ecosphere, self.protoplanet_zone, self.config, self.rng
        )
        seeds = planner.plan()

        if schedule == "sequential":
            self._init_field()
            for sma, ecc in seeds:
                if not self.dust_field.dust_remains:
                    break
                self.engine.accrete(self.engine.new_protoplanet(sma, ecc))
        else:
            seeds += [
                planner.random_seed() for _ in range(self.config.protoplanet_count)
            ]
            self._init_field()
            self._round_robin(seeds)

        self._consume_remaining_dust(planner)

        for planet in self.engine.planets:
            planet.star = self.star
            planet.finalize(self.rng, self.config)

        if self.config.verbose:
            print(
                f"{len(self.engine.planets)} planets from "
                f"{self.engine.protoplanet_count} protoplanets, seed {self.seed}"
            )
            print("\n".join(self.dust_field.describe()))
        return self.engine.planets

    def _init_field(self):
        if self.bands is None:
            self.dust_field = DustField(
                self.dust_zone[0],
                self.dust_zone[1],
                self.protoplanet_zone,
                self.stellar_mass,
                self.config.dust_density,
            )
        else:
            self.dust_field = DustField.from_bands(
                self.bands,
                self.protoplanet_zone,
                self.stellar_mass,
                self.config.dust_density,
            )
        self.engine = AccretionEngine(self.dust_field, self.config, self.luminosity)

    def _round_robin(self, seeds):
        protoplanets = [self.engine.new_protoplanet(sma, ecc) for sma, ecc in seeds]
        while True:
            self.passes += 1
            any_grew = False
            for protoplanet in protoplanets:
                if protoplanet.active and self.engine.grow_one_step(protoplanet):
                    any_grew = True
            if not any_grew:
                break
            if self.passes >= MAX_PASSES:
                warnings.warn(
                    f"Accretion passes stopped after {MAX_PASSES} passes",
                    AccretionWarning,
                    stacklevel=3,
                )
                for protoplanet in protoplanets:
                    if protoplanet.active and protoplanet.added_mass > 0.0:
                        self.engine.settle(protoplanet)
                break
        if self.config.verbose:
            print(f"{self.passes} accretion passes before all protoplanets settled")

        for protoplanet in protoplanets:
            if protoplanet.mass > self.engine.seed_mass:
                merged = self.engine.resolve(protoplanet)
                if merged is not None:
                    self.engine.accrete(merged)

    def _consume_remaining_dust(self, planner):
        while self.dust_field.dust_remains:
            if self.fallback_draws >= MAX_FALLBACK_DRAWS:
                warnings.warn(
                    f"Dust still remains after {MAX_FALLBACK_DRAWS} random seeds",
                    AccretionWarning,
                    stacklevel=3,
                )
                break
            self.fallback_draws += 1
            protoplanet = self.engine.new_protoplanet(*planner.random_seed())
            protoplanet.set_effect_limits(self.config.cloud_eccentricity)
            if self.dust_field.available(protoplanet):
                self.engine.accrete(protoplanet)
