import bisect
import warnings

from accrete.accretion.planet import AccretionPlanet
from accrete.accretion.protoplanet import Protoplanet
from accrete.util.misc import (
    CONVERGENCE_TOLERANCE,
    AccretionWarning,
    critical_limit,
    effect_limit_scalar,
    merge_orbits,
)

MAX_GROWTH_ITERATIONS = 1000


class AccretionEngine:
    """
    Grows protoplanets against a DustField and resolves them against the
    planet list, which is kept sorted by semi-major axis.

    Args:
        dust_field (DustField):
            Disc being swept, mutated in place
        config (Config):
            Run configuration
        luminosity (float):
            Stellar luminosity in solar luminosities
    """

    def __init__(self, dust_field, config, luminosity):
        self.dust_field = dust_field
        self.config = config
        self.luminosity = luminosity
        self.seed_mass = config.protoplanet_seed_mass
        self.planets = []
        self.protoplanet_count = 0

    def new_protoplanet(
        self, sma, eccentricity, mass=None, dust_mass=None, gas_mass=0.0
    ):
        if mass is None:
            mass = self.seed_mass
        if dust_mass is None:
            dust_mass = mass - gas_mass
        return Protoplanet(
            sma=sma,
            eccentricity=eccentricity,
            mass=mass,
            dust_mass=dust_mass,
            gas_mass=gas_mass,
            critical_mass=critical_limit(sma, eccentricity, self.luminosity),
        )

    def grow_one_step(self, protoplanet):
        """
        One pass of the growth loop. The sweep a body of mass
        (mass + pending sweep) would collect is recomputed against the current
        field. Once the sweep stops changing it is committed to the body and
        its lane is cleared.

        Returns:
            bool:
                False when nothing could be collected, in which case the
                protoplanet is deactivated without gaining mass
        """
        last_mass = protoplanet.mass + protoplanet.added_mass
        protoplanet.set_effect_limits(self.config.cloud_eccentricity, last_mass)
        old_mass = protoplanet.added_mass
        added, dust, gas = self.dust_field.collect(protoplanet, last_mass)
        protoplanet.iterations += 1

        if added <= 0.0:
            protoplanet.added_mass = 0.0
            protoplanet.added_dust_mass = 0.0
            protoplanet.added_gas_mass = 0.0
            protoplanet.active = False
            return False

        protoplanet.added_mass = added
        protoplanet.added_dust_mass = dust
        protoplanet.added_gas_mass = gas
        if added - old_mass < CONVERGENCE_TOLERANCE * old_mass:
            self.settle(protoplanet)
        elif protoplanet.iterations >= MAX_GROWTH_ITERATIONS:
            warnings.warn(
                f"Protoplanet at {protoplanet.sma:.3f} AU did not converge in "
                f"{MAX_GROWTH_ITERATIONS} iterations",
                AccretionWarning,
                stacklevel=2,
            )
            self.settle(protoplanet)
        return True

    def settle(self, protoplanet):
        """
        Commit the pending sweep and clear the protoplanet's lane
        """
        protoplanet.commit()
        protoplanet.set_effect_limits(self.config.cloud_eccentricity)
        self.dust_field.update(
            protoplanet, gas_retained=protoplanet.mass < protoplanet.critical_mass
        )
        protoplanet.active = False

    def grow_to_convergence(self, protoplanet):
        protoplanet.active = True
        protoplanet.iterations = 0
        while protoplanet.active:
            self.grow_one_step(protoplanet)

    def accrete(self, protoplanet):
        """
        Fully process a protoplanet: grow it, then merge it with or insert it
        into the planet list. Merged bodies are grown again until one of them
        finds a free orbit.
        """
        while protoplanet is not None:
            self.grow_to_convergence(protoplanet)
            if protoplanet.mass <= self.seed_mass:
                if self.config.verbose:
                    print(
                        f"Protoplanet at {protoplanet.sma:.3f} AU collected no "
                        "dust, discarding"
                    )
                return
            protoplanet = self.resolve(protoplanet)

    def resolve(self, protoplanet):
        """
        Count a grown protoplanet and coalesce it

        Returns:
            Protoplanet or None:
                The merged body still to be grown, if a collision happened
        """
        self.protoplanet_count += 1
        return self.coalesce(protoplanet)

    def coalesce(self, protoplanet):
        """
        Merge the protoplanet with the first planet whose orbit it overlaps,
        or insert it as a new planet

        Returns:
            Protoplanet or None:
                A new protoplanet carrying the combined mass on the merged
                orbit, or None if the protoplanet became a planet
        """
        pp_scalar = effect_limit_scalar(protoplanet.mass)
        for i, planet in enumerate(self.planets):
            diff = planet.a - protoplanet.sma
            planet_scalar = effect_limit_scalar(planet.mass)
            if diff > 0.0:
                dist1 = (
                    protoplanet.sma
                    * (1.0 + protoplanet.eccentricity)
                    * (1.0 + pp_scalar)
                    - protoplanet.sma
                )
                dist2 = planet.a - planet.a * (1.0 - planet.e) * (1.0 - planet_scalar)
            else:
                dist1 = protoplanet.sma - protoplanet.sma * (
                    1.0 - protoplanet.eccentricity
                ) * (1.0 - pp_scalar)
                dist2 = planet.a * (1.0 + planet.e) * (1.0 + planet_scalar) - planet.a

            if abs(diff) <= abs(dist1) or abs(diff) <= abs(dist2):
                return self._merge(i, protoplanet)

        new_planet = AccretionPlanet.from_protoplanet(protoplanet)
        bisect.insort(self.planets, new_planet, key=lambda p: p.a)
        if self.config.verbose:
            print(f" ... Adding new planet at {new_planet.a:.3f} AU")
        return None

    def _merge(self, index, protoplanet):
        planet = self.planets[index]
        a, e, clamped = merge_orbits(
            planet.mass,
            planet.a,
            planet.e,
            protoplanet.mass,
            protoplanet.sma,
            protoplanet.eccentricity,
        )
        if clamped:
            warnings.warn(
                f"Merged orbit at {a:.3f} AU had eccentricity >= 1, using 0",
                AccretionWarning,
                stacklevel=3,
            )
        if self.config.verbose:
            print(
                f" ... Protoplanet collision. Body at {protoplanet.sma:.3f} AU "
                f"merged with planet at {planet.a:.3f} AU"
            )
        del self.planets[index]
        return self.new_protoplanet(
            a,
            e,
            mass=planet.mass + protoplanet.mass,
            dust_mass=planet.dust_mass + protoplanet.dust_mass,
            gas_mass=planet.gas_mass + protoplanet.gas_mass,
        )
