import warnings

from accrete.util.misc import (
    BODE_B,
    AccretionWarning,
    blagg_correction,
    bode_sma,
)

# Upper bound on the number of terms tried on each side of the Blagg sequence
MAX_BODE_TERMS = 100


class SeedPlanner:
    """
    Produces the ordered list of (sma, eccentricity) seeds for a run.

    Args:
        ecosphere (float):
            Ecosphere radius of the star in AU
        protoplanet_zone (tuple):
            (inner, outer) in AU, seeds outside it are dropped
        config (Config):
            Run configuration
        rng (RandomSource):
            Random stream of the run
    """

    def __init__(self, ecosphere, protoplanet_zone, config, rng):
        self.ecosphere = ecosphere
        self.protoplanet_zone = protoplanet_zone
        self.config = config
        self.rng = rng

    def in_zone(self, sma):
        return self.protoplanet_zone[0] <= sma <= self.protoplanet_zone[1]

    def plan(self):
        """
        Seeds for the run: the explicit seeds when any are configured, else the
        Blagg sequence when enabled, else nothing (pure random fallback).
        """
        if self.config.protoplanet_seeds:
            seeds = self.explicit_seeds()
        elif self.config.generate_bode_seeds:
            seeds = self.bode_seeds()
        else:
            seeds = []
        if self.config.verbose:
            print(f"{len(seeds)} protoplanet seeds planned")
        return seeds

    def explicit_seeds(self):
        """
        Configured seeds with out of range eccentricities redrawn and seeds
        outside the protoplanet zone dropped
        """
        seeds = []
        for sma, ecc in self.config.protoplanet_seeds:
            if ecc < 0.0 or ecc >= 0.9:
                ecc = self.rng.eccentricity()
            seeds.append((sma, ecc))
        return self._drop_outside_zone(seeds)

    def bode_seeds(self):
        """
        Seeds following Blagg's formulation of the Titius-Bode law. The n = 0
        term lands near the ecosphere and stays first, the rest are shuffled.
        """
        jitter = self.rng.near(1.0, 0.04)
        B = BODE_B * self.rng.near(1.0, 0.04)
        alpha = self.rng.two_pi()
        A = self.ecosphere * jitter / (B + blagg_correction(alpha))

        seeds = [(bode_sma(0, A, B, alpha), self.rng.eccentricity())]
        inward = outward = True
        n = 1
        while (inward or outward) and n <= MAX_BODE_TERMS:
            if inward:
                sma = bode_sma(-n, A, B, alpha)
                if self.in_zone(sma):
                    seeds.append((sma, self.rng.eccentricity()))
                else:
                    inward = False
            if outward:
                sma = bode_sma(n, A, B, alpha)
                if self.in_zone(sma):
                    seeds.append((sma, self.rng.eccentricity()))
                else:
                    outward = False
            n += 1

        rest = self.rng.shuffle(seeds[1:])
        return self._drop_outside_zone([seeds[0]] + rest)

    def random_seed(self):
        sma = self.rng.uniform(*self.protoplanet_zone)
        return sma, self.rng.eccentricity()

    def _drop_outside_zone(self, seeds):
        kept = []
        for sma, ecc in seeds:
            if self.in_zone(sma):
                kept.append((sma, ecc))
            else:
                warnings.warn(
                    f"Discarded protoplanet seed at {sma:.3f} AU, outside of the "
                    f"protoplanet zone {self.protoplanet_zone[0]:.3f} - "
                    f"{self.protoplanet_zone[1]:.3f} AU",
                    AccretionWarning,
                    stacklevel=3,
                )
        return kept
