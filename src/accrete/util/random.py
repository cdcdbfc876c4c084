import time

import numpy as np

from accrete.util.misc import fold_angle


class RandomSource:
    """
    Seeded random stream owned by a single run. Every draw goes through here so
    a run can be replayed exactly from its seed.

    Args:
        seed (int):
            Seed for the generator, 0 derives one from the wall clock
    """

    def __init__(self, seed=0):
        if not seed:
            seed = time.time_ns() % 2**63
        self.seed = int(seed)
        self.rng = np.random.default_rng(self.seed)

    def __repr__(self):
        return f"{type(self).__name__}(seed={self.seed})"

    def uniform(self, low, high):
        return float(self.rng.uniform(low, high))

    def near(self, mean, three_sigma):
        """
        Gaussian draw where three_sigma is the 3 sigma spread
        """
        return float(self.rng.normal(mean, three_sigma / 3.0))

    def about(self, center, spread):
        """
        center scaled by a factor uniform in [1 - spread, 1 + spread]
        """
        return center * self.uniform(1.0 - spread, 1.0 + spread)

    def two_pi(self):
        return self.uniform(0.0, 2.0 * np.pi)

    def eccentricity(self):
        """
        Random orbital eccentricity, between 0 and about 0.19
        """
        return 1.0 - self.uniform(1.0 / 16.0, 1.0) ** 0.077

    def tilt(self, sma, median=23.44):
        """
        Axial tilt in degrees for a body at sma AU
        """
        return fold_angle(sma**0.2 * self.about(median, 0.4))

    def shuffle(self, items):
        """
        Shuffle a list in place
        """
        order = self.rng.permutation(len(items))
        items[:] = [items[i] for i in order]
        return items
