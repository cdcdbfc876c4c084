from pathlib import Path

import dill
from tqdm import tqdm

from accrete.accretion.config import Config
from accrete.accretion.star import AccretionStar
from accrete.accretion.system import AccretionSystem
from accrete.base.universe import Universe


def create_universe(universe_params):
    """
    Build an AccretionUniverse from a dict of parameters

    Args:
        universe_params (dict):
            "stellar_masses" (list of float, required), and optionally
            "config" (dict or Config), "schedule", "first_seed" and "cache_dir"
    """
    stars = [
        AccretionStar(mass, name=f"Star {i}")
        for i, mass in enumerate(universe_params["stellar_masses"])
    ]
    return AccretionUniverse(
        stars,
        config=universe_params.get("config"),
        schedule=universe_params.get("schedule", "sequential"),
        first_seed=universe_params.get("first_seed", 1),
        cache_dir=universe_params.get("cache_dir"),
    )


class AccretionUniverse(Universe):
    """
    A batch of accretion systems, one per star, with consecutive seeds

    Args:
        stars (list):
            Stars to build systems around
        config (Config or dict):
            Shared run configuration, its seed is replaced per system
        schedule (str):
            "sequential" or "semi-parallel"
        first_seed (int):
            Seed of the first system, later systems count up from it
        cache_dir (str or Path):
            If given, systems are pickled there with dill and reloaded on the
            next run with the same seed
    """

    def __init__(
        self, stars, config=None, schedule="sequential", first_seed=1, cache_dir=None
    ):
        self.type = "Accretion"
        if not isinstance(config, Config):
            config = Config(config)
        if first_seed < 1:
            raise ValueError("first_seed must be positive to keep systems reproducible")
        if cache_dir is not None:
            cache_dir = Path(cache_dir)
            cache_dir.mkdir(parents=True, exist_ok=True)
        self.cache_dir = cache_dir

        self.systems = []
        for i, star in enumerate(
            tqdm(stars, desc="Generating systems", position=0, leave=False)
        ):
            system_config = config.replace(seed=first_seed + i)
            if cache_dir is not None:
                cache_file = Path(
                    cache_dir, f"{schedule}_{system_config.seed}.p"
                )
                if cache_file.exists():
                    with open(cache_file, "rb") as f:
                        system = dill.load(f)
                else:
                    system = AccretionSystem(star, system_config, schedule)
                    with open(cache_file, "wb") as f:
                        dill.dump(system, f)
            else:
                system = AccretionSystem(star, system_config, schedule)
            self.systems.append(system)

        self.seeds = [system.seed for system in self.systems]
        self.names = [system.star.name for system in self.systems]

        super().__init__()
