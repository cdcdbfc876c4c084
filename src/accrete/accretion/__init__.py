__all__ = [
    "AccretionEngine",
    "AccretionPlanet",
    "AccretionStar",
    "AccretionSystem",
    "AccretionUniverse",
    "Config",
    "DustBand",
    "DustField",
    "Generator",
    "Protoplanet",
    "SeedPlanner",
    "create_universe",
]

from .config import Config
from .dust import DustBand, DustField
from .engine import AccretionEngine
from .generator import Generator
from .planet import AccretionPlanet
from .protoplanet import Protoplanet
from .seeds import SeedPlanner
from .star import AccretionStar
from .system import AccretionSystem
from .universe import AccretionUniverse, create_universe
