__all__ = ["Planet", "Star", "System", "Universe"]

from .planet import Planet
from .star import Star
from .system import System
from .universe import Universe
