__all__ = ["accretion", "base", "util"]

from . import accretion, base, util
