"""
Python package for modelling stars, planets, moons, and comets on simple circular orbits.
"""

from . import utils
from . import simulate
from . import io
from . import visualize
