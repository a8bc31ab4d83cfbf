"""
This subpackage provides functionality for simulating stars, planets, moons, and comets on circular orbits.
Packages contains the OrbitalBody class, its per-category constructors, and the BodyRegistry that runs simulations.
"""

from .orbital_physics import *

from .bodies import *
from .systems import *
