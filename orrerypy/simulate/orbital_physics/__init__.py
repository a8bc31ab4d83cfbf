"""
This submodule provides methods for simulating orbital motion.
"""

from .circular_orbits import *
