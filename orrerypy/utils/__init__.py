"""
This subpackage provides utility functions useful throughout OrreryPy.

All functions and classes in this subpackage are designed to be safe for use by the other packages.
"""

from .astropyio import *
from .exceptions import *
from .globals import *
from .plottables import *
