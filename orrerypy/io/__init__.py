"""
This subpackage provides tools for describing systems in json files and loading them for simulation.
"""

from .loaders import *
from .system_template import *
