"""
This subpackage provides text and plotting tools for OrreryPy.

The tools only read the state of bodies and systems, they never advance them.
"""

from .text_reports import *
from .orbital_plots import *
