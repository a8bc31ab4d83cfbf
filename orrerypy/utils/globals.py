"""
Basically just 2 pi, and the base units.
"""

import numpy as np
from astropy import units as u
from astropy import constants as const

__all__ = ['two_pi',
           'lw_distance_unit', 'lw_time_unit', 'lw_mass_unit', 'lw_angle_unit',
           'lw_density_unit', 'lw_accel_unit',
           'G_const']

# ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++ #


# One full revolution, in radians
two_pi = 2 * np.pi


# Base units, used in lightweight (lw) calculations
lw_distance_unit = u.m
lw_time_unit = u.s
lw_mass_unit = u.kg
lw_angle_unit = u.rad
lw_density_unit = lw_mass_unit / lw_distance_unit**3
lw_accel_unit = lw_distance_unit / lw_time_unit**2


# Gravitational constant in lw units
G_const = const.G.to(lw_distance_unit**3/lw_mass_unit/lw_time_unit**2).value
