"""
This module provides simple circular-orbit kinematics for simulations.

All functions here operate on lightweight (lw) floats in SI units, see utils.globals.
"""

import numpy as np

from ...utils import *

__all__ = ['normalize_angle_lw', 'angular_speed_from_period_lw', 'advance_angle_lw',
           'circular_orbit_velocity_lw', 'orbital_period_from_grav_param_lw']

# ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++ #


def normalize_angle_lw(theta: float) -> float:
    """Reduces an angle in radians into [0, 2 pi)

    Negative angles wrap around from 2 pi.  A tiny negative angle can round up to exactly 2 pi, which is folded to 0.

    Parameters
    ----------
    theta
        Angle in radians

    Returns
    -------
    float
        Equivalent angle in [0, 2 pi)
    """
    theta = float(np.mod(theta, two_pi))
    if theta >= two_pi:
        theta = 0.
    return theta


def angular_speed_from_period_lw(orbital_period: float) -> float:
    """Angular speed in rad/s for a given period, 0 for a stationary body (period of 0)"""
    if orbital_period <= 0:
        return 0.
    return two_pi / orbital_period


def advance_angle_lw(theta: float,
                     orbital_period: float,
                     delta_time: float) -> float:
    """Advances theta by the angle swept during delta_time on a circular orbit of orbital_period

    Parameters
    ----------
    theta
        Current angle in radians
    orbital_period
        Orbital period in seconds, 0 for a stationary body
    delta_time
        Elapsed time in seconds

    Returns
    -------
    float
        New angle in [0, 2 pi)
    """
    if orbital_period <= 0:
        return theta
    return normalize_angle_lw(theta + angular_speed_from_period_lw(orbital_period) * delta_time)


# ------------------------------------------------------------------------------------------------------------ #
def circular_orbit_velocity_lw(grav_param: float,
                               orbital_radius: float) -> float:
    """Speed on a circular orbit, v = sqrt(G M / r)

    Parameters
    ----------
    grav_param
        G times the central mass, m^3/s^2
    orbital_radius
        Orbit radius in m

    Returns
    -------
    float
        Orbital speed in m/s, 0 if orbital_radius <= 0
    """
    if orbital_radius <= 0:
        return 0.
    return np.sqrt(grav_param / orbital_radius)


def orbital_period_from_grav_param_lw(grav_param: float,
                                      orbital_radius: float) -> float:
    """Period of a circular orbit, 2 pi / omega with omega = v / r

    Returns 0 (stationary) if orbital_radius <= 0.
    """
    velocity = circular_orbit_velocity_lw(grav_param, orbital_radius)
    if velocity <= 0:
        return 0.
    return two_pi * orbital_radius / velocity
