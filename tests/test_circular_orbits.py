import numpy as np
import pytest

from orrerypy.simulate.orbital_physics import (normalize_angle_lw, angular_speed_from_period_lw, advance_angle_lw,
                                               circular_orbit_velocity_lw, orbital_period_from_grav_param_lw)
from orrerypy.utils import G_const


def test_normalize_angle_keeps_values_in_range():
    assert normalize_angle_lw(0.) == 0.
    assert normalize_angle_lw(np.pi) == pytest.approx(np.pi)
    assert normalize_angle_lw(2 * np.pi) == 0.
    assert normalize_angle_lw(7.) == pytest.approx(7. - 2 * np.pi)


def test_normalize_angle_wraps_negative_values():
    assert normalize_angle_lw(-0.5) == pytest.approx(2 * np.pi - 0.5)
    assert normalize_angle_lw(-5 * np.pi / 2) == pytest.approx(3 * np.pi / 2)


def test_tiny_negative_angle_does_not_round_up_to_two_pi():
    theta = normalize_angle_lw(-1e-17)
    assert 0. <= theta < 2 * np.pi


def test_angular_speed_from_period():
    assert angular_speed_from_period_lw(86400.) == pytest.approx(2 * np.pi / 86400.)
    assert angular_speed_from_period_lw(0.) == 0.


def test_advance_angle_stationary_body():
    assert advance_angle_lw(1.25, 0., 1e6) == 1.25


def test_advance_angle_half_period():
    assert advance_angle_lw(0., 86400., 43200.) == pytest.approx(np.pi, abs=1e-9)


def test_circular_orbit_velocity():
    grav_param = G_const * 5.972e24
    # Low Earth orbit is close to 7.7 km/s
    assert circular_orbit_velocity_lw(grav_param, 6.771e6) == pytest.approx(7672., rel=1e-2)
    assert circular_orbit_velocity_lw(grav_param, 0.) == 0.


def test_orbital_period_from_grav_param_matches_kepler():
    grav_param = G_const * 1.989e30
    radius = 1.495978707e11
    expected = 2 * np.pi * np.sqrt(radius**3 / grav_param)
    assert orbital_period_from_grav_param_lw(grav_param, radius) == pytest.approx(expected)
    assert orbital_period_from_grav_param_lw(grav_param, 0.) == 0.
