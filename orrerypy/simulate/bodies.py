"""
This module provides the OrbitalBody class and per-category constructors for simulations.

Every body, whatever its category, shares the same state and update logic.
Category-specific extras are held in a payload record whose type depends on the category.
"""

from collections import namedtuple

import numpy as np
from astropy import units as u
from astropy.coordinates import Angle

from ..utils import *
from .orbital_physics import *

__all__ = ['body_categories', 'StarPayload', 'PlanetPayload', 'MoonPayload', 'CometPayload',
           'OrbitalBody', 'circular_orbital_period',
           'new_star', 'new_planet', 'new_moon', 'new_comet']

# ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++ #

body_categories = ('star', 'planet', 'moon', 'comet', 'unspecified')

StarPayload = namedtuple('StarPayload', ['surface_temperature', 'spectral_type'])
PlanetPayload = namedtuple('PlanetPayload', ['number_of_moons', 'has_rings', 'supports_life'])
MoonPayload = namedtuple('MoonPayload', ['planet_orbiting_name', 'tidally_locked'])
CometPayload = namedtuple('CometPayload', ['eccentricity', 'perihelion_distance'])

_payload_types = {'star': StarPayload,
                  'planet': PlanetPayload,
                  'moon': MoonPayload,
                  'comet': CometPayload,
                  'unspecified': type(None)}


# ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++ #


class OrbitalBody(Plottable):
    """Star, planet, moon, or comet moving on a prescribed circular orbit around an implicit center."""

    # ------------------------------------------------------------------------------------------------------------ #
    def __init__(self,
                 name: str,
                 mass: u.Quantity,
                 radius: u.Quantity,
                 orbital_radius: u.Quantity=None,
                 orbital_period: u.Quantity=None,
                 category: str=None,
                 payload: tuple=None,
                 initial_theta: (u.Quantity, Angle)=None,
                 **kwargs):
        """Body with a mass, a radius, and a circular orbit described by its period

        Parameters
        ----------
        name
            Identifier for the body, fixed after construction
        mass
            Mass of the body, must be non-negative
        radius
            Physical radius of the body, must be non-negative
        orbital_radius
            Radius of the orbit, default 0 (a central body)
        orbital_period
            Time for one full revolution, default 0 (stationary)
        category
            One of body_categories, default 'unspecified'
        payload
            Category-specific record, e.g. a PlanetPayload for a planet, or None
        initial_theta
            Starting orbital angle, reduced into [0, 2 pi)
        kwargs
            kwargs are currently only passed to Plottable
        """
        super().__init__(name=name, **kwargs)

        if category is None:
            category = 'unspecified'
        if category not in body_categories:
            raise InvalidArgument("Category, input as " + str(category) + ", must be one of " + str(body_categories))
        self._category = category

        if payload is not None and not isinstance(payload, _payload_types[category]):
            raise TypeError("Payload of type " + type(payload).__name__ + " does not match category " + category)
        self._payload = payload

        self._mass = _non_negative(mass, lw_mass_unit, "mass")
        self._radius = _non_negative(radius, lw_distance_unit, "radius")

        if orbital_radius is None:
            orbital_radius = u.Quantity(0., lw_distance_unit)
        self._orbital_radius = _non_negative(orbital_radius, lw_distance_unit, "orbital_radius")

        if orbital_period is None:
            orbital_period = u.Quantity(0., lw_time_unit)
        self._orbital_period = _non_negative(orbital_period, lw_time_unit, "orbital_period")

        self._mass_lw = self._mass.value
        self._radius_lw = self._radius.value
        self._orbital_radius_lw = self._orbital_radius.value
        self._orbital_period_lw = self._orbital_period.value

        if initial_theta is None:
            self._theta_lw = 0.
        else:
            theta_lw = cast_to_unit(initial_theta, lw_angle_unit, "initial_theta").value
            if not np.isfinite(theta_lw):
                raise InvalidArgument("initial_theta, input as " + str(initial_theta) + ", must be finite")
            self._theta_lw = normalize_angle_lw(theta_lw)

    # ------------------------------------------------------------------------------------------------------------ #
    @classmethod
    def from_gravitational_parameter(cls,
                                     name: str,
                                     mass: u.Quantity,
                                     radius: u.Quantity,
                                     orbital_radius: u.Quantity,
                                     central_mass: u.Quantity,
                                     **kwargs) -> 'OrbitalBody':
        """Creates a body whose orbital period is derived from the mass it orbits

        Uses the circular orbit speed v = sqrt(G M / r), so omega = v / r and the period is 2 pi / omega.
        The body's own orbital_radius is used as r.

        Parameters
        ----------
        name
            Identifier for the body
        mass
            Mass of the body
        radius
            Physical radius of the body
        orbital_radius
            Radius of the orbit around the central mass
        central_mass
            Mass of the object being orbited, must be positive
        kwargs
            Passed to OrbitalBody, e.g., category, payload, initial_theta

        Returns
        -------
        OrbitalBody
            Body with its orbital period set from G * central_mass and orbital_radius
        """
        return cls(name=name,
                   mass=mass,
                   radius=radius,
                   orbital_radius=orbital_radius,
                   orbital_period=circular_orbital_period(central_mass, orbital_radius),
                   **kwargs)

    # ------------------------------------------------------------------------------------------------------------ #
    @property
    def category(self):
        return self._category

    @property
    def payload(self):
        return self._payload

    # ------------------------------------------------------------------------------------------------------------ #
    @property
    def mass(self):
        return self._mass

    @property
    def radius(self):
        return self._radius

    @property
    def orbital_radius(self):
        return self._orbital_radius

    @property
    def orbital_period(self):
        return self._orbital_period

    # ------------------------------------------------------------------------------------------------------------ #
    @property
    def current_theta(self):
        """Current orbital angle, always in [0, 2 pi)

        Returns
        -------
        Angle
            Orbital angle in radians
        """
        return Angle(self._theta_lw, lw_angle_unit)

    @property
    def current_theta_lw(self):
        return self._theta_lw

    @property
    def angular_speed(self):
        """Angular speed of the body, 0 for a stationary body

        Returns
        -------
        u.Quantity
            Angular speed in rad/s
        """
        return u.Quantity(angular_speed_from_period_lw(self._orbital_period_lw), lw_angle_unit / lw_time_unit)

    @property
    def is_stationary(self):
        return self._orbital_period_lw <= 0

    # ------------------------------------------------------------------------------------------------------------ #
    def advance(self, delta_time: u.Quantity):
        """Moves the body along its orbit for delta_time

        A body with an orbital period of 0 does not move.

        Parameters
        ----------
        delta_time
            Time to advance, must be positive
        """
        self.advance_lw(cast_to_unit(delta_time, lw_time_unit, "delta_time").value)

    def advance_lw(self, delta_time: float):
        """Moves the body along its orbit for delta_time, given in seconds without units

        Parameters
        ----------
        delta_time
            Time to advance in seconds, must be finite and positive
        """
        if not 0 < delta_time < np.inf:
            raise InvalidArgument("delta_time, input as " + str(delta_time) + ", must be finite and positive")
        self._theta_lw = advance_angle_lw(self._theta_lw, self._orbital_period_lw, delta_time)

    # ------------------------------------------------------------------------------------------------------------ #
    def coordinates(self) -> (u.Quantity, float):
        """Polar position of the body for display

        Returns
        -------
        (u.Quantity, float)
            Orbital radius in m, and the current angle as a multiple of pi
        """
        return self._orbital_radius, self._theta_lw / np.pi

    def density(self) -> u.Quantity:
        """Mean density, mass / ((4/3) pi radius^3)

        Returns
        -------
        u.Quantity
            Density in kg/m^3, or 0 if the radius is not positive
        """
        if self._radius_lw <= 0:
            return u.Quantity(0., lw_density_unit)
        volume = 4. / 3. * np.pi * self._radius_lw**3
        return u.Quantity(self._mass_lw / volume, lw_density_unit)

    def surface_gravity(self) -> u.Quantity:
        """Gravitational acceleration at the surface, G mass / radius^2

        Returns
        -------
        u.Quantity
            Acceleration in m/s^2, or 0 if the radius is not positive
        """
        if self._radius_lw <= 0:
            return u.Quantity(0., lw_accel_unit)
        return u.Quantity(G_const * self._mass_lw / self._radius_lw**2, lw_accel_unit)


# ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++ #
def _non_negative(value, unit, label):
    quantity = cast_to_unit(value, unit, label)
    if not 0 <= quantity.value < np.inf:
        raise InvalidArgument(label + ", input as " + u_str(quantity) + ", must be finite and non-negative")
    return quantity


def circular_orbital_period(central_mass: u.Quantity,
                            orbital_radius: u.Quantity) -> u.Quantity:
    """Period of a circular orbit of orbital_radius around central_mass

    Parameters
    ----------
    central_mass
        Mass being orbited, must be positive
    orbital_radius
        Radius of the orbit, must be non-negative

    Returns
    -------
    u.Quantity
        Orbital period in s, 0 if orbital_radius is 0
    """
    central_mass = cast_to_unit(central_mass, lw_mass_unit, "central_mass")
    if not central_mass.value > 0:
        raise InvalidArgument("central_mass, input as " + u_str(central_mass) + ", must be positive")
    orbital_radius = _non_negative(orbital_radius, lw_distance_unit, "orbital_radius")
    period_lw = orbital_period_from_grav_param_lw(G_const * central_mass.value, orbital_radius.value)
    return u.Quantity(period_lw, lw_time_unit)


# ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++ #
def new_star(name: str,
             mass: u.Quantity,
             radius: u.Quantity,
             surface_temperature: u.Quantity,
             spectral_type: str,
             **kwargs) -> OrbitalBody:
    """Star at the center of its system: orbital radius and period are both 0

    Parameters
    ----------
    name
    mass
    radius
    surface_temperature
        Effective temperature of the photosphere
    spectral_type
        e.g., 'G2V'
    kwargs
        Passed to OrbitalBody

    Returns
    -------
    OrbitalBody
    """
    surface_temperature = _non_negative(surface_temperature, u.K, "surface_temperature")
    return OrbitalBody(name=name, mass=mass, radius=radius,
                       orbital_radius=u.Quantity(0., lw_distance_unit),
                       orbital_period=u.Quantity(0., lw_time_unit),
                       category='star',
                       payload=StarPayload(surface_temperature, str(spectral_type)),
                       **kwargs)


def new_planet(name: str,
               mass: u.Quantity,
               radius: u.Quantity,
               orbital_radius: u.Quantity,
               orbital_period: u.Quantity,
               number_of_moons: int=0,
               has_rings: bool=False,
               supports_life: bool=False,
               **kwargs) -> OrbitalBody:
    """Planet with a count of moons, rings, and whether it can support life"""
    if number_of_moons < 0:
        raise InvalidArgument("number_of_moons, input as " + str(number_of_moons) + ", must be non-negative")
    return OrbitalBody(name=name, mass=mass, radius=radius,
                       orbital_radius=orbital_radius,
                       orbital_period=orbital_period,
                       category='planet',
                       payload=PlanetPayload(int(number_of_moons), bool(has_rings), bool(supports_life)),
                       **kwargs)


def new_moon(name: str,
             mass: u.Quantity,
             radius: u.Quantity,
             orbital_radius: u.Quantity,
             orbital_period: u.Quantity,
             planet_orbiting_name: str,
             tidally_locked: bool=False,
             **kwargs) -> OrbitalBody:
    """Moon, which records the name of the planet it orbits"""
    return OrbitalBody(name=name, mass=mass, radius=radius,
                       orbital_radius=orbital_radius,
                       orbital_period=orbital_period,
                       category='moon',
                       payload=MoonPayload(str(planet_orbiting_name), bool(tidally_locked)),
                       **kwargs)


def new_comet(name: str,
              mass: u.Quantity,
              radius: u.Quantity,
              eccentricity: float,
              orbital_period: u.Quantity,
              perihelion_distance: u.Quantity,
              orbital_radius: u.Quantity=None,
              **kwargs) -> OrbitalBody:
    """Comet with an eccentricity and perihelion distance

    The eccentricity is descriptive only; the angle still advances uniformly with the period.

    Parameters
    ----------
    name
    mass
    radius
    eccentricity
        Must be 0 <= e < 1
    orbital_period
    perihelion_distance
        Closest approach to the central star
    orbital_radius
        Default 0
    kwargs
        Passed to OrbitalBody

    Returns
    -------
    OrbitalBody
    """
    if not 0 <= eccentricity < 1:
        raise InvalidArgument("Eccentricity, input as " + str(eccentricity) + ", must be 0 <= e < 1")
    perihelion_distance = _non_negative(perihelion_distance, lw_distance_unit, "perihelion_distance")
    return OrbitalBody(name=name, mass=mass, radius=radius,
                       orbital_radius=orbital_radius,
                       orbital_period=orbital_period,
                       category='comet',
                       payload=CometPayload(float(eccentricity), perihelion_distance),
                       **kwargs)
