"""
This module provides the BodyRegistry, which holds a system of bodies and steps them through time.
"""

import numpy as np
from astropy import units as u

from ..utils import *
from .bodies import *

__all__ = ['BodyRegistry']

# ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++ #

# Relative slack, a few ulps, on total_time when checking whether one more whole step fits (0.3 s / 0.1 s is 3 steps)
_step_count_tolerance = 4 * np.finfo(float).eps


class BodyRegistry:
    """Ordered collection of OrbitalBody instances with an optional central body that never moves"""

    # ------------------------------------------------------------------------------------------------------------ #
    def __init__(self, central_body: OrbitalBody=None):
        """Holds the bodies of a system in insertion order

        Parameters
        ----------
        central_body
            Optional body, such as a star, that the others orbit.
            It is always the first body in the registry and is skipped during simulation.
        """
        self._bodies = []
        self._central_body = None
        self._elapsed_time_lw = 0.

        if central_body is not None:
            self.add(central_body)
            self._central_body = central_body

    # ------------------------------------------------------------------------------------------------------------ #
    def add(self, body: OrbitalBody):
        """Append body, unless that same body is already in the registry

        Parameters
        ----------
        body
            OrbitalBody to add.  None is ignored.
        """
        if body is None:
            return
        if not isinstance(body, OrbitalBody):
            raise TypeError("Only OrbitalBody instances can be added, got " + type(body).__name__)
        if body not in self:
            self._bodies.append(body)

    # ------------------------------------------------------------------------------------------------------------ #
    @property
    def central_body(self):
        return self._central_body

    @property
    def elapsed_time(self):
        """Total simulated time over all runs

        Returns
        -------
        u.Quantity
        """
        return u.Quantity(self._elapsed_time_lw, lw_time_unit)

    def get_all_bodies(self) -> [OrbitalBody]:
        """Return a *copy* of the list of bodies, in insertion order

        Returns
        -------
        [*OrbitalBody]
        """
        return self._bodies.copy()

    def orbiting_bodies(self) -> [OrbitalBody]:
        """Bodies that are advanced during a simulation, i.e. everything except the central body"""
        return [body for body in self._bodies if body is not self._central_body]

    def find_body(self, name: str) -> OrbitalBody:
        """First body with the given name, or None"""
        for body in self._bodies:
            if body.name == name:
                return body
        return None

    def __len__(self):
        return len(self._bodies)

    def __iter__(self):
        return iter(self._bodies)

    def __contains__(self, body):
        return any(b is body for b in self._bodies)

    # ------------------------------------------------------------------------------------------------------------ #
    def run_simulation(self,
                       total_time: u.Quantity,
                       time_step: u.Quantity) -> int:
        """Advances every orbiting body in fixed steps of time_step for total_time

        Takes floor(total_time / time_step) whole steps; a final partial step is never taken.
        Within a step, bodies are advanced in insertion order, one advance each.

        Parameters
        ----------
        total_time
            Duration to simulate, must be non-negative
        time_step
            Step size, must be positive

        Returns
        -------
        int
            Number of steps taken
        """
        total_time_lw = cast_to_unit(total_time, lw_time_unit, "total_time").value
        time_step_lw = cast_to_unit(time_step, lw_time_unit, "time_step").value
        if not time_step_lw > 0:
            raise InvalidArgument("time_step, input as " + str(time_step) + ", must be positive")
        if not 0 <= total_time_lw < np.inf:
            raise InvalidArgument("total_time, input as " + str(total_time) + ", must be finite and non-negative")

        num_steps = int(np.floor(total_time_lw / time_step_lw))
        if (num_steps + 1) * time_step_lw <= total_time_lw * (1 + _step_count_tolerance):
            num_steps += 1

        moving_bodies = self.orbiting_bodies()
        for step in range(num_steps):
            for body in moving_bodies:
                body.advance_lw(time_step_lw)

        self._elapsed_time_lw += num_steps * time_step_lw
        return num_steps
