"""
This module provides tools for importing .orr files and generating systems
"""

import json

from pathlib import Path
from astropy import units as u

from ..utils import astropyio
from ..utils.exceptions import InvalidArgument
from ..simulate import *


__all__ = ["generate_system_from_file", "SystemGenerator"]


# ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++ #
_body_constructors = {"star": new_star,
                      "planet": new_planet,
                      "moon": new_moon,
                      "comet": new_comet,
                      "unspecified": OrbitalBody}


# ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++ #
def generate_system_from_file(file_path: (str, Path)):
    return SystemGenerator.from_file(file_path)


class SystemGenerator(dict):
    def __init__(self, parameters: dict, file_path: (str, Path)=None):
        """Hold a system description and provide some functionality to build and run it

        Keys
        ----------
        'simulation_parameters'
            'total_time' and 'time_step' as (value, unit)
        'central_body'
            Name of the body the others orbit, or None
        'body_parameters'
            List of dicts, one per body, each with a 'body_type' in body_categories

        Parameters
        ----------
        parameters
            The system description, typically loaded from json
        file_path
            Where the description was loaded from, if anywhere
        """
        super().__init__(parameters)
        if file_path is None:
            self._file_path = None
        else:
            self._file_path = Path(file_path)

    @classmethod
    def from_file(cls, file_path: (str, Path)) -> 'SystemGenerator':
        """Import a system from a json file

        Parameters
        ----------
        file_path
            Location to load the system from
        """
        file_path = Path(file_path)
        with open(str(file_path)) as json_file:
            raw_json = json.load(json_file)
        return cls(raw_json, file_path=file_path)

    @property
    def file_path(self):
        return self._file_path

    # ------------------------------------------------------------------------------------------------------------ #
    def gen_bodies(self) -> [OrbitalBody]:
        """Generates the body objects requested, in file order

        A body described with a 'central_mass' gets its period from the circular orbit around that mass, and
        may not also give an 'orbital_period'.

        Returns
        -------
        [*OrbitalBody]
        """
        return [_gen_body(body_params) for body_params in self.get("body_parameters", [])]

    # ------------------------------------------------------------------------------------------------------------ #
    def gen_registry(self) -> BodyRegistry:
        """Generates the bodies and adds them to a BodyRegistry, with the requested central body

        Returns
        -------
        BodyRegistry
        """
        all_bodies = self.gen_bodies()
        central_name = self.get("central_body")
        central_body = None
        if central_name is not None:
            for body in all_bodies:
                if body.name == central_name:
                    central_body = body
                    break
            else:
                raise InvalidArgument("Central body " + str(central_name) + " is not among the bodies")

        registry = BodyRegistry(central_body)
        for body in all_bodies:
            registry.add(body)
        return registry

    # ------------------------------------------------------------------------------------------------------------ #
    def simulation_times(self) -> (u.Quantity, u.Quantity):
        """Total time and time step from the simulation parameters"""
        sim_params = self["simulation_parameters"]
        return astropyio.to_quantity(sim_params["total_time"]), astropyio.to_quantity(sim_params["time_step"])

    def run(self) -> BodyRegistry:
        """Builds the registry and runs it with the simulation parameters

        Returns
        -------
        BodyRegistry
            The registry after the simulation has finished
        """
        registry = self.gen_registry()
        total_time, time_step = self.simulation_times()
        registry.run_simulation(total_time, time_step)
        return registry


# ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++ #
def _gen_body(body_params: dict) -> OrbitalBody:
    body_kw = dict(body_params)
    _type = body_kw.pop("body_type", "unspecified")
    try:
        _Body = _body_constructors[_type]
    except KeyError:
        raise TypeError("Unknown body type specified: " + str(_type) + ", must be one of "
                        + str(tuple(_body_constructors.keys())))

    for k, v in body_kw.items():
        if _is_value_unit_pair(v):
            body_kw[k] = astropyio.to_quantity(v)

    if "central_mass" in body_kw:
        central_mass = body_kw.pop("central_mass")
        if body_kw.get("orbital_period") is not None:
            raise InvalidArgument("Body " + str(body_kw.get("name")) + " specifies both central_mass and "
                                  "orbital_period, only one may be given")
        body_kw["orbital_period"] = circular_orbital_period(central_mass, body_kw.get("orbital_radius", 0. * u.m))

    return _Body(**body_kw)


def _is_value_unit_pair(value) -> bool:
    return isinstance(value, (list, tuple)) and len(value) == 2 and isinstance(value[1], str)
