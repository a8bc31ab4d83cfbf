"""
This generates a template that includes all relevant parameters for a small solar system simulation.
The template can be loaded by orrerypy.io.loaders.

The default values reproduce the Sun, three planets, two moons, and two comets, with their real masses, radii,
orbital radii, and periods.  Values with units are stored as (value, unit) pairs.

Can be run from command line to provide a working folder and a filename

"""

import json
import sys
import os

from pathlib import Path, PurePath


__all__ = ["create_system_template", "all_parameters", "default_suffix"]

default_suffix = ".orr"


# ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++ #
# Simulation parameters: two days in one-hour steps
simulation_parameters = {
    "total_time": (2., "d"),
    "time_step": (1., "h")
}


# ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++ #
# Star parameters
star_parameters = [
    {
        "body_type": "star",
        "name": "Sun",
        "mass": (1.989e30, "kg"),
        "radius": (6.96340e8, "m"),
        "surface_temperature": (5778., "K"),
        "spectral_type": "G2V",
        "point_color": "gold"
    }
]


# ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++ #
# Planet parameters
planet_parameters = [
    {
        "body_type": "planet",
        "name": "Earth",
        "mass": (5.972e24, "kg"),
        "radius": (6.371e6, "m"),
        "orbital_radius": (1., "au"),
        "orbital_period": (365.25, "d"),
        "number_of_moons": 1,
        "has_rings": False,
        "supports_life": True,
        "point_color": "royalblue"
    },
    {
        "body_type": "planet",
        "name": "Mars",
        "mass": (6.39e23, "kg"),
        "radius": (3.3895e6, "m"),
        "orbital_radius": (1.524, "au"),
        "orbital_period": (687., "d"),
        "number_of_moons": 2,
        "has_rings": False,
        "supports_life": False,
        "point_color": "firebrick"
    },
    {
        "body_type": "planet",
        "name": "Jupiter",
        "mass": (1.898e27, "kg"),
        "radius": (6.9911e7, "m"),
        "orbital_radius": (5.2, "au"),
        "orbital_period": (4332.59, "d"),
        "number_of_moons": 95,
        "has_rings": True,
        "supports_life": False,
        "point_color": "peru"
    }
]


# ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++ #
# Moon parameters
moon_parameters = [
    {
        "body_type": "moon",
        "name": "Moon",
        "mass": (7.342e22, "kg"),
        "radius": (1.7374e6, "m"),
        "orbital_radius": (3.844e8, "m"),
        "orbital_period": (27.32, "d"),
        "planet_orbiting_name": "Earth",
        "tidally_locked": True,
        "point_color": "silver"
    },
    {
        "body_type": "moon",
        "name": "Phobos",
        "mass": (1.0659e16, "kg"),
        "radius": (1.126e4, "m"),
        "orbital_radius": (9.377e6, "m"),
        "orbital_period": (7.65, "h"),
        "planet_orbiting_name": "Mars",
        "tidally_locked": True,
        "point_color": "gray"
    }
]


# ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++ #
# Comet parameters
comet_parameters = [
    {
        "body_type": "comet",
        "name": "Halley's Comet",
        "mass": (2.2e14, "kg"),
        "radius": (5.5e3, "m"),
        "eccentricity": 0.967,
        "orbital_period": (76. * 365.25, "d"),
        "perihelion_distance": (0.587, "au"),
        "point_color": "teal"
    },
    {
        "body_type": "comet",
        "name": "Encke's Comet",
        "mass": (2.0e12, "kg"),
        "radius": (2.4e3, "m"),
        "eccentricity": 0.847,
        "orbital_period": (3.3 * 365.25, "d"),
        "perihelion_distance": (0.336, "au"),
        "point_color": "darkcyan"
    }
]

# Bodies are added to the system in this order; the central body must be one of them
all_parameters = {
    "simulation_parameters": simulation_parameters,
    "central_body": "Sun",
    "body_parameters": star_parameters + planet_parameters + moon_parameters + comet_parameters
}


# ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++ #
def create_system_template(folder: (str, Path),
                           filename: (str, PurePath)) -> Path:
    """Generates a solar system template file in folder with name filename

    Parameters
    ----------
    folder
        Location to generate the system template
    filename
        Filename for the system template, default_suffix is added if it has none

    Returns
    -------
    Path
        Full path to the new template
    """
    folder = Path(folder)
    if not folder.exists():
        os.mkdir(folder)

    filename = PurePath(filename)
    if filename.suffix == "":
        filename = filename.with_suffix(default_suffix)

    with open(folder/filename, 'w') as json_export_file:
        json.dump(all_parameters, json_export_file, indent=2)
    return folder/filename


# ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++ #

if __name__ == "__main__":
    init_args = sys.argv
    if len(init_args) > 1:
        working_folder = Path(init_args[1])
    else:
        working_folder = Path.cwd()
    if len(init_args) > 2:
        output_file_name = PurePath(init_args[2])
    else:
        output_file_name = PurePath("system_template" + default_suffix)

    print("Generating template at: ", working_folder/output_file_name)
    create_system_template(working_folder, output_file_name)
