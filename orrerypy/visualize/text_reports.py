"""
This module renders the state of bodies and systems as text.

Nothing here changes the state of a body; all functions return strings.
"""

from ..simulate import *

__all__ = ['format_coordinates', 'body_summary', 'system_state_report',
           'describe_moons', 'check_rings', 'assess_life_support',
           'exert_tidal_influence', 'describe_tidal_lock',
           'describe_orbit_shape', 'brighten_near_star',
           'emit_light_and_heat', 'describe_spectral_type',
           'describe']


# ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++ #


def format_coordinates(body: OrbitalBody) -> str:
    """Polar coordinates as text, e.g. '(1.50E+11 m, 0.500π)'"""
    orbital_radius, theta_pi = body.coordinates()
    return "({:.2E} m, {:.3f}π)".format(orbital_radius.value, theta_pi)


def body_summary(body: OrbitalBody) -> str:
    """One-line description of a body, depending on its category

    Parameters
    ----------
    body
        Body to describe

    Returns
    -------
    str
        e.g. 'Earth (planet) with 1 moon(s) and no rings at (1.50E+11 m, 0.000π)'
    """
    summary = body.name + " (" + body.category + ")"
    payload = body.payload
    if payload is None:
        return summary + " at " + format_coordinates(body)

    if body.category == 'star':
        return summary + " (" + payload.spectral_type + ") at {:,.0f} K".format(payload.surface_temperature.value)
    elif body.category == 'planet':
        rings = "rings" if payload.has_rings else "no rings"
        return summary + " with " + str(payload.number_of_moons) + " moon(s) and " + rings \
            + " at " + format_coordinates(body)
    elif body.category == 'moon':
        return summary + " orbiting " + payload.planet_orbiting_name + " at " + format_coordinates(body)
    elif body.category == 'comet':
        return summary + " with eccentricity " + str(payload.eccentricity) + " at " + format_coordinates(body)
    return summary + " at " + format_coordinates(body)


def system_state_report(registry: BodyRegistry) -> str:
    """Every body in the registry, one per line, in insertion order"""
    lines = ["--- Current System State ---"]
    lines.extend(body_summary(body) for body in registry)
    lines.append("----------------------------")
    return "\n".join(lines)


# ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++ #
# Category descriptions
def _payload_of(body: OrbitalBody, category: str):
    if body.category != category or body.payload is None:
        raise TypeError(body.name + " is not a " + category + " with " + category + " properties")
    return body.payload


def describe_moons(body: OrbitalBody) -> str:
    payload = _payload_of(body, 'planet')
    return body.name + " has " + str(payload.number_of_moons) + " known moon(s)."


def check_rings(body: OrbitalBody) -> str:
    payload = _payload_of(body, 'planet')
    if payload.has_rings:
        return body.name + " has a visible ring system."
    return body.name + " does not have rings."


def assess_life_support(body: OrbitalBody) -> str:
    payload = _payload_of(body, 'planet')
    if payload.supports_life:
        return body.name + " is capable of supporting life."
    return body.name + " is not known to support life."


def exert_tidal_influence(body: OrbitalBody) -> str:
    payload = _payload_of(body, 'moon')
    return body.name + " is exerting tidal forces on " + payload.planet_orbiting_name + "."


def describe_tidal_lock(body: OrbitalBody) -> str:
    payload = _payload_of(body, 'moon')
    if payload.tidally_locked:
        return body.name + " is tidally locked to " + payload.planet_orbiting_name + "."
    return body.name + " is not tidally locked to " + payload.planet_orbiting_name + "."


def describe_orbit_shape(body: OrbitalBody) -> str:
    payload = _payload_of(body, 'comet')
    return body.name + " has an eccentric orbit with value: " + str(payload.eccentricity) \
        + " and perihelion distance {:.2E} m.".format(payload.perihelion_distance.to('m').value)


def brighten_near_star(body: OrbitalBody) -> str:
    _payload_of(body, 'comet')
    return body.name + " is brightening as it approaches the central star!"


def emit_light_and_heat(body: OrbitalBody) -> str:
    payload = _payload_of(body, 'star')
    return body.name + " is emitting light and heat from its surface at {:,.0f} Kelvin.".format(
        payload.surface_temperature.value)


def describe_spectral_type(body: OrbitalBody) -> str:
    payload = _payload_of(body, 'star')
    return body.name + " is a " + payload.spectral_type + " star."


_descriptions_by_category = {
    'star': (emit_light_and_heat, describe_spectral_type),
    'planet': (describe_moons, check_rings, assess_life_support),
    'moon': (exert_tidal_influence, describe_tidal_lock),
    'comet': (describe_orbit_shape, brighten_near_star),
}


def describe(body: OrbitalBody) -> [str]:
    """All category descriptions of a body, empty if it has no category properties

    Parameters
    ----------
    body
        Body to describe

    Returns
    -------
    [str]
        One sentence per description
    """
    if body.payload is None:
        return []
    return [description(body) for description in _descriptions_by_category.get(body.category, ())]
