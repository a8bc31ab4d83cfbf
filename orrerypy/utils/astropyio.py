"""
This module provides interfaces for simplifying interactions with astropy objects.
"""

import warnings

from astropy import units as u
from astropy.utils.exceptions import AstropyUserWarning

__all__ = ['u_str',
           'to_quantity',
           'cast_to_unit']


# ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++ #
# Presentation and print support
def u_str(quantity):
    return "{0}".format(quantity)


# ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++ #
# Import support
def to_quantity(val_unit_tuple: tuple) -> u.Quantity:
    """Helps import values with specific units, typically from external or config files

    Parameters
    ----------
    val_unit_tuple
        (value, unit) to be converted into an astropy Quantity

    Returns
    -------
    u.Quantity
    """
    try:
        val, unit = val_unit_tuple
    except (TypeError, ValueError):
        raise TypeError("Cannot unpack unit, must be in form (value, unit)")
    return u.Quantity(val, unit)


# ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++ #
# Input casting
def cast_to_unit(value, unit: u.UnitBase, label: str) -> u.Quantity:
    """Converts value to a Quantity in unit, warning if the value had to be assumed to already be in unit

    Parameters
    ----------
    value
        u.Quantity (converted) or plain number (cast, with an AstropyUserWarning)
    unit
        Target unit
    label
        Name of the value, used in the warning

    Returns
    -------
    u.Quantity
        value in the requested unit
    """
    if isinstance(value, u.Quantity):
        return value.to(unit)
    warnings.warn("Casting " + label + ", input as " + str(value) + ", to " + u_str(unit), AstropyUserWarning)
    return u.Quantity(value, unit)
