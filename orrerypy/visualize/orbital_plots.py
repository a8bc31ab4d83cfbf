"""
This module generates plots of planetary systems for diagnostic and visualization purposes.
"""

import matplotlib.pyplot as plt
import numpy as np
from astropy import units as u

from ..simulate import *

__all__ = ['plot_system_state']


# ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++ #


def plot_system_state(registry: BodyRegistry,
                      axes_object: plt.Axes=None,
                      log_radius: bool=True,
                      savefile: str=None) -> dict:
    """Polar plot of every body at its current angle and orbital radius

    Parameters
    ----------
    registry
        System to plot
    axes_object
        Optional polar axes object to plot onto.  If provided, the figure is neither shown nor saved.
    log_radius
        Plot log10 of the orbital radius in AU, so that moons and outer planets fit on one plot.
        Bodies at radius 0 are drawn at the center.
    savefile
        If None, plt.show()
        Else, saves to savefile = location+filename

    Returns
    -------
    dict
        Scatter plot objects, keyed by body name
    """
    if not isinstance(registry, BodyRegistry):
        raise TypeError("Must provide a BodyRegistry for plotting.")

    all_plots_dict = {}
    stand_alone = not isinstance(axes_object, plt.Axes)
    if not stand_alone:  # Is being called from something else, typically
        ax = axes_object
    else:  # Is being used as a stand-alone function, typically
        fig = plt.figure(figsize=plt.figaspect(1))
        ax = fig.add_subplot(111, projection='polar')

    all_radii = np.array([body.orbital_radius.to(u.au).value for body in registry])
    if log_radius and np.any(all_radii > 0):
        radius_offset = np.log10(np.min(all_radii[all_radii > 0]))
    else:
        radius_offset = 0.

    for body, orbital_radius in zip(registry, all_radii):
        if log_radius and orbital_radius > 0:
            plot_radius = np.log10(orbital_radius) - radius_offset + 1
        elif log_radius:
            plot_radius = 0.
        else:
            plot_radius = orbital_radius
        all_plots_dict[body.name] = ax.scatter(body.current_theta_lw, plot_radius,
                                               c=body.point_color,
                                               s=body.point_size,
                                               label=body.name,
                                               marker=body.display_marker)

    if log_radius:
        ax.set_yticklabels([])
        ax.set_title("Orbital radius (log scale) and angle")
    else:
        ax.set_title("Orbital radius (AU) and angle")
    ax.legend(bbox_to_anchor=(1.05, 1), loc=2, borderaxespad=0.)

    if stand_alone:
        plt.tight_layout()
        if savefile is not None:
            plt.savefig(savefile)
            plt.close()
        else:
            plt.show()
    return all_plots_dict
