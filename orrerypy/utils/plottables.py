"""
This module provides base classes for objects that can be plotted with the visualize tools.
"""

__all__ = ['Plottable']


# ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++ #


class Plottable:
    """Mixin that describes how to plot an object."""

    # ------------------------------------------------------------------------------------------------------------ #
    def __init__(self,
                 point_color: str=None,
                 point_size: int=None,
                 name: str=None,
                 display_marker: str=None,
                 **kwargs):
        """A mixin that can be added to endow a Class with a variety of useful plotting properties

        By making a physics object Plottable, the built-in visualization tools will be able
        to automagically add them to plots.  The name is fixed at construction.

        Parameters
        ----------
        point_color
        point_size
        name
        display_marker
        kwargs
        """

        super().__init__(**kwargs)

        if point_color is None:
            self._point_color = 'k'
        else:
            self._point_color = point_color

        if point_size is None:
            self._point_size = 20
        else:
            self._point_size = point_size

        if name is None:
            self._name = ""
        else:
            self._name = str(name)

        if display_marker is None:
            self._display_marker = 'o'
        else:
            self._display_marker = display_marker

    # ------------------------------------------------------------------------------------------------------------ #
    @property
    def point_color(self):
        return self._point_color

    @point_color.setter
    def point_color(self, point_color):
        self._point_color = point_color

    # ------------------------------------------------------------------------------------------------------------ #
    @property
    def point_size(self):
        return self._point_size

    @point_size.setter
    def point_size(self, point_size):
        self._point_size = point_size

    # ------------------------------------------------------------------------------------------------------------ #
    @property
    def name(self):
        return self._name

    # ------------------------------------------------------------------------------------------------------------ #
    @property
    def display_marker(self):
        return self._display_marker
