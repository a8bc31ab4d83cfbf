"""
Exceptions raised by OrreryPy.
"""

__all__ = ['InvalidArgument']


# ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++ #


class InvalidArgument(ValueError):
    """Raised when a value is outside the range an operation accepts, e.g., a non-positive time step"""
