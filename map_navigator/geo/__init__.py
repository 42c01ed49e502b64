"""Geographic utilities.

This subpackage contains the coordinate projections needed to build
provider deep links.
"""

from .mercator import midpoint, to_mercator

__all__ = ["to_mercator", "midpoint"]
