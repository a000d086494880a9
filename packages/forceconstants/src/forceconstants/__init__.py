"""
Force constant package.

Converts fitted polynomial coefficients into scaled mixed partial
derivatives (force constants), each tagged with the 1-based coordinate
indices it differentiates by.
"""

from forceconstants.extract import (
    FACTORIALS,
    HARTREE_TO_AJ,
    ForceConstant,
    extract_force_constants,
    term_coordinates,
)
from forceconstants.export import to_frame

__all__ = [
    'FACTORIALS',
    'HARTREE_TO_AJ',
    'ForceConstant',
    'extract_force_constants',
    'term_coordinates',
    'to_frame',
]
