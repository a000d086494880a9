"""
Polynomial surface package.

Represents an energy surface as a sum of monomials over m displacement
coordinates, fits its coefficients by least squares, and evaluates the
surface, its analytic gradient and its analytic Hessian.

Input: displacement rows (n × m), energies (n), exponent table (m × k).
Output: coefficients (k), residual report, derivatives at any point.
"""

from surface.model import (
    THR,
    MAX_EXPONENT,
    evaluate,
    monomials,
    validate_exponents,
)
from surface.fit import (
    PolynomialSurface,
    ResidualReport,
    SurfaceFit,
    design_matrix,
    fit_surface,
)
from surface.derivatives import gradient, hessian
from surface.inverse import CONDITION_LIMIT, invert
from surface.errors import ExponentError, IllConditionedWarning, NumericalFailure

__all__ = [
    'THR',
    'MAX_EXPONENT',
    'CONDITION_LIMIT',
    'PolynomialSurface',
    'evaluate',
    'monomials',
    'validate_exponents',
    'design_matrix',
    'fit_surface',
    'SurfaceFit',
    'ResidualReport',
    'gradient',
    'hessian',
    'invert',
    'ExponentError',
    'IllConditionedWarning',
    'NumericalFailure',
]
