"""
Stationary point package.

Finds where the analytic gradient of a fitted surface vanishes
(damped Newton-Raphson from the frame origin) and labels the point
MAXIMUM / MINIMUM / STATIONARY_POINT from the Hessian eigenvalues.
"""

from stationary.newton import (
    ConvergenceError,
    find_stationary_point,
    MAX_ITERATIONS,
    DAMPING,
    TOLERANCE,
)
from stationary.characterize import (
    Characterization,
    StationaryPointKind,
    characterize,
    classify_eigenvalues,
)

__all__ = [
    'ConvergenceError',
    'find_stationary_point',
    'MAX_ITERATIONS',
    'DAMPING',
    'TOLERANCE',
    'Characterization',
    'StationaryPointKind',
    'characterize',
    'classify_eigenvalues',
]
