"""
Guarded matrix inversion shared by the fitter and the root finder.

Ill-conditioning is a warning, not an error: the inverse is still used.
A result with Inf/NaN in it is never usable and is always fatal.
"""

import warnings

import numpy as np
import scipy.linalg

from surface.errors import IllConditionedWarning, NumericalFailure


# Condition number above which an inverse is reported as unreliable
CONDITION_LIMIT = 1e16


def invert(
    matrix: np.ndarray,
    condition_limit: float = CONDITION_LIMIT,
    allow_pseudo: bool = False,
    label: str = "matrix",
) -> np.ndarray:
    """
    Invert a square matrix.

    Parameters
    ----------
    matrix : np.ndarray
        (n, n) matrix.
    condition_limit : float
        Warn with IllConditionedWarning above this condition number.
    allow_pseudo : bool
        If the matrix is exactly singular, fall back to the Moore-Penrose
        pseudo-inverse (with a warning) instead of failing.
    label : str
        Name used in diagnostics.

    Returns
    -------
    np.ndarray — (n, n) inverse.

    Raises
    ------
    NumericalFailure
        Singular matrix without `allow_pseudo`, or a non-finite result.
    """
    matrix = np.asarray(matrix, dtype=np.float64)
    if not np.all(np.isfinite(matrix)):
        raise NumericalFailure(f"{label} contains Inf or NaN")

    try:
        with warnings.catch_warnings():
            # IllConditionedWarning below is the only diagnostic
            warnings.simplefilter("ignore", scipy.linalg.LinAlgWarning)
            inv = scipy.linalg.inv(matrix)
    except np.linalg.LinAlgError as e:
        if not allow_pseudo:
            raise NumericalFailure(f"{label} is singular: {e}") from e
        warnings.warn(
            f"{label} is singular, continuing with pseudo-inverse",
            IllConditionedWarning,
            stacklevel=2,
        )
        inv = scipy.linalg.pinv(matrix)
    else:
        cond = np.linalg.cond(matrix)
        if not np.isfinite(cond) or cond > condition_limit:
            warnings.warn(
                f"{label} is ill-conditioned: condition number {cond:.6g}",
                IllConditionedWarning,
                stacklevel=2,
            )

    if not np.all(np.isfinite(inv)):
        raise NumericalFailure(f"{label} inverse contains Inf or NaN")
    return inv
