"""
Polynomial surface model.

A surface over m variables is a sum of k monomial terms. The exponent
table is an (m, k) integer matrix: column j holds the power of every
variable in term j (0 = variable absent).

    E(x) = Σ_j c_j Π_i x_i^e_ij

Terms whose coefficient is below THR in magnitude are skipped entirely,
and zero exponents never reach the power evaluation, so x_i = 0 is safe.
"""

import numpy as np
from typing import Sequence

from surface.errors import ExponentError


# Magnitude below which a coefficient (or derivative prefactor) is treated as zero
THR = 1e-10

# Largest per-variable power a monomial may carry
MAX_EXPONENT = 4


def validate_exponents(exponents) -> np.ndarray:
    """
    Coerce an exponent table to an (m, k) int array and range-check it.

    Raises ExponentError on any entry outside [0, MAX_EXPONENT].
    """
    exps = np.asarray(exponents)
    if exps.ndim != 2:
        raise ExponentError(f"exponent table must be 2-D (variables × terms), got shape {exps.shape}")
    if exps.size and not np.all(np.equal(np.mod(exps, 1), 0)):
        raise ExponentError("exponent table must contain integers")
    exps = exps.astype(np.int64)
    bad = (exps < 0) | (exps > MAX_EXPONENT)
    if np.any(bad):
        var, term = np.argwhere(bad)[0]
        raise ExponentError(
            f"didn't match exponent: {exps[var, term]} for variable {var + 1} "
            f"in term {term + 1} (allowed 0..{MAX_EXPONENT})"
        )
    return exps


def monomials(point: np.ndarray, exponents: np.ndarray) -> np.ndarray:
    """
    Value of every monomial column of `exponents` at `point`.

    Zero exponents contribute exactly 1 and are never passed to the
    power function. Exponents must be non-negative.
    """
    point = np.asarray(point, dtype=np.float64)
    if exponents.shape[1] == 0:
        return np.zeros(0)
    powers = np.where(
        exponents == 0,
        1.0,
        np.power(point[:, None], np.maximum(exponents, 1)),
    )
    return np.prod(powers, axis=0)


def evaluate(
    point: Sequence[float],
    coefficients: Sequence[float],
    exponents: np.ndarray,
    threshold: float = THR,
) -> float:
    """
    Evaluate the polynomial surface at a single point.

    Parameters
    ----------
    point : array-like
        (m,) coordinates.
    coefficients : array-like
        (k,) coefficient per monomial term.
    exponents : np.ndarray
        (m, k) exponent table.
    threshold : float
        Terms with |coefficient| < threshold are skipped.

    Returns
    -------
    float
    """
    coeffs = np.asarray(coefficients, dtype=np.float64).ravel()
    active = np.abs(coeffs) >= threshold
    if not np.any(active):
        return 0.0
    return float(np.sum(coeffs[active] * monomials(point, exponents[:, active])))

