"""
Analytic first and second derivatives of the polynomial surface.

Power rule applied directly to the exponent table:

    ∂E/∂x_i        = Σ_j c_j e_ij x_i^(e_ij-1) Π_{k≠i} x_k^e_kj
    ∂²E/∂x_i²      = Σ_j c_j e_ij (e_ij-1) x_i^(e_ij-2) Π_{k≠i} x_k^e_kj
    ∂²E/∂x_i∂x_l   = Σ_j c_j e_ij e_lj x_i^(e_ij-1) x_l^(e_lj-1) Π_{k≠i,l} x_k^e_kj

For each derivative the prefactor (c_j times the exponent factors) is
checked against the threshold first. A term whose prefactor vanishes is
dropped before any power is taken, so the reduced exponents of the
surviving terms are never negative. A reduced exponent of 0 contributes
exactly 1, which keeps x_i = 0 well defined.
"""

import numpy as np
from typing import Sequence

from surface.model import THR, monomials


def _term_sum(
    point: np.ndarray,
    prefactor: np.ndarray,
    exponents: np.ndarray,
    reduce: Sequence[int],
    threshold: float,
) -> float:
    """Σ prefactor_j · monomial_j with the `reduce` variables' powers lowered by one each."""
    active = np.abs(prefactor) >= threshold
    if not np.any(active):
        return 0.0
    reduced = exponents[:, active].copy()
    for var in reduce:
        reduced[var] -= 1
    return float(np.sum(prefactor[active] * monomials(point, reduced)))


def gradient(
    point: Sequence[float],
    coefficients: Sequence[float],
    exponents: np.ndarray,
    threshold: float = THR,
) -> np.ndarray:
    """
    Analytic gradient of the surface.

    Parameters
    ----------
    point : array-like
        (m,) coordinates.
    coefficients : array-like
        (k,) fitted coefficients.
    exponents : np.ndarray
        (m, k) exponent table.
    threshold : float
        Prefactors below this magnitude are skipped.

    Returns
    -------
    np.ndarray — (m,) gradient.
    """
    point = np.asarray(point, dtype=np.float64)
    coeffs = np.asarray(coefficients, dtype=np.float64).ravel()
    n_vars = exponents.shape[0]

    grad = np.zeros(n_vars)
    for i in range(n_vars):
        prefactor = coeffs * exponents[i]
        grad[i] = _term_sum(point, prefactor, exponents, (i,), threshold)
    return grad


def hessian(
    point: Sequence[float],
    coefficients: Sequence[float],
    exponents: np.ndarray,
    threshold: float = THR,
) -> np.ndarray:
    """
    Analytic Hessian of the surface.

    Only the lower triangle is computed; the upper triangle is mirrored,
    so the result is exactly symmetric.

    Returns
    -------
    np.ndarray — (m, m) symmetric Hessian.
    """
    point = np.asarray(point, dtype=np.float64)
    coeffs = np.asarray(coefficients, dtype=np.float64).ravel()
    n_vars = exponents.shape[0]

    hess = np.zeros((n_vars, n_vars))
    for i in range(n_vars):
        e_i = exponents[i]
        for l in range(i + 1):
            if i == l:
                prefactor = coeffs * e_i * (e_i - 1)
                value = _term_sum(point, prefactor, exponents, (i, i), threshold)
            else:
                prefactor = coeffs * e_i * exponents[l]
                value = _term_sum(point, prefactor, exponents, (i, l), threshold)
            hess[i, l] = value
            hess[l, i] = value
    return hess
