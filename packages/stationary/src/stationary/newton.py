"""
Newton-Raphson search for a stationary point of the fitted surface.

Starts from the origin of the (biased) coordinate frame and iterates

    δ = damping · H⁻¹(x) ∇E(x)
    x ← x - δ

until every |δ_i| ≤ tolerance. The pending δ at convergence is
discarded. Exceeding max_iterations is fatal: there is no fallback.
"""

import logging

import numpy as np

from surface.derivatives import gradient, hessian
from surface.inverse import CONDITION_LIMIT, invert
from surface.model import THR

logger = logging.getLogger(__name__)


MAX_ITERATIONS = 100
DAMPING = 0.5
TOLERANCE = 1.1e-8


class ConvergenceError(RuntimeError):
    """Newton-Raphson did not converge within the iteration cap."""


def find_stationary_point(
    coefficients: np.ndarray,
    exponents: np.ndarray,
    max_iterations: int = MAX_ITERATIONS,
    damping: float = DAMPING,
    tolerance: float = TOLERANCE,
    threshold: float = THR,
    condition_limit: float = CONDITION_LIMIT,
) -> np.ndarray:
    """
    Locate a root of the analytic gradient.

    Parameters
    ----------
    coefficients : np.ndarray
        (k,) fitted coefficients.
    exponents : np.ndarray
        (m, k) exponent table.
    max_iterations : int
        Iteration cap.
    damping : float
        Fixed step scale applied to the Newton update.
    tolerance : float
        Converged when every update component is at most this in magnitude.
    threshold : float
        Derivative prefactor cutoff passed to gradient/hessian.
    condition_limit : float
        Hessian condition number above which a warning is issued.

    Returns
    -------
    np.ndarray — (m,) stationary point in the fit's coordinate frame.

    Raises
    ------
    ConvergenceError
        No convergence within max_iterations.
    """
    n_vars = exponents.shape[0]
    x = np.zeros(n_vars)

    for iteration in range(max_iterations):
        grad = gradient(x, coefficients, exponents, threshold)
        hess = hessian(x, coefficients, exponents, threshold)
        inv_hess = invert(
            hess,
            condition_limit=condition_limit,
            allow_pseudo=True,
            label="Hessian",
        )

        delta = damping * (inv_hess @ grad)
        residual = float(np.max(np.abs(delta))) if n_vars else 0.0
        if residual <= tolerance:
            logger.debug(f"Newton-Raphson converged after {iteration} iterations")
            return x

        logger.debug(
            f"ITERATION {iteration + 1:5d} UPDATE VECTOR, RES = {residual:+10.5e}\n"
            + "".join(f"{d:12.8f}" for d in delta)
        )
        x = x - delta

    raise ConvergenceError("TOO MANY NEWTON-RAPHSON ITERATIONS")
