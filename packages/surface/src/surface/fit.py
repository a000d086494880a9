"""
Least-squares fit of the polynomial surface.

    X[i, j] = Π_v d[i, v]^e[v, j]       design matrix, (n × k)
    c       = (XᵗX)⁻¹ Xᵗ y              normal equations

Design-matrix powers are built by repeated multiplication (exponents
0..4 only) so every run produces bit-identical columns.
"""

import logging
from dataclasses import dataclass

import numpy as np
import polars as pl

from surface.derivatives import gradient, hessian
from surface.inverse import CONDITION_LIMIT, invert
from surface.model import THR, evaluate, validate_exponents

logger = logging.getLogger(__name__)


_INTEGER_POWERS = (
    lambda v: np.ones_like(v),
    lambda v: v,
    lambda v: v * v,
    lambda v: v * v * v,
    lambda v: v * v * v * v,
)


def design_matrix(displacements: np.ndarray, exponents: np.ndarray) -> np.ndarray:
    """
    Build the (n, k) design matrix.

    Parameters
    ----------
    displacements : np.ndarray
        (n, m) displacement rows.
    exponents : np.ndarray
        (m, k) exponent table.

    Raises
    ------
    ExponentError
        Any exponent outside 0..4.
    """
    disps = np.asarray(displacements, dtype=np.float64)
    exps = validate_exponents(exponents)
    if disps.ndim != 2 or disps.shape[1] != exps.shape[0]:
        raise ValueError(
            f"displacements have shape {disps.shape}, expected (n, {exps.shape[0]})"
        )

    n_points = disps.shape[0]
    n_vars, n_terms = exps.shape
    X = np.ones((n_points, n_terms))
    for k in range(n_terms):
        for v in range(n_vars):
            X[:, k] *= _INTEGER_POWERS[exps[v, k]](disps[:, v])
    return X


@dataclass(frozen=True)
class PolynomialSurface:
    """Fitted surface: exponent table plus one coefficient per term."""
    exponents: np.ndarray
    coefficients: np.ndarray
    threshold: float = THR

    @property
    def n_variables(self) -> int:
        return self.exponents.shape[0]

    @property
    def n_terms(self) -> int:
        return self.exponents.shape[1]

    def __call__(self, point) -> float:
        return evaluate(point, self.coefficients, self.exponents, self.threshold)

    def gradient(self, point) -> np.ndarray:
        return gradient(point, self.coefficients, self.exponents, self.threshold)

    def hessian(self, point) -> np.ndarray:
        return hessian(point, self.coefficients, self.exponents, self.threshold)


@dataclass
class ResidualReport:
    """Computed vs observed energies for every fitted point."""
    computed: np.ndarray
    observed: np.ndarray

    @property
    def residuals(self) -> np.ndarray:
        return self.computed - self.observed

    @property
    def sum_squared(self) -> float:
        r = self.residuals
        return float(np.sum(r * r))

    def to_frame(self) -> pl.DataFrame:
        return pl.DataFrame({
            'point': np.arange(1, len(self.observed) + 1),
            'computed': self.computed,
            'observed': self.observed,
            'residual': self.residuals,
        })


@dataclass
class SurfaceFit:
    """Result of a least-squares fit."""
    coefficients: np.ndarray  # (k,)
    exponents: np.ndarray     # (m, k)
    design: np.ndarray        # (n, k)
    observed: np.ndarray      # (n,)

    @property
    def computed(self) -> np.ndarray:
        return self.design @ self.coefficients

    def residual_report(self) -> ResidualReport:
        return ResidualReport(computed=self.computed, observed=self.observed)

    def surface(self, threshold: float = THR) -> PolynomialSurface:
        return PolynomialSurface(self.exponents, self.coefficients, threshold)


def fit_surface(
    displacements: np.ndarray,
    energies: np.ndarray,
    exponents: np.ndarray,
    condition_limit: float = CONDITION_LIMIT,
) -> SurfaceFit:
    """
    Fit surface coefficients by ordinary least squares.

    Parameters
    ----------
    displacements : np.ndarray
        (n, m) displacement rows.
    energies : np.ndarray
        (n,) observed energies.
    exponents : np.ndarray
        (m, k) exponent table.
    condition_limit : float
        XᵗX condition number above which a warning is issued.

    Returns
    -------
    SurfaceFit

    Raises
    ------
    ExponentError
        Exponent outside 0..4.
    NumericalFailure
        XᵗX singular or its inverse non-finite.

    An ill-conditioned XᵗX only warns (IllConditionedWarning); the
    resulting coefficients are returned as they come out.
    """
    y = np.asarray(energies, dtype=np.float64).ravel()
    exps = validate_exponents(exponents)
    X = design_matrix(displacements, exps)
    if X.shape[0] != len(y):
        raise ValueError(f"{X.shape[0]} displacement rows but {len(y)} energies")

    XtX = X.T @ X
    inv = invert(XtX, condition_limit=condition_limit, label="normal-equations matrix")
    coefficients = inv @ (X.T @ y)

    logger.debug(f"fitted {X.shape[1]} coefficients to {X.shape[0]} points")
    return SurfaceFit(coefficients=coefficients, exponents=exps, design=X, observed=y)
