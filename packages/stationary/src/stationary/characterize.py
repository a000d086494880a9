"""
Classification of a stationary point from the Hessian spectrum.

    all eigenvalues < 0   → MAXIMUM
    all eigenvalues > 0   → MINIMUM
    anything else         → STATIONARY_POINT (saddle, or inconclusive
                            when an eigenvalue is exactly zero)
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np
import scipy.linalg

from surface.derivatives import hessian
from surface.model import THR


class StationaryPointKind(Enum):
    """Type of stationary point."""
    MAXIMUM = "maximum"
    MINIMUM = "minimum"
    STATIONARY_POINT = "stationary_point"

    @property
    def banner(self) -> str:
        return _BANNERS[self]

    def __str__(self) -> str:
        return self.name


_BANNERS = {
    StationaryPointKind.MAXIMUM: "M A X I M U M",
    StationaryPointKind.MINIMUM: "M I N I M U M",
    StationaryPointKind.STATIONARY_POINT: "S T A T I O N A R Y  P O I N T",
}


@dataclass(frozen=True)
class Characterization:
    """Hessian spectrum at a stationary point."""
    kind: StationaryPointKind
    eigenvalues: np.ndarray   # (m,) ascending
    eigenvectors: np.ndarray  # (m, m), column i pairs with eigenvalues[i]


def classify_eigenvalues(eigenvalues: np.ndarray) -> StationaryPointKind:
    """Label a Hessian spectrum by the signs of its eigenvalues."""
    eigenvalues = np.asarray(eigenvalues)
    if eigenvalues.size and np.all(eigenvalues < 0):
        return StationaryPointKind.MAXIMUM
    if eigenvalues.size and np.all(eigenvalues > 0):
        return StationaryPointKind.MINIMUM
    return StationaryPointKind.STATIONARY_POINT


def characterize(
    point: np.ndarray,
    coefficients: np.ndarray,
    exponents: np.ndarray,
    threshold: float = THR,
) -> Characterization:
    """
    Eigendecompose the Hessian at `point` and classify it.

    Returns
    -------
    Characterization with eigenvalues ascending and matching eigenvectors.
    """
    hess = hessian(point, coefficients, exponents, threshold)
    eigenvalues, eigenvectors = scipy.linalg.eigh(hess)
    return Characterization(
        kind=classify_eigenvalues(eigenvalues),
        eigenvalues=eigenvalues,
        eigenvectors=eigenvectors,
    )
