"""
Force constants from fitted polynomial coefficients.

A term c · Π x_v^e_v is the Taylor term of the derivative
∂^(Σe) E / Π ∂x_v^e_v divided by Π e_v!, so

    F = c · Π e_v! · HARTREE_TO_AJ

The coordinate tuple lists variable v (1-based) e_v times, walking the
variables from last to first, zero-padded to four slots.
"""

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from surface.errors import ExponentError
from surface.model import validate_exponents


# hartree → attojoule
HARTREE_TO_AJ = 4.359813653

# e! for e = 0..4
FACTORIALS = (1, 1, 2, 6, 24)

N_SLOTS = 4


@dataclass(frozen=True)
class ForceConstant:
    """One scaled derivative and the coordinates it differentiates by."""
    coords: Tuple[int, int, int, int]
    value: float


def term_coordinates(exponent_column: np.ndarray) -> Tuple[Tuple[int, int, int, int], int]:
    """
    Index tuple and factorial scale for one exponent column.

    Raises ExponentError if the total degree of the term exceeds four.
    """
    slots = [0] * N_SLOTS
    filled = 0
    scale = 1
    for v in range(len(exponent_column) - 1, -1, -1):
        e = int(exponent_column[v])
        scale *= FACTORIALS[e]
        if e == 0:
            continue
        if filled + e > N_SLOTS:
            raise ExponentError(
                f"term {tuple(int(x) for x in exponent_column)} has total degree "
                f"above {N_SLOTS}"
            )
        slots[filled:filled + e] = [v + 1] * e
        filled += e
    return tuple(slots), scale


def extract_force_constants(
    coefficients: np.ndarray,
    exponents: np.ndarray,
    unit_conversion: float = HARTREE_TO_AJ,
) -> List[ForceConstant]:
    """
    One ForceConstant per monomial term, in term order.

    Parameters
    ----------
    coefficients : np.ndarray
        (k,) fitted coefficients.
    exponents : np.ndarray
        (m, k) exponent table.
    unit_conversion : float
        Energy unit factor applied to every value.
    """
    coeffs = np.asarray(coefficients, dtype=np.float64).ravel()
    exps = validate_exponents(exponents)
    if exps.shape[1] != len(coeffs):
        raise ValueError(f"{len(coeffs)} coefficients for {exps.shape[1]} terms")

    result = []
    for j in range(exps.shape[1]):
        coords, scale = term_coordinates(exps[:, j])
        result.append(ForceConstant(
            coords=coords,
            value=float(coeffs[j] * scale * unit_conversion),
        ))
    return result
