"""
Two-pass recentering pipeline.

Each pass: bias → fit → Newton-Raphson → characterize → force constants.

    pass 1   data biased by the input guess (zero when absent)
    pass 2   pass-1 data biased again by the pass-1 long line

Pass 2 runs exactly once, and only when the input was not already
flagged as sitting on a stationary point (and `once` is off). There is
no further recursion.

No math lives here. Only wiring.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from forceconstants.extract import ForceConstant, extract_force_constants
from stationary.characterize import Characterization, characterize
from stationary.newton import find_stationary_point
from surface.fit import ResidualReport, SurfaceFit, fit_surface
from surface.model import validate_exponents

from orchestration.config import RunConfig

logger = logging.getLogger(__name__)


def apply_bias(
    displacements: np.ndarray,
    energies: np.ndarray,
    bias: np.ndarray,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Shift data to a new origin.

    Parameters
    ----------
    displacements : np.ndarray
        (n, m) displacement rows.
    energies : np.ndarray
        (n,) energies.
    bias : np.ndarray
        (m + 1,) geometric offset followed by the energy offset.

    Returns
    -------
    (displacements - bias[:m], energies - bias[m]) as new arrays.
    """
    disps = np.asarray(displacements, dtype=np.float64)
    nrg = np.asarray(energies, dtype=np.float64).ravel()
    bias = np.asarray(bias, dtype=np.float64).ravel()
    if disps.ndim != 2 or len(bias) != disps.shape[1] + 1:
        raise ValueError(
            f"bias has {len(bias)} values; expected {disps.shape[-1] + 1} "
            f"(one per coordinate plus the energy)"
        )
    return disps - bias[:-1], nrg - bias[-1]


@dataclass
class PassResult:
    """Everything one fit pass produces for reporting."""
    bias: np.ndarray
    displacements: np.ndarray      # biased, as fitted
    energies: np.ndarray           # biased, as fitted
    fit: SurfaceFit
    force_constants: List[ForceConstant]
    stationary_point: np.ndarray   # (m,) in this pass's frame
    energy: float                  # surface value at stationary_point
    characterization: Characterization

    @property
    def coefficients(self) -> np.ndarray:
        return self.fit.coefficients

    @property
    def residuals(self) -> ResidualReport:
        return self.fit.residual_report()

    @property
    def long_line(self) -> np.ndarray:
        """Stationary point coordinates followed by its energy."""
        return np.append(self.stationary_point, self.energy)


@dataclass
class RunResult:
    """One or two passes, in order."""
    passes: List[PassResult]

    @property
    def final(self) -> PassResult:
        """Authoritative pass: the recentered one when it ran."""
        return self.passes[-1]

    @property
    def recentered(self) -> bool:
        return len(self.passes) == 2


class Pipeline:
    """
    Runs the fit passes for one data set.

    Usage:
        pipeline = Pipeline(RunConfig())
        result = pipeline.run(disps, energies, exponents, bias)
        result.final.force_constants
    """

    def __init__(self, config: Optional[RunConfig] = None):
        self.config = config or RunConfig()

    def run_pass(
        self,
        displacements: np.ndarray,
        energies: np.ndarray,
        exponents: np.ndarray,
        bias: Optional[np.ndarray] = None,
    ) -> PassResult:
        """Bias the data, fit, locate and classify the stationary point, extract force constants."""
        cfg = self.config
        exps = validate_exponents(exponents)
        if bias is None:
            bias = np.zeros(exps.shape[0] + 1)
        bias = np.asarray(bias, dtype=np.float64).ravel()

        disps, nrg = apply_bias(displacements, energies, bias)
        fit = fit_surface(disps, nrg, exps, condition_limit=cfg.condition_limit)
        surface = fit.surface(cfg.threshold)
        force_constants = extract_force_constants(
            fit.coefficients, exps, unit_conversion=cfg.unit_conversion,
        )
        point = find_stationary_point(
            fit.coefficients,
            exps,
            max_iterations=cfg.max_iterations,
            damping=cfg.damping,
            tolerance=cfg.tolerance,
            threshold=cfg.threshold,
            condition_limit=cfg.condition_limit,
        )
        char = characterize(point, fit.coefficients, exps, threshold=cfg.threshold)
        energy = surface(point)
        residual_gradient = np.linalg.norm(surface.gradient(point))
        logger.debug(f"gradient norm at stationary point: {residual_gradient:.3e}")

        result = PassResult(
            bias=bias,
            displacements=disps,
            energies=nrg,
            fit=fit,
            force_constants=force_constants,
            stationary_point=point,
            energy=energy,
            characterization=char,
        )
        logger.info(
            f"{char.kind} at energy {energy:.12f}, "
            f"sum of squared residuals {result.residuals.sum_squared:.8E}"
        )
        return result

    def run(
        self,
        displacements: np.ndarray,
        energies: np.ndarray,
        exponents: np.ndarray,
        bias: Optional[np.ndarray] = None,
        stationary: bool = False,
    ) -> RunResult:
        """
        Run pass 1, then the recentered pass 2 unless the input is
        already at a stationary point or `once` is set.
        """
        first = self.run_pass(displacements, energies, exponents, bias)
        if stationary or self.config.once:
            return RunResult(passes=[first])

        logger.info("refitting about the located stationary point")
        second = self.run_pass(first.displacements, first.energies, exponents, first.long_line)
        return RunResult(passes=[first, second])
