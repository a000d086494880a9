"""
Fixed-width text report for one fit pass.

Column formats are kept identical across runs so reports diff cleanly
against earlier outputs.
"""

from typing import List

import numpy as np

from orchestration.pipeline import PassResult
from surface.fit import ResidualReport


def format_bias(bias: np.ndarray) -> str:
    """Initial guess block: energy offset, then geometric offsets."""
    bias = np.asarray(bias, dtype=np.float64)
    lines = [
        f"INITIAL GUESS AT STATIONARY POINT IS {bias[-1]:20.12f}",
        "".join(f"{r:12.8f}" for r in bias[:-1]),
    ]
    return "\n".join(lines) + "\n"


def format_residuals(report: ResidualReport) -> str:
    """Per-point computed/observed/residual table plus the sum of squares."""
    lines = [f"{'POINT':>5s}{'COMPUTED':>20s}{'OBSERVED':>20s}{'RESIDUAL':>20s}"]
    for i, (comp, obsv, resi) in enumerate(
        zip(report.computed, report.observed, report.residuals), start=1
    ):
        lines.append(f"{i:5d}{comp:20.12f}{obsv:20.12f}{resi:20.8E}")
    lines.append(f"WEIGHTED SUM OF SQUARED RESIDUALS IS {report.sum_squared:17.8E}")
    return "\n".join(lines) + "\n"


def format_long_line(long_line: np.ndarray) -> str:
    return "".join(f"{v:20.12f}" for v in long_line) + "\n"


def format_stationary_point(result: PassResult) -> str:
    """Classification banner, energy, coordinates, long line and Hessian spectrum."""
    char = result.characterization
    lines: List[str] = ["", char.kind.banner, f"WHERE ENERGY IS {result.energy:20.12f}"]
    label = "AT"
    for x in result.stationary_point:
        lines.append(f"{label:>12s}{x:18.10f}")
        label = ""
    lines.append(format_long_line(result.long_line).rstrip("\n"))
    lines.append("EIGENVALUE(S) OF HESSIAN, STARTING WITH LOWEST")
    lines.append("")
    for i, value in enumerate(char.eigenvalues):
        lines.append(f"EIGENVALUE {i + 1:5d}{value:20.10E}")
        lines.append("".join(f"{v:16.8f}" for v in char.eigenvectors[:, i]))
    return "\n".join(lines) + "\n"


def format_pass(result: PassResult) -> str:
    """Full report for one pass."""
    return (
        format_bias(result.bias)
        + format_residuals(result.residuals)
        + format_stationary_point(result)
    )
