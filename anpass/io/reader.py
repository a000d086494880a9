"""
Input reader for anpass data files.

    ! comment lines start with a bang
    title / count lines              ignored
    (3F12.8,F20.12)                  format card: data rows follow
    d_1 ... d_m  energy              one row per point
    UNKNOWNS                         ends the data block
    FUNCTION                         exponent rows follow (m rows of k)
    END OF DATA                      ends the exponent block
    STATIONARY POINT                 bias row(s) follow: m coords + energy

Usage:
    from anpass.io.reader import read_input
    data = read_input('anpass.in')
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

import numpy as np


@dataclass
class AnpassInput:
    """Parsed contents of an anpass input file."""
    displacements: np.ndarray  # (n, m)
    energies: np.ndarray       # (n,)
    exponents: np.ndarray      # (m, k)
    bias: np.ndarray           # (m + 1,)
    stationary: bool = False

    @property
    def n_points(self) -> int:
        return self.displacements.shape[0]

    @property
    def n_variables(self) -> int:
        return self.displacements.shape[1]

    @property
    def n_terms(self) -> int:
        return self.exponents.shape[1]


def _floats(fields: List[str], line_no: int) -> List[float]:
    try:
        return [float(f.replace('D', 'E').replace('d', 'e')) for f in fields]
    except ValueError as e:
        raise ValueError(f"line {line_no}: {e}") from e


def _ints(fields: List[str], line_no: int) -> List[int]:
    try:
        return [int(f) for f in fields]
    except ValueError as e:
        raise ValueError(f"line {line_no}: {e}") from e


def parse_input(text: str) -> AnpassInput:
    """Parse anpass input text. See module docstring for the layout."""
    rows: List[List[float]] = []
    energies: List[float] = []
    exponents: List[int] = []
    bias: List[float] = []
    stationary = False
    section = None

    for line_no, line in enumerate(text.splitlines(), start=1):
        if line.startswith('!'):
            continue
        if '(' in line:
            section = 'data'
        elif 'UNKNOWNS' in line:
            section = None
        elif 'FUNCTION' in line:
            section = 'function'
        elif 'END OF DATA' in line:
            section = None
        elif 'STATIONARY POINT' in line:
            stationary = True
            section = 'stationary'
        elif section is not None:
            fields = line.split()
            if not fields:
                continue
            if section == 'data':
                values = _floats(fields, line_no)
                if len(values) < 2:
                    raise ValueError(f"line {line_no}: data row needs displacements and an energy")
                if rows and len(values) - 1 != len(rows[0]):
                    raise ValueError(
                        f"line {line_no}: {len(values) - 1} displacements, expected {len(rows[0])}"
                    )
                rows.append(values[:-1])
                energies.append(values[-1])
            elif section == 'function':
                exponents.extend(_ints(fields, line_no))
            else:
                bias.extend(_floats(fields, line_no))

    if not rows:
        raise ValueError("no displacement data found")
    n_vars = len(rows[0])
    if not exponents or len(exponents) % n_vars:
        raise ValueError(
            f"{len(exponents)} exponents cannot be split over {n_vars} variables"
        )
    if not bias:
        bias = [0.0] * (n_vars + 1)
    if len(bias) != n_vars + 1:
        raise ValueError(f"stationary point has {len(bias)} values, expected {n_vars + 1}")

    return AnpassInput(
        displacements=np.array(rows, dtype=np.float64),
        energies=np.array(energies, dtype=np.float64),
        exponents=np.array(exponents, dtype=np.int64).reshape(n_vars, -1),
        bias=np.array(bias, dtype=np.float64),
        stationary=stationary,
    )


def read_input(path: Union[str, Path]) -> AnpassInput:
    """Read and parse an anpass input file."""
    return parse_input(Path(path).read_text())
