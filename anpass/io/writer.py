"""
File writers: force-constant file and recentered input file.

Force-constant file (fort.9903), one line per constant:

        1    1    0    0      8.358958979225
    %5d  %5d  %5d  %5d  %20.12f
"""

from pathlib import Path
from typing import Iterable, List, Union

import numpy as np

from forceconstants.extract import ForceConstant

from anpass.io.report import format_long_line


FORCE_CONSTANT_FILE = 'fort.9903'


def format_force_constants(force_constants: Iterable[ForceConstant]) -> str:
    lines = []
    for fc in force_constants:
        lines.append("".join(f"{c:5d}" for c in fc.coords) + f"{fc.value:20.12f}")
    return "\n".join(lines) + "\n" if lines else ""


def write_force_constants(path: Union[str, Path], force_constants: Iterable[ForceConstant]) -> Path:
    """Write a force-constant file. Returns the path written."""
    path = Path(path)
    path.write_text(format_force_constants(force_constants))
    return path


def read_force_constants(path: Union[str, Path]) -> List[ForceConstant]:
    """Parse a force-constant file; lines without exactly five fields are skipped."""
    result = []
    for line in Path(path).read_text().splitlines():
        fields = line.split()
        if len(fields) != 5:
            continue
        coords = tuple(int(f) for f in fields[:4])
        result.append(ForceConstant(coords=coords, value=float(fields[4])))
    return result


def write_recentered_input(
    infile: Union[str, Path],
    outfile: Union[str, Path],
    long_line: np.ndarray,
) -> Path:
    """
    Copy an input file, inserting the located stationary point before
    END OF DATA so the copy is fitted about that point.
    """
    outfile = Path(outfile)
    lines = []
    for line in Path(infile).read_text().splitlines():
        if 'END OF DATA' in line:
            lines.append('STATIONARY POINT')
            lines.append(format_long_line(long_line).rstrip("\n"))
        lines.append(line)
    outfile.write_text("\n".join(lines) + "\n")
    return outfile
