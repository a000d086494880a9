"""
Anpass run driver
=================

Reads an input file, runs the fit passes and writes every artifact:

    <input>.out            report for pass 1
    fort.9903              force constants of the authoritative pass
    anpass2.in             input re-centered on the pass-1 stationary point
    anpass2.out            report for pass 2
    <parquet dir>/         residuals_pass<N>.parquet, force_constants_pass<N>.parquet

All paths except the report and parquet directory sit beside the input.
"""

import logging
import warnings
from pathlib import Path
from typing import Optional, Union

from forceconstants.export import to_frame
from orchestration.config import RunConfig
from orchestration.pipeline import PassResult, Pipeline, RunResult
from surface.errors import IllConditionedWarning

from anpass.io.reader import read_input
from anpass.io.report import format_pass
from anpass.io.writer import (
    FORCE_CONSTANT_FILE,
    write_force_constants,
    write_recentered_input,
)

logger = logging.getLogger(__name__)


RECENTERED_INPUT = 'anpass2.in'
RECENTERED_OUTPUT = 'anpass2.out'


def default_outfile(infile: Path) -> Path:
    """anpass.in → anpass.out; any other name gets .out appended."""
    if infile.suffix == '.in':
        return infile.with_suffix('.out')
    return infile.with_name(infile.name + '.out')


def _write_report(path: Path, result: PassResult) -> None:
    path.write_text(format_pass(result))
    logger.info(f"report written to {path}")


def _write_parquet(directory: Path, result: RunResult) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    for n, p in enumerate(result.passes, start=1):
        p.residuals.to_frame().write_parquet(directory / f'residuals_pass{n}.parquet')
        to_frame(p.force_constants).write_parquet(directory / f'force_constants_pass{n}.parquet')


def run_anpass(
    infile: Union[str, Path],
    outfile: Optional[Union[str, Path]] = None,
    config: Optional[RunConfig] = None,
    parquet_dir: Optional[Union[str, Path]] = None,
) -> RunResult:
    """
    Fit, locate the stationary point, and write all outputs.

    Parameters
    ----------
    infile : path
        Anpass input file.
    outfile : path, optional
        Pass-1 report. Defaults to the input name with a .out suffix.
    config : RunConfig, optional
        Numerical settings and run flags.
    parquet_dir : path, optional
        Also write residual and force-constant tables as parquet.

    Returns
    -------
    RunResult with one or two passes.
    """
    config = config or RunConfig()
    infile = Path(infile)
    directory = infile.parent
    outfile = Path(outfile) if outfile else default_outfile(infile)

    data = read_input(infile)
    logger.info(
        f"{infile}: {data.n_points} points, {data.n_variables} coordinates, "
        f"{data.n_terms} terms"
    )

    pipeline = Pipeline(config)
    with warnings.catch_warnings():
        if config.quiet:
            warnings.simplefilter('ignore', IllConditionedWarning)
        result = pipeline.run(
            data.displacements,
            data.energies,
            data.exponents,
            bias=data.bias,
            stationary=data.stationary,
        )

    write_force_constants(directory / FORCE_CONSTANT_FILE, result.final.force_constants)
    if result.recentered:
        write_recentered_input(infile, directory / RECENTERED_INPUT, result.passes[0].long_line)

    if not config.quiet:
        _write_report(outfile, result.passes[0])
        if result.recentered:
            _write_report(directory / RECENTERED_OUTPUT, result.passes[1])

    if parquet_dir is not None:
        _write_parquet(Path(parquet_dir), result)

    return result
