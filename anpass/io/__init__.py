"""Reading anpass inputs, writing reports and force-constant files."""

from anpass.io.reader import AnpassInput, parse_input, read_input
from anpass.io.report import (
    format_bias,
    format_pass,
    format_residuals,
    format_stationary_point,
)
from anpass.io.writer import (
    FORCE_CONSTANT_FILE,
    format_force_constants,
    read_force_constants,
    write_force_constants,
    write_recentered_input,
)

__all__ = [
    'AnpassInput',
    'parse_input',
    'read_input',
    'format_bias',
    'format_pass',
    'format_residuals',
    'format_stationary_point',
    'FORCE_CONSTANT_FILE',
    'format_force_constants',
    'read_force_constants',
    'write_force_constants',
    'write_recentered_input',
]
