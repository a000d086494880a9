"""Tabular export of force constants."""

from typing import List

import polars as pl

from forceconstants.extract import ForceConstant


def to_frame(force_constants: List[ForceConstant]) -> pl.DataFrame:
    """One row per force constant: i, j, k, l, value."""
    return pl.DataFrame(
        {
            'i': [fc.coords[0] for fc in force_constants],
            'j': [fc.coords[1] for fc in force_constants],
            'k': [fc.coords[2] for fc in force_constants],
            'l': [fc.coords[3] for fc in force_constants],
            'value': [fc.value for fc in force_constants],
        },
        schema={'i': pl.Int64, 'j': pl.Int64, 'k': pl.Int64, 'l': pl.Int64, 'value': pl.Float64},
    )
