"""
Anpass — polynomial potential-energy surface fitting.

Reads displacement/energy tables, drives the surface → stationary →
forceconstants packages through the two-pass recentering pipeline,
and writes reports and force-constant files.

Example:
    >>> from anpass import run_anpass
    >>> result = run_anpass('anpass.in')
    >>> print(result.final.characterization.kind)  # MINIMUM
"""

from anpass.cli import run_anpass
from anpass.config import load_config
from anpass.io import AnpassInput, read_input

__all__ = [
    'run_anpass',
    'load_config',
    'AnpassInput',
    'read_input',
]
