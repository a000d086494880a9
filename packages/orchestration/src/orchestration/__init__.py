"""
Orchestration package.

Runs a fit pass in correct order:
bias → surface fit → stationary point → characterization → force constants

and drives the fixed two-pass recentering protocol.
No math lives here. Only wiring.
"""

from orchestration.config import RunConfig
from orchestration.pipeline import Pipeline, PassResult, RunResult, apply_bias

__all__ = ['RunConfig', 'Pipeline', 'PassResult', 'RunResult', 'apply_bias']
