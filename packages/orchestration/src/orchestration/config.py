"""
Run configuration.

Every tunable of a fit / root-finding run. One RunConfig is handed to
the pipeline and threaded into each pass; nothing is module-global.
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Dict

from forceconstants.extract import HARTREE_TO_AJ
from stationary.newton import DAMPING, MAX_ITERATIONS, TOLERANCE
from surface.inverse import CONDITION_LIMIT
from surface.model import THR


@dataclass(frozen=True)
class RunConfig:
    """Numerical settings and run-mode flags."""
    threshold: float = THR
    max_iterations: int = MAX_ITERATIONS
    damping: float = DAMPING
    tolerance: float = TOLERANCE
    condition_limit: float = CONDITION_LIMIT
    unit_conversion: float = HARTREE_TO_AJ
    once: bool = False    # skip the recentered second pass
    quiet: bool = False   # suppress reports and numerical warnings
    debug: bool = False   # log Newton-Raphson iterations

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> 'RunConfig':
        """Build from a mapping; unknown keys are rejected."""
        known = {f.name: f for f in fields(cls)}
        unknown = sorted(set(values) - set(known))
        if unknown:
            raise ValueError(f"Unknown config keys: {unknown}. Available: {sorted(known)}")
        coerced = {}
        for key, value in values.items():
            kind = type(getattr(cls, key))
            if kind is bool and not isinstance(value, bool):
                raise ValueError(f"Config key '{key}' must be true or false, got {value!r}")
            if kind is int and (
                isinstance(value, bool) or (isinstance(value, float) and not value.is_integer())
            ):
                raise ValueError(f"Config key '{key}' must be an integer, got {value!r}")
            # PyYAML reads 1e-10 (no decimal point) as a string
            coerced[key] = kind(value)
        return cls(**coerced)

    def with_overrides(self, **overrides: Any) -> 'RunConfig':
        """Copy with the given fields replaced; None values are ignored."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
