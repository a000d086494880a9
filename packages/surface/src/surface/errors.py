"""
Error taxonomy for surface fitting and root finding.

    ExponentError          exponent table outside 0..4     fatal
    IllConditionedWarning  near-singular matrix inverted   recoverable
    NumericalFailure       inverse is singular / non-finite fatal
"""


class ExponentError(ValueError):
    """Exponent table entry (or total term degree) outside the supported range."""


class NumericalFailure(ArithmeticError):
    """Matrix inversion produced no usable result."""


class IllConditionedWarning(RuntimeWarning):
    """Matrix was inverted, but its condition number is beyond the limit."""
