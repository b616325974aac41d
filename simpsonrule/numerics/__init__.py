"""Numerical quadrature.

Provides fixed-step composite Simpson's rule with a per-node trace:
- ``validate``: check parameters and compile the integrand
- ``run``: sample, weight and sum
- ``integrate``: both, in order
"""

from simpsonrule.numerics.simpson import integrate, run, simpson_coefficient, validate

__all__ = [
    "integrate",
    "run",
    "simpson_coefficient",
    "validate",
]
