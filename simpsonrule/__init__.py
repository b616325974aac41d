"""simpsonrule: definite integrals of user expressions by Simpson's rule.

Example:
    >>> from simpsonrule import integrate
    >>> integrate(0, 1, 4, "x^2").value
    0.333333

The library is silent by default; see ``simpsonrule.logging_config``.
"""

import logging

logging.getLogger("simpsonrule").addHandler(logging.NullHandler())

from simpsonrule.calculator import EXAMPLE_FUNCTIONS, SimpsonCalculator
from simpsonrule.config import CalculatorConfig
from simpsonrule.errors import (
    CalculationError,
    ErrorKind,
    EvaluationError,
    ExpressionFault,
    InvalidBounds,
    InvalidExpression,
    InvalidIntervalCount,
    ValidationError,
)
from simpsonrule.expression import (
    CompiledExpression,
    ExpressionCheck,
    check_expression,
    compile_expression,
    evaluate,
)
from simpsonrule.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    enable_file_logging,
    enable_json_file_logging,
    enable_json_logging,
    set_level,
    set_module_level,
)
from simpsonrule.numerics import integrate, run, simpson_coefficient, validate
from simpsonrule.result import (
    CalculationOutcome,
    CalculationResult,
    IntegrationParameters,
    SampleStep,
)

__version__ = "0.1.0"

__all__ = [
    # Calculator
    "EXAMPLE_FUNCTIONS",
    "CalculatorConfig",
    "SimpsonCalculator",
    # Errors
    "CalculationError",
    "ErrorKind",
    "EvaluationError",
    "ExpressionFault",
    "InvalidBounds",
    "InvalidExpression",
    "InvalidIntervalCount",
    "ValidationError",
    # Expression evaluator
    "CompiledExpression",
    "ExpressionCheck",
    "check_expression",
    "compile_expression",
    "evaluate",
    # Quadrature
    "integrate",
    "run",
    "simpson_coefficient",
    "validate",
    # Results
    "CalculationOutcome",
    "CalculationResult",
    "IntegrationParameters",
    "SampleStep",
    # Logging
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_file_logging",
    "enable_json_logging",
    "set_level",
    "set_module_level",
]
