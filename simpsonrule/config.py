"""Calculator configuration.

Defaults mirror the initial form values of the calculator UI. ``min_n`` and
``max_n`` are advisory slider bounds for a presentation layer (the MCP server
publishes them in its ``integrate_simpson`` schema); the engine only enforces
``n >= 2`` and even.

Environment variables (read by ``CalculatorConfig.from_env``):
    SR_X_DECIMALS: Decimal places recorded for sample abscissas.
    SR_VALUE_DECIMALS: Decimal places recorded for f(x), terms and the result.
    SR_PROBE_POINT: Where new expressions are probed for NaN.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class CalculatorConfig:
    default_a: float = 0.0
    default_b: float = 1.0
    default_n: int = 4
    default_expression: str = "x^2"

    x_decimals: int = 4
    value_decimals: int = 6
    probe_point: float = 1.0

    min_n: int = 2
    max_n: int = 100

    def __post_init__(self):
        if self.x_decimals < 0 or self.value_decimals < 0:
            raise ValueError(
                f"decimal places must be non-negative, got x={self.x_decimals}, "
                f"value={self.value_decimals}"
            )
        if self.min_n > self.max_n:
            raise ValueError(f"min_n ({self.min_n}) must not exceed max_n ({self.max_n})")

    @classmethod
    def from_env(cls, base: CalculatorConfig | None = None) -> CalculatorConfig:
        """Build a config from ``base`` (or defaults) plus SR_* overrides.

        Raises:
            ValueError: If an environment variable is set but malformed.
        """
        config = base or cls()
        overrides: dict[str, object] = {}

        x_decimals = os.environ.get("SR_X_DECIMALS", "")
        if x_decimals:
            overrides["x_decimals"] = _parse_env("SR_X_DECIMALS", x_decimals, int)

        value_decimals = os.environ.get("SR_VALUE_DECIMALS", "")
        if value_decimals:
            overrides["value_decimals"] = _parse_env("SR_VALUE_DECIMALS", value_decimals, int)

        probe_point = os.environ.get("SR_PROBE_POINT", "")
        if probe_point:
            overrides["probe_point"] = _parse_env("SR_PROBE_POINT", probe_point, float)

        return replace(config, **overrides) if overrides else config


def _parse_env(name: str, raw: str, convert):
    try:
        return convert(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be a valid {convert.__name__}, got {raw!r}") from None
