from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass

from ratalg.errors import EntryError


FORMAT_TYPES = ("integer", "rational", "decimal", "fraction")

RATALG_FORMAT = os.environ.get("RATALG_FORMAT", "rational")
RATALG_PRECISION = os.environ.get("RATALG_PRECISION", "10")


@dataclass(frozen=True)
class NumericMode:
    """
    Representation and rendering settings shared by every algorithm call.

    format_type:    "integer" | "rational" | "decimal" | "fraction".
                    "decimal" computes with floats, everything else with
                    RationalNumber; "integer" rounds rendered output.
    precision:      decimal digits for float rendering and the continued
                    fraction cut-off (10**-precision).
    max_iterations: cap on continued-fraction terms.
    zero_tolerance: |x| below this counts as zero for floats.
    display_limit:  fractions with a larger numerator or denominator are
                    rendered as decimals.
    max_order:      largest order accepted by the principal-minor expansion.
    """

    format_type: str = "rational"
    precision: int = 10
    max_iterations: int = 20
    zero_tolerance: float = 1e-10
    display_limit: int = 1_000_000
    max_order: int = 10

    def __post_init__(self) -> None:
        if self.format_type not in FORMAT_TYPES:
            raise EntryError(
                f"format_type must be one of {', '.join(FORMAT_TYPES)}; got {self.format_type!r}"
            )
        for name in ("precision", "max_iterations", "max_order", "display_limit"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise EntryError(f"{name} must be an int; got {value!r}")
        if not isinstance(self.zero_tolerance, (int, float)) or isinstance(self.zero_tolerance, bool):
            raise EntryError(f"zero_tolerance must be a number; got {self.zero_tolerance!r}")
        if self.precision < 0:
            raise EntryError("precision must be >= 0.")
        if self.max_iterations <= 0:
            raise EntryError("max_iterations must be positive.")
        if self.zero_tolerance < 0:
            raise EntryError("zero_tolerance must be >= 0.")
        if self.max_order <= 0:
            raise EntryError("max_order must be positive.")

    @property
    def exact(self) -> bool:
        """True when scalars are carried as RationalNumber."""
        return self.format_type != "decimal"

    def replace(self, **changes) -> NumericMode:
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_env(cls) -> NumericMode:
        """Mode built from RATALG_FORMAT / RATALG_PRECISION."""
        try:
            precision = int(RATALG_PRECISION)
        except ValueError:
            raise EntryError(f"RATALG_PRECISION must be an integer; got {RATALG_PRECISION!r}") from None
        return cls(format_type=RATALG_FORMAT, precision=precision)


DEFAULT_MODE = NumericMode()
