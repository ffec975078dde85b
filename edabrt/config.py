"""
Configuration management for electrostatic deflector aberration reports.
"""

import numbers
from dataclasses import dataclass
from typing import Sequence
import numpy as np
from scipy import constants


# Report bounds: the x-a plane has two phase-space variables and the
# analytic formulas stop at second order. Only {2} is valid for either.
N_VARIABLES = 2
MAX_ORDER = 2


@dataclass(frozen=True)
class DeflectorConfig:
    """Physical parameters of an electrostatic deflector."""

    radius: float         # reference orbit radius [m]
    angle_degrees: float  # central angle spanned by the deflector [deg]
    n1: float             # first order field inhomogeneity coefficient
    n2: float             # second order field inhomogeneity coefficient

    def __post_init__(self):
        """Validate the parameters."""
        for name in ('radius', 'angle_degrees', 'n1', 'n2'):
            value = getattr(self, name)
            if not isinstance(value, numbers.Real) or not np.isfinite(value):
                raise ValueError(f"{name} must be a finite number, got {value!r}")
        if self.radius <= 0:
            raise ValueError("supplied radius r is not positive")

    @property
    def arc_length(self) -> float:
        """Length of the reference orbit inside the deflector [m]."""
        return self.radius * constants.degree * self.angle_degrees

    @property
    def curvature(self) -> float:
        """Curvature of the reference orbit [1/m]."""
        return 1 / self.radius

    @classmethod
    def from_strings(cls, values: Sequence[str]) -> 'DeflectorConfig':
        """
        Build a configuration from four textual values (r, ang, n1, n2).

        Raises ValueError naming the first value that is not numeric.
        """
        if len(values) != 4:
            raise ValueError(f"4 numerical arguments expected, {len(values)} supplied")
        parsed = []
        for value in values:
            try:
                parsed.append(float(value))
            except ValueError:
                raise ValueError(f"invalid option -- {value}") from None
        return cls(*parsed)

    @classmethod
    def example(cls) -> 'DeflectorConfig':
        """A 30 degree deflector of 1 m radius with weak focusing."""
        return cls(radius=1.0, angle_degrees=30.0, n1=1.5, n2=0.5)
