"""
Analytic aberration formulas of an electrostatic deflector in the x-a plane.

The field index n1 splits the solutions into three families. For n1 < 3 the
linear motion is oscillatory with wavenumber k = h*sqrt(3 - n1), for n1 > 3
it is hyperbolic with k = h*sqrt(n1 - 3), and n1 = 3 is the polynomial limit
between the two. Each family is a regime object holding its wavenumber; the
formulas themselves are numba kernels in lib_deflector_kernels.

Reference: E. Valetov and M. Berz, Derivation of Analytic Formulas for
Electrostatic Deflector Aberrations, and Comparison with the Code COSY
INFINITY, MSUHEP-180212, Michigan State University (2018).
"""

import numbers

import numpy as np

from .lib_deflector_kernels import (
    OSCILLATORY, HYPERBOLIC, DEGENERATE,
    _numba_coefficient, _numba_angle_scan,
)
from .lib_monomials import TermSelector


class DeflectorRegime:
    """Base class of the three solution families."""

    kind = None
    name = None

    def __init__(self, config):
        self.config = config
        self.n1 = float(config.n1)
        self.n2 = float(config.n2)
        self.h = float(config.curvature)
        self.s = float(config.arc_length)
        self.wavenumber = self._wavenumber()

    def _wavenumber(self) -> float:
        raise NotImplementedError

    def coefficient(self, row, term) -> float:
        """
        Coefficient of the monomial term in the expansion of row.

        term is a TermSelector or an exponent tuple (e0, e1). Combinations
        without an analytic formula give exactly 0.0.
        """
        exponents = _exponents(term)
        if exponents is None or row not in (1, 2):
            return 0.0
        return float(_numba_coefficient(self.kind, int(row), exponents[0], exponents[1],
                                        self.n1, self.n2, self.h, self.wavenumber, self.s))

    def angle_scan(self, angles_degrees, row, term) -> np.ndarray:
        """Coefficient of one term for each central angle in angles_degrees [deg]."""
        angles = np.ascontiguousarray(angles_degrees, dtype=np.float64)
        exponents = _exponents(term)
        if exponents is None or row not in (1, 2):
            return np.zeros(angles.shape)
        return _numba_angle_scan(self.kind, int(row), exponents[0], exponents[1],
                                 self.n1, self.n2, float(self.config.radius),
                                 self.wavenumber, angles.ravel()).reshape(angles.shape)

    def __repr__(self):
        return f"{type(self).__name__}(n1={self.n1}, k={self.wavenumber})"


class OscillatoryRegime(DeflectorRegime):
    """n1 < 3: focusing field, trigonometric solutions."""
    kind = OSCILLATORY
    name = 'oscillatory'

    def _wavenumber(self):
        return float(self.h * np.sqrt(3 - self.n1))


class HyperbolicRegime(DeflectorRegime):
    """n1 > 3: defocusing field, hyperbolic solutions."""
    kind = HYPERBOLIC
    name = 'hyperbolic'

    def _wavenumber(self):
        return float(self.h * np.sqrt(self.n1 - 3))


class DegenerateRegime(DeflectorRegime):
    """n1 = 3: polynomial solutions in the arc length."""
    kind = DEGENERATE
    name = 'degenerate'

    def _wavenumber(self):
        return 0.0


def select_regime(config) -> DeflectorRegime:
    """Pick the solution family for the field index config.n1."""
    if config.n1 < 3:
        return OscillatoryRegime(config)
    if config.n1 > 3:
        return HyperbolicRegime(config)
    return DegenerateRegime(config)


def evaluate(config, row, term) -> float:
    """Aberration coefficient (row|term) of the deflector described by config."""
    return select_regime(config).coefficient(row, term)


def _exponents(term):
    if isinstance(term, TermSelector):
        return term.exponents
    if isinstance(term, (str, bytes)):
        return None
    try:
        exponents = tuple(term)
    except TypeError:
        return None
    if not all(isinstance(e, numbers.Integral) for e in exponents):
        return None
    exponents = tuple(int(e) for e in exponents)
    if len(exponents) != 2 or min(exponents) < 0:
        return None
    return exponents
