"""
edabrt: Electrostatic Deflector Aberrations

A small library computing the first and second order aberrations of an
electrostatic deflector in the horizontal x-a plane from exact analytic
formulas.

This library provides:
- Aberration coefficients for the oscillatory, hyperbolic and degenerate field regimes
- Enumeration and printing of all non-zero coefficients up to second order
- Tabular export and angle scans of the coefficients
"""

__version__ = "1.0.0"
__author__ = "edabrt developers"

# Main imports for easy access
from .config import DeflectorConfig
from .core import DeflectorAberrations
from .engine.lib_monomials import RowSelector, TermSelector
from .engine.lib_regimes import evaluate

# Main exports
__all__ = ['DeflectorConfig', 'DeflectorAberrations', 'RowSelector', 'TermSelector', 'evaluate']
