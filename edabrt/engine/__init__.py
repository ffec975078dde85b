"""
Engine module for analytic deflector aberration coefficients.
"""

from . import lib_deflector_kernels
from . import lib_monomials
from . import lib_regimes

__all__ = ['lib_deflector_kernels', 'lib_monomials', 'lib_regimes']
