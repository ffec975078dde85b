import numpy as np
import numba
from scipy import constants


# Regime identifiers understood by the kernels below
OSCILLATORY = 0  # n1 < 3
HYPERBOLIC = 1   # n1 > 3
DEGENERATE = 2   # n1 == 3

DEGREE = constants.degree


@numba.jit(nopython=True, cache=True)
def _numba_oscillatory(row, e0, e1, n1, n2, h, k, s):
    """
    Coefficients for n1 < 3, where k = h*sqrt(3 - n1).

    Returns 0 for any (row, e0, e1) outside the first and second order table.
    """
    ks = k * s
    if row == 1:
        if e0 == 1 and e1 == 0:
            return np.cos(ks)
        if e0 == 0 and e1 == 1:
            return np.sin(ks) / k
        if e0 == 2 and e1 == 0:
            return (-4 * h * (9 * n1 + 2 * n2 - 15 + (6 * n1 + n2 - 12) * np.cos(ks))
                    * np.sin(ks / 2) ** 2 / (3 * (n1 - 3)))
        if e0 == 1 and e1 == 1:
            return (-2 * h ** 3 * (3 - 3 * n1 - n2 + (6 * n1 + n2 - 12) * np.cos(ks))
                    * np.sin(ks) / (3 * (h * h * (3 - n1)) ** 1.5))
        if e0 == 0 and e1 == 2:
            return (-4 * (3 - 3 * n1 - n2 + (6 * n1 + n2 - 12) * np.cos(ks))
                    * np.sin(ks / 2) ** 2 / (3 * h * (n1 - 3) ** 2))
    elif row == 2:
        if e0 == 1 and e1 == 0:
            return -k * np.sin(ks)
        if e0 == 0 and e1 == 1:
            return np.cos(ks)
        if e0 == 2 and e1 == 0:
            return (2 * h ** 3 * (3 * n1 + n2 - 3)
                    * (np.sin(ks) + np.sin(2 * ks)) / (3 * k))
        if e0 == 1 and e1 == 1:
            return (-4 * h * (3 * n1 + n2 - 3) * (1 + 2 * np.cos(ks))
                    * np.sin(ks / 2) ** 2 / (3 * (n1 - 3)))
        if e0 == 0 and e1 == 2:
            return (-2 * h ** 3 * (15 - 9 * n1 - 2 * n2 + 2 * (3 * n1 + n2 - 3) * np.cos(ks))
                    * np.sin(ks) / (3 * (h * h * (3 - n1)) ** 1.5))
    return 0.0


@numba.jit(nopython=True, cache=True)
def _numba_hyperbolic(row, e0, e1, n1, n2, h, k, s):
    """
    Coefficients for n1 > 3, where k = h*sqrt(n1 - 3).

    Returns 0 for any (row, e0, e1) outside the first and second order table.
    """
    ks = k * s
    if row == 1:
        if e0 == 1 and e1 == 0:
            return np.cosh(ks)
        if e0 == 0 and e1 == 1:
            return -np.sinh(ks) / k
        if e0 == 2 and e1 == 0:
            return (h * (4 * (3 * n1 + n2 - 3) * np.cosh(ks)
                         - 3 * (4 * n1 + n2 - 6) * (2 * np.cosh(2 * ks) - 1)
                         - (6 + n2) * np.cosh(4 * ks))
                    / (6 * (n1 - 3)))
        if e0 == 1 and e1 == 1:
            return ((4 * (3 * n1 + n2 - 3) * np.sinh(ks) - (6 + n2) * np.sinh(4 * ks))
                    / (6 * (n1 - 3) ** 1.5))
        if e0 == 0 and e1 == 2:
            return (-(4 * (9 * n1 + 2 * n2 - 15) * np.cosh(ks)
                      - 3 * (4 * n1 + n2 - 6) * (2 * np.cosh(2 * ks) + 1)
                      + (6 + n2) * np.cosh(4 * ks))
                    / (6 * h * (n1 - 3) ** 2))
    elif row == 2:
        if e0 == 1 and e1 == 0:
            return k * np.sinh(ks)
        if e0 == 0 and e1 == 1:
            return np.cosh(ks)
        if e0 == 2 and e1 == 0:
            return (2 * h ** 3 * (3 * n1 + n2 - 3)
                    * (np.sinh(ks) + np.sinh(2 * ks)) / (3 * k))
        if e0 == 1 and e1 == 1:
            return (2 * h * (3 * n1 + n2 - 3) * (np.cosh(2 * ks) - np.cosh(ks))
                    / (3 * (n1 - 3)))
        if e0 == 0 and e1 == 2:
            return (2 * (15 - 9 * n1 - 2 * n2 + 2 * (3 * n1 + n2 - 3) * np.cosh(ks))
                    * np.sinh(ks) / (3 * (n1 - 3) ** 1.5))
    return 0.0


@numba.jit(nopython=True, cache=True)
def _numba_degenerate(row, e0, e1, n1, n2, h, k, s):
    """Coefficients for n1 == 3; polynomial in the arc length s."""
    if row == 1:
        if e0 == 1 and e1 == 0:
            return 1.0
        if e0 == 0 and e1 == 1:
            return s
        if e0 == 2 and e1 == 0:
            return h * h * h * (6 + n2) * s * s
        if e0 == 1 and e1 == 1:
            return 2 * h * s + h * h * h * (6 + n2) * s * s * s / 3
        if e0 == 0 and e1 == 2:
            return h * s * s * (6 + h * h * (6 + n2) * s * s) / 6
    elif row == 2:
        if e0 == 1 and e1 == 0:
            return 0.0
        if e0 == 0 and e1 == 1:
            return 1.0
        if e0 == 2 and e1 == 0:
            return 2 * h * h * h * (6 + n2) * s
        if e0 == 1 and e1 == 1:
            return h * h * h * (6 + n2) * s * s
        if e0 == 0 and e1 == 2:
            return 2 * h * s * (h * h * (6 + n2) * s * s - 3) / 3
    return 0.0


@numba.jit(nopython=True, cache=True)
def _numba_coefficient(kind, row, e0, e1, n1, n2, h, k, s):
    if kind == OSCILLATORY:
        return _numba_oscillatory(row, e0, e1, n1, n2, h, k, s)
    if kind == HYPERBOLIC:
        return _numba_hyperbolic(row, e0, e1, n1, n2, h, k, s)
    return _numba_degenerate(row, e0, e1, n1, n2, h, k, s)


@numba.jit(nopython=True, cache=True)
def _numba_angle_scan(kind, row, e0, e1, n1, n2, radius, k, angles_degrees):
    """
    Evaluates one coefficient for every central angle in angles_degrees.

    The wavenumber k depends only on n1 and the radius, so it is shared by
    the whole scan.
    """
    h = 1 / radius
    out = np.empty(angles_degrees.size, dtype=np.float64)
    for i in range(angles_degrees.size):
        s = radius * DEGREE * angles_degrees[i]
        out[i] = _numba_coefficient(kind, row, e0, e1, n1, n2, h, k, s)
    return out
