from enum import Enum, IntEnum
from typing import Iterator, Optional, Tuple


class RowSelector(IntEnum):
    """Final phase-space coordinate whose expansion is reported."""
    X = 1  # position
    A = 2  # angle

    @property
    def label(self) -> str:
        return self.name.lower()


class TermSelector(Enum):
    """
    Monomials of the initial coordinates (x, a) with a known analytic
    coefficient. The value is the exponent pair (e0, e1).
    """
    X = (1, 0)
    A = (0, 1)
    XX = (2, 0)
    XA = (1, 1)
    AA = (0, 2)

    @property
    def exponents(self) -> Tuple[int, int]:
        return self.value

    @property
    def order(self) -> int:
        return sum(self.value)

    @classmethod
    def from_exponents(cls, exponents) -> Optional['TermSelector']:
        """Look up the selector for an exponent tuple, None if it has no entry."""
        try:
            return cls(tuple(exponents))
        except ValueError:
            return None


def monomial_exponents(n_variables: int, order: int) -> Iterator[Tuple[int, ...]]:
    """
    Yields every tuple of n_variables non-negative exponents summing to order.

    Tuples come in descending lexicographic order, so the leftmost variable
    carries the full order first:

    >>> list(monomial_exponents(2, 2))
    [(2, 0), (1, 1), (0, 2)]
    """
    if n_variables < 1 or order < 0:
        return
    if n_variables == 1:
        yield (order,)
        return
    for first in range(order, -1, -1):
        for rest in monomial_exponents(n_variables - 1, order - first):
            yield (first,) + rest


def monomials(n_variables: int, max_order: int) -> Iterator[Tuple[int, Tuple[int, ...]]]:
    """Yields (order, exponents) for every order from 1 up to max_order."""
    for order in range(1, max_order + 1):
        for exponents in monomial_exponents(n_variables, order):
            yield order, exponents
