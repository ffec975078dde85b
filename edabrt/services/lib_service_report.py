import sys
from dataclasses import dataclass
from typing import Callable, List, Tuple

import pandas as pd

from ..config import N_VARIABLES, MAX_ORDER
from ..engine.lib_monomials import monomials
from ..engine.lib_regimes import evaluate


HEADER = "     I  COEFFICIENT           ORDER EXPONENTS"
ALL_ZERO = "     ALL COMPONENTS ZERO"
SEPARATOR = "     --------------------------------------"


@dataclass(frozen=True)
class ReportRow:
    """One non-zero coefficient of a report."""
    index: int
    coefficient: float
    order: int
    exponents: Tuple[int, ...]

    def format(self) -> str:
        exponents = " ".join(str(e) for e in self.exponents)
        return f"     {self.index} {self.coefficient: 16.15e}   {self.order}   {exponents}"


def collect_rows(config, row, evaluator: Callable = evaluate,
                 n_variables: int = N_VARIABLES, max_order: int = MAX_ORDER) -> List[ReportRow]:
    """
    Evaluates every monomial up to max_order for one output row and keeps
    the ones whose coefficient is not exactly zero.

    Args:
        config: DeflectorConfig of the deflector
        row: RowSelector (or 1/2) of the reported coordinate
        evaluator: callable (config, row, exponents) -> float
        n_variables, max_order: monomial bounds, only 2 and 2 have formulas

    Returns:
        list of ReportRow numbered from 1
    """
    rows = []
    for order, exponents in monomials(n_variables, max_order):
        coefficient = evaluator(config, row, exponents)
        if coefficient != 0:
            rows.append(ReportRow(len(rows) + 1, float(coefficient), order, exponents))
    return rows


def format_rows(rows: List[ReportRow]) -> List[str]:
    """Text lines of one report block, terminated by the separator."""
    if rows:
        lines = [HEADER] + [r.format() for r in rows]
    else:
        lines = [ALL_ZERO]
    lines.append(SEPARATOR)
    return lines


def print_aberrations(config, row, evaluator: Callable = evaluate, file=None) -> List[ReportRow]:
    """Prints the report block of one row and returns its rows."""
    rows = collect_rows(config, row, evaluator=evaluator)
    for line in format_rows(rows):
        print(line, file=file or sys.stdout)
    return rows


def rows_to_dataframe(rows_by_label) -> pd.DataFrame:
    """Flattens {row label: [ReportRow]} into one table."""
    data = []
    for label, rows in rows_by_label.items():
        for r in rows:
            data.append({
                'row': label,
                'index': r.index,
                'coefficient': r.coefficient,
                'order': r.order,
                'exponents': " ".join(str(e) for e in r.exponents),
            })
    return pd.DataFrame(data, columns=['row', 'index', 'coefficient', 'order', 'exponents'])
