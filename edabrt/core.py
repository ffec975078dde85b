"""
Main Deflector Aberration Module
================================

First and second order aberrations of an electrostatic deflector in the
horizontal x-a plane from exact analytic formulas.
"""

import io
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from .config import DeflectorConfig
from .engine import lib_regimes
from .engine.lib_monomials import RowSelector, TermSelector
from .services import lib_service_report


class DeflectorAberrations:
    """
    Aberration report of one electrostatic deflector.

    This class provides the main interface: single coefficients, the full
    text report for the x and a rows, a tabular view and scans of the
    coefficients over the central angle.
    """

    def __init__(self, config: Optional[DeflectorConfig] = None):
        """
        Args:
            config: DeflectorConfig object. If None, uses DeflectorConfig.example().
        """
        self.config = config or DeflectorConfig.example()
        self.regime = lib_regimes.select_regime(self.config)
        self.rows = None

    def coefficient(self, row, term) -> float:
        """Coefficient (row|term); 0.0 for combinations without a formula."""
        return self.regime.coefficient(row, term)

    def compute_report(self) -> Dict[str, List[lib_service_report.ReportRow]]:
        """Collect the non-zero coefficients of the x and a rows."""
        self.rows = {
            row.label: lib_service_report.collect_rows(self.config, row, evaluator=self._evaluate)
            for row in RowSelector
        }
        return self.rows

    def _evaluate(self, config, row, term):
        return self.regime.coefficient(row, term)

    def render_report(self) -> str:
        """Full report text as printed by the command-line tool."""
        if self.rows is None:
            self.compute_report()
        out = io.StringIO()
        print("First and second order aberrations in the x-a plane:\n", file=out)
        for row in RowSelector:
            print(f"({row.label}|...)", file=out)
            for line in lib_service_report.format_rows(self.rows[row.label]):
                print(line, file=out)
        return out.getvalue()

    def get_results(self) -> Dict[str, Any]:
        """Get all report results."""
        if self.rows is None:
            self.compute_report()
        return {
            'config': self.config,
            'regime': self.regime.name,
            'wavenumber': self.regime.wavenumber,
            'arc_length': self.config.arc_length,
            'rows': self.rows,
        }

    def get_coefficient_data(self) -> pd.DataFrame:
        """Get the non-zero coefficients as a pandas DataFrame."""
        if self.rows is None:
            self.compute_report()
        return lib_service_report.rows_to_dataframe(self.rows)

    def scan_angle(self, angles_degrees, row, term) -> np.ndarray:
        """
        Coefficient (row|term) for a range of central angles.

        The radius, n1 and n2 of the configuration are kept fixed.
        """
        return self.regime.angle_scan(angles_degrees, row, term)

    def plot_angle_scan(self, angles_degrees=None, fig=None):
        """
        Plot all coefficients against the central angle.

        Args:
            angles_degrees: angles to scan [deg]; defaults to 0 .. 2*ang
            fig: matplotlib figure to draw into, a new one if None

        Returns:
            the matplotlib figure
        """
        if angles_degrees is None:
            upper = 2 * self.config.angle_degrees if self.config.angle_degrees != 0 else 90.0
            angles_degrees = np.linspace(0, upper, 201)
        angles_degrees = np.asarray(angles_degrees, dtype=np.float64)

        if fig is None:
            fig = plt.figure(figsize=(12, 5))
        axes = fig.subplots(1, 2)
        fig.suptitle(f'Deflector aberrations, r = {self.config.radius:g} m, '
                     f'n1 = {self.config.n1:g}, n2 = {self.config.n2:g} ({self.regime.name})')

        for ax, row in zip(axes, RowSelector):
            for term in TermSelector:
                values = self.scan_angle(angles_degrees, row, term)
                ax.plot(angles_degrees, values, label=f'({row.label}|{term.name.lower()})')
            ax.axvline(self.config.angle_degrees, color='gray', linestyle='--', linewidth=0.8)
            ax.set_title(f'({row.label}|...)')
            ax.set_xlabel('Central angle (deg)')
            ax.set_ylabel('Coefficient')
            ax.legend()

        fig.tight_layout()
        return fig
