#!/usr/bin/env python3
"""
edabrt Library - Quick Example
==============================

This example demonstrates basic usage of the edabrt library.
"""

import numpy as np

from edabrt import DeflectorAberrations, DeflectorConfig, RowSelector, TermSelector


def main():
    print("🚀 edabrt Library - Quick Example")
    print("=" * 50)

    config = DeflectorConfig.example()
    print(f"   - Radius: {config.radius} m")
    print(f"   - Central angle: {config.angle_degrees}°")
    print(f"   - n1 = {config.n1}, n2 = {config.n2}")

    aberrations = DeflectorAberrations(config)
    print(f"\n🔬 Regime: {aberrations.regime.name}\n")
    print(aberrations.render_report())

    # Single coefficient
    xaa = aberrations.coefficient(RowSelector.X, TermSelector.AA)
    print(f"(x|aa) = {xaa:.6e}")

    # Tabular view
    df = aberrations.get_coefficient_data()
    print(f"\n📊 {len(df)} non-zero coefficients")
    print(df.to_string(index=False))

    # Angle scan
    angles = np.linspace(0, 90, 10)
    xx = aberrations.scan_angle(angles, RowSelector.X, TermSelector.X)
    print("\n(x|x) against the central angle:")
    for angle, value in zip(angles, xx):
        print(f"   {angle:6.1f}°  {value: .6f}")

    fig = aberrations.plot_angle_scan()
    print(f"\n📈 Angle scan figure with {len(fig.axes)} panels created")


if __name__ == "__main__":
    main()
