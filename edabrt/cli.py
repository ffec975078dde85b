"""
Command-line interface for the edabrt library.
"""

import argparse
import sys

from .core import DeflectorAberrations
from .config import DeflectorConfig


BANNER = """\
----------------------------------------------------------
      edabrt: Electrostatic Deflector Aberrations
                 E. Valetov & M. Berz
                  Created 25-Jan-2018
                Email: valetove@msu.edu
----------------------------------------------------------"""

HELP = """
This program computes the first and second order aberrations of an electrostatic deflector
in the horizontal x-a plane using exact analytic formulas.

INTERACTIVE MODE
Run the program and follow the prompts to specify the electrostatic deflector parameters.

COMMAND-LINE ARGUMENTS
Electrostatic deflector parameters may be optionally supplied using the command line:
edabrt [r ang n1 n2] [--help]
    r          Reference orbit radius in meters
    ang        Central angle spanning the deflector in degrees
    n1         First order electrostatic field inhomogeneity coefficient
    n2         Second order electrostatic field inhomogeneity coefficient
    --verbose  Print the solution regime
    --help     This information

The formulas are derived in E. Valetov and M. Berz, Derivation of Analytic
Formulas for Electrostatic Deflector Aberrations, and Comparison with the
Code COSY INFINITY, MSUHEP-180212, Michigan State University (2018)."""

TRY_HELP = "Try 'edabrt --help' for more information."


class UsageError(Exception):
    """Bad command-line arguments."""


HELP_FLAGS = ("-h", "/h", "--help")
VERBOSE_FLAGS = ("-v", "--verbose")


def build_parser():
    parser = argparse.ArgumentParser(prog="edabrt", add_help=False)
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser


def split_arguments(argv):
    """
    Separates the option flags from the parameter values.

    Only the verbose flags are options; every other token, including
    negative numbers such as -1e-3, is kept in order as a value.
    """
    flags = [token for token in argv if token in VERBOSE_FLAGS]
    values = [token for token in argv if token not in VERBOSE_FLAGS]
    return build_parser().parse_args(flags), values


def _as_float(value):
    try:
        return float(value)
    except ValueError:
        raise UsageError(f"edabrt: invalid option -- {value}\n{TRY_HELP}") from None


def parse_config(values):
    """
    DeflectorConfig from the positional arguments, UsageError if unusable.

    With four values they are read in order and the radius is checked as
    soon as it is read; otherwise the first non-numeric value is reported
    before the argument count.
    """
    if len(values) != 4:
        for value in values:
            _as_float(value)
        raise UsageError(f"edabrt: 4 numerical arguments expected, "
                         f"{len(values)} supplied\n{TRY_HELP}")
    parsed = []
    for value in values:
        parsed.append(_as_float(value))
        if len(parsed) == 1 and parsed[0] <= 0:
            raise UsageError("edabrt: supplied radius r is not positive")
    try:
        return DeflectorConfig(*parsed)
    except ValueError as e:
        raise UsageError(f"edabrt: {e}") from None


def prompt_float(message, input_fn=input, positive=False):
    """Ask until the answer parses as a number (and is positive if requested)."""
    while True:
        print(message)
        answer = input_fn("> ")
        try:
            value = float(answer)
        except ValueError:
            print("Not a numerical value.")
            continue
        if positive and value <= 0:
            print("The radius must be positive.")
            continue
        return value


def prompt_config(input_fn=input):
    """Interactive acquisition of the four deflector parameters."""
    r = prompt_float("Please enter the reference orbit radius r in [m].", input_fn, positive=True)
    ang = prompt_float("Please enter the central angle ang spanning the deflector in [°].", input_fn)
    n1 = prompt_float("Please enter the first order inhomogeneity coefficient n1.", input_fn)
    n2 = prompt_float("Please enter the second order inhomogeneity coefficient n2.", input_fn)
    return DeflectorConfig(r, ang, n1, n2)


def echo_config(config):
    print(f"Reference radius r = {config.radius: 16.15e} m")
    print(f"Central angle ang = {config.angle_degrees: 16.15e}°")
    print(f"1st order inhomogeneity coefficient n1 = {config.n1: 16.15e}")
    print(f"2nd order inhomogeneity coefficient n2 = {config.n2: 16.15e}")


def main(argv=None, input_fn=input):
    """Main CLI entry point. Returns the process exit status."""
    if argv is None:
        argv = sys.argv[1:]

    print(BANNER)

    if argv and argv[0] in HELP_FLAGS:
        print(HELP)
        return 0

    args, values = split_arguments(argv)

    try:
        print()
        if values:
            config = parse_config(values)
            echo_config(config)
        else:
            config = prompt_config(input_fn)

        aberrations = DeflectorAberrations(config)
        if args.verbose:
            regime = aberrations.regime
            print(f"Regime: {regime.name}, wavenumber k = {regime.wavenumber: 16.15e} 1/m, "
                  f"arc length s = {config.arc_length: 16.15e} m")

        print()
        print(aberrations.render_report(), end="")

    except UsageError as e:
        print(e)
        return 1
    except (EOFError, KeyboardInterrupt):
        print("\nedabrt: input aborted")
        return 1
    except Exception as e:
        print(f"❌ Error: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
