# demos/calculator/main.py
"""Entry point for the calculator demo"""

import sys
from typing import Optional, Sequence

from aliasargs.cli.app import Cli
from aliasargs.demos.calculator.add import adder
from aliasargs.demos.calculator.divide import divider
from aliasargs.demos.calculator.multiply import multiplier
from aliasargs.demos.calculator.subtract import subtracter


def build_cli() -> Cli:
    cli = Cli("latest", "A simple calculator CLI app.")
    cli.add_subcommand(adder())
    cli.add_subcommand(subtracter())
    cli.add_subcommand(multiplier())
    cli.add_subcommand(divider())
    return cli


def main(argv: Optional[Sequence[str]] = None) -> int:
    return build_cli().run(argv)


if __name__ == "__main__":
    sys.exit(main())
