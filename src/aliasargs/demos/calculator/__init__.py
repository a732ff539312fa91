"""Calculator demo - one subcommand per arithmetic operation"""

from aliasargs.demos.calculator.add import adder
from aliasargs.demos.calculator.divide import divider
from aliasargs.demos.calculator.multiply import multiplier
from aliasargs.demos.calculator.subtract import subtracter

__all__ = [
    'adder',
    'divider',
    'multiplier',
    'subtracter'
]
