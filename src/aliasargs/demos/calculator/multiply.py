# demos/calculator/multiply.py
"""Multiplication subcommand"""

from aliasargs.cli.subcommand import Subcommand
from aliasargs.core.values import ValueType


def multiplier() -> Subcommand:
    """Get the subcommand for multiplication"""
    sub = Subcommand("multiply", "Multiply two numbers.")
    sub.add_required(["first", "f"], "first integer argument", ValueType.INT)
    sub.add_required(["second", "s"], "second integer argument", ValueType.INT)
    sub.example("with mixed arguments", "calculator multiply -f 2 -second 34", "68")
    sub.example("again with flags", "calculator multiply -f=3 --second=4", "12")

    @sub.handle
    def multiply(handler: Subcommand) -> None:
        print(handler.get_int("f") * handler.get_int("s"))

    return sub
