# demos/calculator/divide.py
"""Integer division subcommand"""

from aliasargs.cli.subcommand import Subcommand
from aliasargs.core.values import ValueType


def truncated_division(a: int, b: int) -> int:
    """Integer quotient rounded toward zero"""
    if b == 0:
        raise ValueError("cannot divide by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def divider() -> Subcommand:
    """Get the subcommand for integer division"""
    sub = Subcommand("divide", "Divide two numbers.")
    sub.add_required(["first", "f"], "first integer argument", ValueType.INT)
    sub.add_required(["second", "s"], "second integer argument", ValueType.INT)
    sub.example("with mixed arguments", "calculator divide -f 1 -second 34", "0")
    sub.example("again with flags", "calculator divide -f=4 --second=2", "2")

    @sub.handle
    def divide(handler: Subcommand) -> None:
        print(truncated_division(handler.get_int("f"), handler.get_int("s")))

    return sub
