# demos/calculator/subtract.py
"""Subtraction subcommand"""

from aliasargs.cli.subcommand import Subcommand
from aliasargs.core.values import ValueType


def subtracter() -> Subcommand:
    """Get the subcommand for subtraction"""
    sub = Subcommand("subtract", "Subtract one number from another.")
    sub.add_required(["first", "f"], "first integer argument", ValueType.INT)
    sub.add_required(["second", "s"], "second integer argument", ValueType.INT)
    sub.example("with mixed arguments", "calculator subtract -f 1 -second 34", "-33")
    sub.example("again with flags", "calculator subtract -f=34 --second=1", "33")

    @sub.handle
    def subtract(handler: Subcommand) -> None:
        print(handler.get_int("f") - handler.get_int("s"))

    return sub
