# demos/calculator/add.py
"""Addition subcommand"""

from aliasargs.cli.subcommand import Subcommand
from aliasargs.core.values import ValueType


def adder() -> Subcommand:
    """Get the subcommand for addition"""
    sub = Subcommand("add", "Add two numbers together.")
    sub.add_required(["first", "f"], "first integer argument", ValueType.INT)
    sub.add_required(["second", "s"], "second integer argument", ValueType.INT)
    sub.example("with mixed arguments", "calculator add -f 1 -second 34", "35")
    sub.example("again with flags", "calculator add -f=1 --second=34", "35")

    @sub.handle
    def add(handler: Subcommand) -> None:
        print(handler.get_int("f") + handler.get_int("s"))

    return sub
